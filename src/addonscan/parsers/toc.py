"""
World of Warcraft `.toc` manifest extractor.

Every add-on directory under Interface/AddOns carries a `.toc` file whose
metadata lives in comment lines of the form:

    ## Title: Bagnon
    ## Version: 10.2.7
    ## Notes: Single window inventory

Only Title and Version are read; other keys and plain lines (the file list)
are ignored so new manifest keys never break extraction.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from addonscan.models.addon import Addon
from addonscan.parsers.base import (
    AddonIOError,
    ManifestNotFoundError,
    MissingTitleError,
)

logger = logging.getLogger(__name__)

MANIFEST_EXTENSION = ".toc"
METADATA_MARKER = "## "
TITLE_PREFIX = "Title: "
VERSION_PREFIX = "Version: "


@dataclass
class ManifestFields:
    """Fields recognised in a manifest, before they become an Addon."""

    title: Optional[str] = None
    version: Optional[str] = None


def strip_detail(prefix: str, line: str) -> Optional[str]:
    """
    Remove a leading prefix from a line.

    Only the leading occurrence is removed; the prefix text appearing later in
    the line is left alone.

    Args:
        prefix: Literal prefix the line must start with (e.g., "## ")
        line: Line to test

    Returns:
        The remainder of the line, or None if the line does not start
        with the prefix

    Example:
        >>> strip_detail("## ", "## Title: Bagnon")
        'Title: Bagnon'
        >>> strip_detail("## ", "Bagnon.lua") is None
        True
    """
    if line.startswith(prefix):
        return line[len(prefix) :]
    return None


def parse_toc_lines(lines: Iterable[str]) -> ManifestFields:
    """
    Collect recognised metadata from manifest lines.

    When a key appears more than once, the last occurrence wins.

    Args:
        lines: Manifest lines, with or without trailing newlines

    Returns:
        ManifestFields with whatever Title/Version values were found
    """
    fields = ManifestFields()

    for raw_line in lines:
        detail = strip_detail(METADATA_MARKER, raw_line.rstrip("\r\n"))
        if detail is None:
            continue

        title = strip_detail(TITLE_PREFIX, detail)
        if title is not None:
            fields.title = title
            continue

        version = strip_detail(VERSION_PREFIX, detail)
        if version is not None:
            fields.version = version
            continue

        logger.debug("Ignoring unrecognised manifest key: %s", detail)

    return fields


def find_manifest(directory: Path) -> Path:
    """
    Locate the `.toc` manifest inside an add-on directory.

    Some add-ons ship one manifest per game flavour (Bagnon.toc,
    Bagnon_Vanilla.toc). A manifest named after the directory is preferred;
    otherwise the lexicographically smallest name is used so repeated scans
    always pick the same file.

    Args:
        directory: Add-on directory to search (not recursive)

    Returns:
        Path to the selected manifest

    Raises:
        AddonIOError: If the directory cannot be listed
        ManifestNotFoundError: If no manifest file is present
    """
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise AddonIOError(
            f"Cannot list add-on directory {directory}: {e}", path=directory
        ) from e

    candidates = sorted(
        (
            entry
            for entry in entries
            if entry.name.lower().endswith(MANIFEST_EXTENSION) and entry.is_file()
        ),
        key=lambda entry: entry.name,
    )
    if not candidates:
        raise ManifestNotFoundError(directory)

    for candidate in candidates:
        if candidate.stem == directory.name:
            return candidate

    if len(candidates) > 1:
        logger.debug(
            "Multiple manifests in %s, using %s", directory, candidates[0].name
        )
    return candidates[0]


class TocExtractor:
    """Builds Addon records from add-on directories holding `.toc` manifests."""

    def read_manifest(self, manifest_path: Path) -> ManifestFields:
        """
        Read and parse one manifest file.

        The file is decoded as UTF-8 (a leading byte-order mark is dropped);
        undecodable bytes are replaced rather than aborting the read.

        Raises:
            AddonIOError: If the manifest cannot be opened or read
        """
        try:
            with manifest_path.open("r", encoding="utf-8-sig", errors="replace") as f:
                return parse_toc_lines(f)
        except OSError as e:
            raise AddonIOError(
                f"Cannot read manifest {manifest_path}: {e}", path=manifest_path
            ) from e

    def extract(self, directory: Path) -> Addon:
        """
        Build an Addon record from an add-on directory.

        Args:
            directory: Existing add-on directory

        Returns:
            Addon with title, version, and path populated

        Raises:
            AddonIOError: If the directory or manifest cannot be read, or no
                manifest is present
            MissingTitleError: If the manifest declares no Title
        """
        directory = Path(directory)
        manifest_path = find_manifest(directory)
        fields = self.read_manifest(manifest_path)

        if fields.title is None:
            raise MissingTitleError(manifest_path)

        logger.debug(
            "Extracted %s (version=%s) from %s",
            fields.title,
            fields.version,
            manifest_path,
        )
        return Addon(
            title=fields.title,
            version=fields.version,
            path=directory,
            update_site=None,
            attachments=None,
        )


_default_extractor = TocExtractor()


def extract_addon(directory: Path) -> Addon:
    """Extract an Addon using the shared default extractor."""
    return _default_extractor.extract(directory)
