"""
Add-on directory scanning.

Walks the immediate subdirectories of an AddOns root, extracts a record for
each one, and groups attachments under their primary add-ons. A directory
that fails to extract is logged and recorded as a failure; the scan carries
on with the remaining add-ons.
"""

import logging
from pathlib import Path
from typing import List, Optional

from addonscan.attachments import DEFAULT_SEPARATOR, group_attachments
from addonscan.parsers.base import AddonIOError, ExtractorError
from addonscan.parsers.toc import TocExtractor
from addonscan.parsers.types import ScanFailure, ScanResult

logger = logging.getLogger(__name__)

ADDONS_SUBDIR = Path("Interface") / "AddOns"


def resolve_addons_root(game_path: Path, addons_subdir: Path = ADDONS_SUBDIR) -> Path:
    """Return the AddOns directory of a game installation."""
    return Path(game_path) / addons_subdir


def iter_addon_directories(root: Path) -> List[Path]:
    """
    List candidate add-on directories under an AddOns root.

    Only immediate subdirectories are returned, sorted by name. Hidden
    directories (leading dot) are skipped.

    Raises:
        AddonIOError: If the root does not exist or cannot be listed
    """
    root = Path(root)
    try:
        entries = list(root.iterdir())
    except OSError as e:
        raise AddonIOError(f"Cannot list add-ons root {root}: {e}", path=root) from e

    directories = [
        entry
        for entry in entries
        if entry.is_dir() and not entry.name.startswith(".")
    ]
    return sorted(directories, key=lambda entry: entry.name)


def scan_addons(
    root: Path,
    extractor: Optional[TocExtractor] = None,
    group: bool = True,
    separator: str = DEFAULT_SEPARATOR,
) -> ScanResult:
    """
    Extract every add-on under an AddOns root.

    Args:
        root: AddOns directory (e.g. <game>/Interface/AddOns)
        extractor: Extractor to use (defaults to a new TocExtractor)
        group: Whether to nest attachments under their primary add-on
        separator: Separator used when matching attachment names

    Returns:
        ScanResult with extracted records and per-directory failures

    Raises:
        AddonIOError: If the root itself cannot be listed
    """
    root = Path(root)
    extractor = extractor or TocExtractor()
    result = ScanResult(root=root)

    directories = iter_addon_directories(root)
    logger.info(f"Scanning {len(directories)} add-on directories in {root}")

    addons = []
    for directory in directories:
        try:
            addons.append(extractor.extract(directory))
        except ExtractorError as e:
            logger.warning(f"Skipping {directory.name}: {e}")
            result.failures.append(ScanFailure.from_exception(directory, e))

    result.addons = group_attachments(addons, separator=separator) if group else addons

    logger.info(
        f"Scan complete: {len(addons)} extracted, {result.failure_count} failed"
    )
    return result
