"""
Exception classes for add-on manifest extraction.

Every failure while turning an add-on directory into an Addon record is
raised as an ExtractorError subclass so callers scanning many directories
can skip one bad add-on and keep going.
"""

from pathlib import Path
from typing import Optional


class ExtractorError(Exception):
    """Base exception for all extraction errors."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class AddonIOError(ExtractorError):
    """Raised when a directory or manifest cannot be listed, opened, or read."""

    pass


class ManifestNotFoundError(AddonIOError):
    """Raised when an add-on directory holds no .toc manifest."""

    def __init__(self, directory: Path):
        super().__init__(f"No .toc manifest found in {directory}", path=directory)


class MissingTitleError(ExtractorError):
    """Raised when a manifest was read but declares no Title line."""

    def __init__(self, manifest_path: Path):
        super().__init__(
            f"Manifest has no '## Title: ' line: {manifest_path}",
            path=manifest_path,
        )
