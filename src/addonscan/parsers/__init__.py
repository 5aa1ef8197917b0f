"""
Manifest extractors for installed add-ons.

This package turns add-on directories into Addon records by reading their
`.toc` manifests, and defines the errors raised along the way.
"""

from addonscan.parsers.base import (
    AddonIOError,
    ExtractorError,
    ManifestNotFoundError,
    MissingTitleError,
)
from addonscan.parsers.toc import (
    ManifestFields,
    TocExtractor,
    extract_addon,
    find_manifest,
    parse_toc_lines,
    strip_detail,
)
from addonscan.parsers.types import ScanFailure, ScanResult

__all__ = [
    "ExtractorError",
    "AddonIOError",
    "ManifestNotFoundError",
    "MissingTitleError",
    "ManifestFields",
    "TocExtractor",
    "extract_addon",
    "find_manifest",
    "parse_toc_lines",
    "strip_detail",
    "ScanFailure",
    "ScanResult",
]
