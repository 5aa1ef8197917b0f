"""
Scan result types.

Collects the records produced by a directory scan together with the
per-directory failures, so one broken add-on never hides the rest.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from addonscan.models.addon import Addon


@dataclass
class ScanFailure:
    """
    An add-on directory that could not be turned into a record.

    Attributes:
        path: Directory that failed
        error_type: Exception class name (e.g., "MissingTitleError")
        message: Human-readable description
    """

    path: Path
    error_type: str
    message: str

    @classmethod
    def from_exception(cls, path: Path, error: Exception) -> "ScanFailure":
        return cls(path=path, error_type=type(error).__name__, message=str(error))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "path": str(self.path),
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass
class ScanResult:
    """
    Output of scanning an add-ons root directory.

    Attributes:
        root: Directory that was scanned
        addons: Top-level records, ordered by directory name
        failures: Directories that could not be extracted
    """

    root: Path
    addons: List[Addon] = field(default_factory=list)
    failures: List[ScanFailure] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def has_failures(self) -> bool:
        """Whether any directory failed to extract."""
        return len(self.failures) > 0

    def versioned(self) -> List[Addon]:
        """Top-level records that declare a version."""
        return [addon for addon in self.addons if addon.version is not None]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "root": str(self.root),
            "addons": [addon.model_dump(mode="json") for addon in self.addons],
            "failures": [failure.to_dict() for failure in self.failures],
        }
