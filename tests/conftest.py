"""
Pytest configuration and fixtures for addonscan tests.

Provides factories that lay out add-on directories with .toc manifests
under pytest's tmp_path.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import pytest


def write_toc(
    directory: Path,
    title: Optional[str] = None,
    version: Optional[str] = None,
    extra_lines: Optional[list[str]] = None,
    name: Optional[str] = None,
) -> Path:
    """Write a .toc manifest into an existing directory."""
    lines = ["## Interface: 11502"]
    if title is not None:
        lines.append(f"## Title: {title}")
    if version is not None:
        lines.append(f"## Version: {version}")
    lines.extend(extra_lines or [])
    lines.append("")
    lines.append(f"{directory.name}.lua")

    toc_path = directory / (name or f"{directory.name}.toc")
    toc_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return toc_path


@pytest.fixture
def addons_root(tmp_path: Path) -> Path:
    """An empty Interface/AddOns directory."""
    root = tmp_path / "Interface" / "AddOns"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def make_addon(addons_root: Path) -> Callable[..., Path]:
    """Factory creating an add-on directory with a manifest under addons_root."""

    def _make(
        dir_name: str,
        title: Optional[str] = None,
        version: Optional[str] = None,
        extra_lines: Optional[list[str]] = None,
    ) -> Path:
        directory = addons_root / dir_name
        directory.mkdir()
        write_toc(directory, title=title, version=version, extra_lines=extra_lines)
        return directory

    return _make


@pytest.fixture(name="write_toc")
def write_toc_fixture() -> Callable[..., Path]:
    """Expose write_toc to tests that lay out their own directories."""
    return write_toc


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so streams don't outlive a test."""
    yield
    logger = logging.getLogger("addonscan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
