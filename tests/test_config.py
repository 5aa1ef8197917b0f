"""
Tests for configuration management.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from addonscan.config import Settings, get_xdg_state_dir


@pytest.fixture(autouse=True)
def clear_addonscan_env(monkeypatch):
    """Ensure the developer's environment doesn't leak into config tests."""
    for name in [
        "CLASSIC_WOW_PATH",
        "ATTACHMENT_SEPARATOR",
        "LOG_DIR",
        "LOG_LEVEL",
        "XDG_STATE_HOME",
    ]:
        monkeypatch.delenv(name, raising=False)
    yield


class TestSettings:
    """Tests for Settings configuration."""

    def test_addons_directory_unset(self):
        settings = Settings(_env_file=None)

        assert settings.classic_wow_path == ""
        assert settings.addons_directory is None

    def test_addons_directory_from_env(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("CLASSIC_WOW_PATH", str(tmp_path))

        settings = Settings(_env_file=None)

        assert settings.addons_directory == tmp_path / "Interface" / "AddOns"

    def test_custom_subdir(self, tmp_path: Path):
        settings = Settings(
            _env_file=None, classic_wow_path=str(tmp_path), addons_subdir="AddOns"
        )

        assert settings.addons_directory == tmp_path / "AddOns"

    def test_empty_attachment_separator_rejected(self):
        with pytest.raises(ValidationError, match="attachment_separator"):
            Settings(_env_file=None, attachment_separator="")

    def test_empty_attachment_separator_from_env_rejected(self, monkeypatch):
        monkeypatch.setenv("ATTACHMENT_SEPARATOR", "")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_default_logging_settings(self):
        settings = Settings(_env_file=None)

        assert settings.log_level == "WARNING"
        assert settings.log_format == "standard"
        assert settings.log_file_enabled is False

    def test_log_directory_override(self, tmp_path: Path):
        settings = Settings(_env_file=None, log_dir=str(tmp_path))

        assert settings.log_directory == tmp_path

    def test_log_directory_default(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))

        settings = Settings(_env_file=None)

        assert settings.log_directory == tmp_path / "addonscan" / "logs"


def test_xdg_state_dir_falls_back_to_home(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path))

    expected = tmp_path / ".local" / "state" / "addonscan" / "logs"
    assert get_xdg_state_dir() == str(expected)
