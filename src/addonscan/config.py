"""
addonscan Configuration.

Centralized configuration management using Pydantic Settings.
Loads configuration from environment variables.
"""

import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_xdg_state_dir() -> str:
    """
    Get XDG-compliant state directory for addonscan logs.

    Follows XDG Base Directory Specification:
    - Uses $XDG_STATE_HOME/addonscan if XDG_STATE_HOME is set
    - Falls back to $HOME/.local/state/addonscan if not set
    - Returns relative path ./logs if HOME not available (dev/testing)

    Returns:
        str: Path to state/logs directory
    """
    xdg_state_home = os.getenv("XDG_STATE_HOME")
    if xdg_state_home:
        return str(Path(xdg_state_home) / "addonscan" / "logs")

    home = os.getenv("HOME")
    if home:
        return str(Path(home) / ".local" / "state" / "addonscan" / "logs")

    # Fallback for development/testing environments without HOME
    return "./logs"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Game installation
    classic_wow_path: str = ""  # Game root; AddOns live beneath it
    addons_subdir: str = "Interface/AddOns"
    attachment_separator: str = Field("_", min_length=1)

    @property
    def addons_directory(self) -> Optional[Path]:
        """AddOns root derived from the game path, or None when unset."""
        if not self.classic_wow_path:
            return None
        return Path(self.classic_wow_path).expanduser() / self.addons_subdir

    # Logging
    log_level: str = "WARNING"
    log_dir: str = ""  # XDG-compliant log directory (defaults to XDG state dir if empty)
    log_format: str = "standard"  # standard or json
    log_console_enabled: bool = True  # Enable console (stderr) logging
    log_file_enabled: bool = False  # Enable file-based logging
    log_max_bytes: int = 1_048_576  # 1MB per log file
    log_backup_count: int = 3  # Keep 3 backup files

    @property
    def log_directory(self) -> Path:
        """Get the log directory path, using XDG default if not specified."""
        if self.log_dir:
            return Path(self.log_dir).expanduser()
        return Path(get_xdg_state_dir())


# Global settings instance
settings = Settings()
