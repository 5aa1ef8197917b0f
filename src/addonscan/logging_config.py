"""
Logging configuration for addonscan.

Console output goes to stderr so command output on stdout stays clean.
File logging is optional and rotates by size under the XDG state directory.
"""

import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from addonscan.config import Settings, settings

PACKAGE_LOGGER = "addonscan"
STANDARD_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter()
    return logging.Formatter(STANDARD_FORMAT)


def setup_logging(
    context: str = "cli",
    level: Optional[str] = None,
    config: Optional[Settings] = None,
) -> logging.Logger:
    """
    Configure the addonscan package logger.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        context: Name of the running entry point, used for the log file name
        level: Log level override (defaults to config.log_level)
        config: Settings to read from (defaults to the global settings)

    Returns:
        The configured package logger

    Raises:
        PermissionError: If the log directory cannot be created
    """
    config = config or settings
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel((level or config.log_level).upper())
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _build_formatter(config.log_format)

    if config.log_console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file_enabled:
        log_dir = config.log_directory
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / f"{context}.log",
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
