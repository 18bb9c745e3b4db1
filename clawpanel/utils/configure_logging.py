"""Configure unified clawpanel logging."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(
    home: Path | None = None,
    level: str = "INFO",
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> None:
    """Configure the ``clawpanel`` logger with a rotating file handler.

    Args:
        home: Panel home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR
        max_bytes: Rotate the log file once it reaches this size
        backup_count: Number of rotated files to keep
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "clawpanel.log"

    root_logger = logging.getLogger("clawpanel")
    root_logger.setLevel(_LEVELS.get(level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def is_configured() -> bool:
    """Return True once configure_logging() has installed its handler."""
    return _CONFIGURED
