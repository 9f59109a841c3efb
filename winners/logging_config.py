"""Logging configuration for Rate Winners.

The library itself only creates module loggers under ``winners``; entry
points call ``setup_logging`` once to attach handlers.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from winners.settings import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(
    config: Optional[Settings] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure logging for the ``winners`` package.

    Level and log file come from ``config`` (the global settings by
    default); explicit arguments override them. Repeated calls leave the
    existing handlers in place.

    Args:
        config: Settings supplying log_level and log_file
        level: Log level name overriding config.log_level
        log_file: Rotating log file path overriding config.log_file

    Returns:
        The ``winners`` package logger
    """
    config = config or default_settings
    level = level or config.log_level
    log_file = log_file or config.log_file

    root = logging.getLogger()
    package_logger = logging.getLogger("winners")

    if root.handlers:
        return package_logger

    root.setLevel(resolve_level(level))
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=3)
        )

    for handler in handlers:
        handler.setFormatter(fmt)
        root.addHandler(handler)

    package_logger.debug("Logging configured at %s (file=%s)", level.upper(), log_file or "-")
    return package_logger
