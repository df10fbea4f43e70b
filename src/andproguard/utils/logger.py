"""
Logging setup for the AndProguard settings application.

Every module logs through a child of the ``andproguard`` logger. The entry
point configures that root once with a console handler and a rotating file
handler; child loggers obtained with get_logger() propagate to it.

Examples:
    >>> from andproguard.utils.logger import setup_logger, get_logger
    >>> setup_logger("andproguard", level="DEBUG", log_file=Path("logs/andproguard.log"))
    >>> logger = get_logger("andproguard.core.settings_store")
    >>> logger.info("Settings loaded")
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from .path_utils import ensure_directory

# Name of the application root logger
ROOT_LOGGER_NAME = "andproguard"

# Valid log levels
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Default log format strings
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotating file handler limits
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _level_value(level: str) -> int:
    """Translate a level name into its logging constant."""
    if level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {VALID_LOG_LEVELS}")
    return getattr(logging, level.upper())


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_file: Path | None = None
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Adds a console handler and, when log_file is given, a rotating file
    handler. Calling it again for the same name does not add duplicates.

    Args:
        name: Logger name, usually ``andproguard``.
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file.

    Returns:
        Configured logger instance.

    Raises:
        ValueError: If level is not a valid log level.

    Note:
        File logs use detailed format at DEBUG, console logs use simple format.
    """
    level_value = _level_value(level)

    logger = logging.getLogger(name)
    logger.setLevel(level_value)

    has_file_handler = any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.handlers.RotatingFileHandler)
        for h in logger.handlers
    )

    if not has_console_handler:
        add_console_handler(logger, level)

    if log_file is not None and not has_file_handler:
        add_file_handler(logger, log_file, level="DEBUG")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve a module logger.

    If neither the logger nor any ancestor has handlers yet (for example when
    a module is imported by a test before the entry point ran), the logger is
    set up with defaults so messages are not lost.

    Args:
        name: Logger name, e.g. ``andproguard.gui.main_window``.

    Returns:
        Logger instance.
    """
    logger = logging.getLogger(name)

    if logger.hasHandlers():
        return logger

    return setup_logger(name)


def set_log_level(logger: logging.Logger, level: str) -> None:
    """
    Change logging level dynamically.

    Args:
        logger: Logger instance to modify.
        level: New logging level.

    Raises:
        ValueError: If level is not valid.
    """
    logger.setLevel(_level_value(level))


def add_file_handler(
    logger: logging.Logger,
    log_file: Path,
    level: str = "DEBUG"
) -> None:
    """
    Add a rotating file handler to logger.

    Creates the log directory if needed. Files rotate at 10MB, keeping
    5 backups.

    Args:
        logger: Logger instance to modify.
        log_file: Path to log file.
        level: Logging level for file handler.

    Raises:
        ValueError: If level is not valid.
        OSError: If log directory cannot be created.
    """
    level_value = _level_value(level)

    ensure_directory(log_file.parent)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding='utf-8'
    )
    file_handler.setLevel(level_value)
    file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(file_handler)


def add_console_handler(logger: logging.Logger, level: str = "INFO") -> None:
    """
    Add console output handler to logger.

    Args:
        logger: Logger instance to modify.
        level: Logging level for console handler.

    Raises:
        ValueError: If level is not valid.
    """
    level_value = _level_value(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level_value)
    console_handler.setFormatter(logging.Formatter(SIMPLE_FORMAT))

    logger.addHandler(console_handler)


def get_log_directory() -> Path:
    """
    Return the default logs directory path (relative to the working directory).

    The directory is not created here.
    """
    return Path("logs")
