"""
Utility modules for paths and logging.

This package provides:
- Path helpers for the settings directory and exclude matching
- Logging infrastructure with console and rotating file output

Examples:
    >>> from andproguard.utils import get_logger, package_to_path
    >>> logger = get_logger("andproguard")
    >>> package_to_path("com.example")
    'com/example'
"""

from .path_utils import (
    ensure_directory,
    get_config_directory,
    package_to_path,
    is_path_within,
    get_platform,
)

from .logger import (
    setup_logger,
    get_logger,
    set_log_level,
    add_file_handler,
    add_console_handler,
    get_log_directory,
    ROOT_LOGGER_NAME,
    VALID_LOG_LEVELS,
)

__all__ = [
    "ensure_directory",
    "get_config_directory",
    "package_to_path",
    "is_path_within",
    "get_platform",
    "setup_logger",
    "get_logger",
    "set_log_level",
    "add_file_handler",
    "add_console_handler",
    "get_log_directory",
    "ROOT_LOGGER_NAME",
    "VALID_LOG_LEVELS",
]
