"""
Path utilities for settings storage and exclude matching.

This module provides the per-user configuration directory and conversion between dotted package names and slash paths.
All functions use pathlib.Path for cross-platform compatibility.

Examples:
    >>> from andproguard.utils.path_utils import get_config_directory, package_to_path
    >>> get_config_directory()
    PosixPath('/home/user/.andproguard')
    >>> package_to_path("com.example.ui")
    'com/example/ui'
"""

from __future__ import annotations

import platform as platform_module
from pathlib import Path, PurePosixPath

# Directory name under the user's home holding persisted settings
CONFIG_DIR_NAME = ".andproguard"

# Cache platform detection result
_PLATFORM_CACHE: str | None = None


def ensure_directory(path: Path) -> Path:
    """
    Create directory if it doesn't exist, return Path.

    Args:
        path: Directory path to create.

    Returns:
        The directory Path object.

    Raises:
        OSError: If directory creation fails.
    """
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_config_directory() -> Path:
    """
    Return the per-user directory holding persisted settings.

    The directory is not created here; callers use ensure_directory()
    before writing into it.

    Returns:
        Path to ``~/.andproguard``.
    """
    return Path.home() / CONFIG_DIR_NAME


def package_to_path(name: str) -> str:
    """
    Convert a dotted package name or a path into a normalized slash path.

    Backslashes and dots become forward slashes, and leading or trailing
    separators are dropped, so ``com.example``, ``com/example/`` and
    ``com\\example`` all map to the same value.

    Args:
        name: Package name (``com.example``) or relative path.

    Returns:
        Slash separated path without surrounding separators.

    Examples:
        >>> package_to_path("com.example.ui")
        'com/example/ui'
        >>> package_to_path("build/")
        'build'
    """
    cleaned = name.strip().replace("\\", "/").replace(".", "/")
    parts = [part for part in cleaned.split("/") if part]
    return str(PurePosixPath(*parts)) if parts else ""


def is_path_within(path: str, base: str) -> bool:
    """
    Check whether a package/path equals or lies below another one.

    Both arguments are normalized with package_to_path() first.

    Args:
        path: Candidate package name or path.
        base: Containing package name or path.

    Returns:
        True if path is base or one of its descendants.

    Examples:
        >>> is_path_within("com.example.ui.MainActivity", "com.example")
        True
        >>> is_path_within("com.examples", "com.example")
        False
    """
    candidate = package_to_path(path)
    container = package_to_path(base)
    if not container:
        return False
    return candidate == container or candidate.startswith(container + "/")


def get_platform() -> str:
    """
    Return current platform name.

    Returns:
        Platform name: "windows", "macos", or "linux".

    Note:
        Result is cached for performance.
    """
    global _PLATFORM_CACHE
    if _PLATFORM_CACHE is not None:
        return _PLATFORM_CACHE

    system = platform_module.system()
    if system == "Windows":
        _PLATFORM_CACHE = "windows"
    elif system == "Darwin":
        _PLATFORM_CACHE = "macos"
    elif system == "Linux":
        _PLATFORM_CACHE = "linux"
    else:
        _PLATFORM_CACHE = system.lower()

    return _PLATFORM_CACHE
