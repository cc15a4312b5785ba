"""
Platform utility functions for the host environment.

This module provides utilities for:
- Looking up the installed package version
- Detecting the OS family, path separator and primary shortcut modifier
- Splitting file names off paths
- Bootstrapping the application config directory
"""

import os
import platform
from functools import lru_cache
from importlib.metadata import version, PackageNotFoundError
from typing import Optional

from subkit.config import get_settings


OS_TYPES = {
    'linux': 'linux',
    'darwin': 'macos',
    'windows': 'windows',
    'ios': 'ios',
    'android': 'android',
}


@lru_cache
def get_version() -> str:
    """Return the installed subkit version, or "?" when not installed."""
    try:
        return version("subkit")
    except PackageNotFoundError:
        return "?"


@lru_cache
def get_os_type() -> str:
    """
    Detect OS family.
    Returns: linux, macos, windows, ios, android, or the lowercased system name.
    """
    system = platform.system().lower()
    return OS_TYPES.get(system, system)


def get_path_separator() -> str:
    return os.sep


def get_ctrl_key() -> str:
    """Modifier key used for shortcuts: "Meta" on macOS, "Control" elsewhere."""
    return 'Meta' if get_os_type() == 'macos' else 'Control'


def get_filename(path: str, separator: Optional[str] = None) -> str:
    """Return the last path component ("" when the path ends in a separator)."""
    return path.split(separator or get_path_separator())[-1]


def approx(a: float, b: float, delta: float = 0.0001) -> bool:
    """Check whether two floats differ by less than delta."""
    return abs(a - b) < delta


def ensure_config_directory_exists(config_dir: Optional[str] = None) -> str:
    """
    Create the application config directory if it is missing.

    Args:
        config_dir: Directory to create. Defaults to settings.config_dir.

    Returns:
        Path of the config directory.
    """
    config_dir = config_dir or get_settings().config_dir
    if not os.path.exists(config_dir):
        os.makedirs(config_dir, exist_ok=True)
    return config_dir
