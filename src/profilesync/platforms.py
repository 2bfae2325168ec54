"""
Platform detection and home directory resolution.
"""

from __future__ import annotations

import os
import platform as _platform
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional

from common.exceptions import InvalidPlatformError


class Platform(Enum):
    """Operating system families with a known home directory layout."""
    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"
    UNKNOWN = "unknown"


# Platforms accepted on the command line
SUPPORTED_PLATFORMS = (Platform.LINUX, Platform.MACOS, Platform.WINDOWS)

_SYSTEM_NAMES = {
    "linux": Platform.LINUX,
    "darwin": Platform.MACOS,
    "windows": Platform.WINDOWS,
}


def detect_platform(system: Optional[str] = None) -> Platform:
    """
    Detect the platform of the running interpreter.

    Args:
        system: Override for platform.system() output

    Returns:
        Matching Platform, or Platform.UNKNOWN.
    """
    name = (system if system is not None else _platform.system()).lower()
    return _SYSTEM_NAMES.get(name, Platform.UNKNOWN)


def parse_platform(name: str) -> Platform:
    """
    Parse a user-supplied platform name.

    Raises:
        InvalidPlatformError: If the name is not linux, macos or windows.
    """
    normalized = (name or "").strip().lower()
    for candidate in SUPPORTED_PLATFORMS:
        if candidate.value == normalized:
            return candidate
    raise InvalidPlatformError(name, tuple(p.value for p in SUPPORTED_PLATFORMS))


def home_directory(platform: Platform, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the home directory for a platform from environment variables.

    Missing variables interpolate as empty strings, so for Platform.UNKNOWN
    without HOME the result is "". Callers decide whether that is an error.

    Args:
        platform: Platform whose layout rules apply
        environ: Environment mapping (default: os.environ)

    Returns:
        Home directory path as a string.
    """
    env = os.environ if environ is None else environ

    if platform == Platform.LINUX:
        return env.get("HOME") or "/home/" + env.get("USER", "")
    if platform == Platform.MACOS:
        return env.get("HOME") or "/Users/" + env.get("USER", "")
    if platform == Platform.WINDOWS:
        return env.get("USERPROFILE") or "C:\\Users\\" + env.get("USERNAME", "")
    return env.get("HOME", "")


def join_fragment(home_dir: str, fragment: str) -> Path:
    """
    Join a catalog fragment onto a home directory without normalizing it.

    Leading separators are dropped so an absolute fragment still lands
    under home_dir.
    """
    return Path(home_dir) / fragment.lstrip("/\\")
