"""Operating system detection.

Only the OS family matters here: it decides which command opens a URL and
where the user's home directory comes from.
"""

from __future__ import annotations

import platform as _platform
from enum import Enum, auto
from functools import lru_cache

__all__ = [
    "Platform",
    "detect_platform",
    "is_windows",
]


class Platform(Enum):
    """Operating system platform."""

    LINUX = auto()
    MACOS = auto()
    WINDOWS = auto()
    UNKNOWN = auto()


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect the current operating system.

    Returns:
        Platform enum value for the current OS.
    """
    system = _platform.system().lower()
    if system == "linux":
        return Platform.LINUX
    if system == "darwin":
        return Platform.MACOS
    if system == "windows":
        return Platform.WINDOWS
    return Platform.UNKNOWN


def is_windows() -> bool:
    return detect_platform() == Platform.WINDOWS
