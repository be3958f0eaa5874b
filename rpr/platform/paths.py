"""User-level paths.

The history file lives directly in the home directory, next to other
dotfiles, so it survives reinstalls of the tool.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from .detection import is_windows

__all__ = [
    "CONFIG_FILE_NAME",
    "home",
    "default_config_path",
    "clear_caches",
]

CONFIG_FILE_NAME = ".release-pull-request"


@lru_cache(maxsize=1)
def home() -> Path:
    """Get user's home directory.

    Uses USERPROFILE on Windows, HOME on Unix, then Path.home().
    """
    if is_windows():
        userprofile = os.environ.get("USERPROFILE")
        if userprofile:
            return Path(userprofile)
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            return Path(home_env)

    return Path.home()


def default_config_path() -> Path:
    return home() / CONFIG_FILE_NAME


def clear_caches() -> None:
    """Forget cached paths (tests change HOME between cases)."""
    home.cache_clear()
