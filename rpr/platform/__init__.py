"""Platform abstraction layer."""

from .detection import Platform, detect_platform, is_windows
from .files import atomic_write_json, read_json
from .opener import UrlOpener, open_command, open_with_system, quote_if_required
from .paths import default_config_path, home
from .process import ProcessError, spawn_detached

__all__ = [
    # detection
    "Platform",
    "detect_platform",
    "is_windows",
    # files
    "atomic_write_json",
    "read_json",
    # opener
    "UrlOpener",
    "open_command",
    "open_with_system",
    "quote_if_required",
    # paths
    "default_config_path",
    "home",
    # process
    "ProcessError",
    "spawn_detached",
]
