"""Open a URL with the platform's default handler."""

from __future__ import annotations

from collections.abc import Callable

from rpr.core.result import Result

from .detection import Platform, detect_platform
from .process import ProcessError, spawn_detached

__all__ = ["UrlOpener", "open_command", "open_with_system", "quote_if_required"]

UrlOpener = Callable[[str], Result[None, ProcessError]]

# `start` is a cmd builtin; the empty quoted string is the window title.
_OPENERS: dict[Platform, tuple[str, ...]] = {
    Platform.WINDOWS: ("cmd", "/c", "start", '""'),
    Platform.MACOS: ("open",),
}
_DEFAULT_OPENER: tuple[str, ...] = ("xdg-open",)


def quote_if_required(value: str) -> str:
    return f'"{value}"' if " " in value else value


def open_command(url: str, platform: Platform) -> list[str]:
    """Build the command that opens ``url`` on ``platform``.

    Only cmd re-parses its command line, so quoting is applied on Windows
    and the command is handed over verbatim there.
    """
    opener = _OPENERS.get(platform, _DEFAULT_OPENER)
    if platform == Platform.WINDOWS:
        return [*opener, quote_if_required(url)]
    return [*opener, url]


def open_with_system(url: str) -> Result[None, ProcessError]:
    platform = detect_platform()
    return spawn_detached(open_command(url, platform), verbatim=platform == Platform.WINDOWS)
