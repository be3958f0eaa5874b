"""Process-level settings: environment variables and the config path.

Everything the tool reads from the environment goes through
``RuntimeEnv`` so tests can hand in a plain dict and a temp path.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from rpr.platform.paths import default_config_path

__all__ = [
    "TOKEN_ENV_VAR",
    "OPEN_PR_ENV_VAR",
    "CONFIG_ENV_VAR",
    "RuntimeEnv",
    "parse_bool",
]

TOKEN_ENV_VAR = "RELEASE_PULL_REQUEST_TOKEN"
OPEN_PR_ENV_VAR = "RELEASE_PULL_REQUEST_OPEN_PR"
CONFIG_ENV_VAR = "RELEASE_PULL_REQUEST_CONFIG"

_TRUTHY = frozenset({"1", "true", "yes"})


def parse_bool(value: str | None) -> bool:
    """Exact, case-sensitive match against "1", "true" and "yes"."""
    if not value:
        return False
    return value in _TRUTHY


@dataclass(frozen=True, slots=True)
class RuntimeEnv:
    environ: Mapping[str, str] = field(default_factory=dict)
    config_path: Path = field(default_factory=default_config_path)

    @classmethod
    def from_process(cls) -> RuntimeEnv:
        environ = dict(os.environ)
        override = environ.get(CONFIG_ENV_VAR)
        config_path = Path(override).expanduser() if override else default_config_path()
        return cls(environ=environ, config_path=config_path)

    def token(self, explicit: str | None = None) -> str | None:
        """Explicit option first, then the environment."""
        if explicit:
            return explicit
        return self.environ.get(TOKEN_ENV_VAR) or None

    def open_pr(self, explicit: bool | None = None) -> bool:
        if explicit is not None:
            return explicit
        return parse_bool(self.environ.get(OPEN_PR_ENV_VAR))
