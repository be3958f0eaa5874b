"""Error payload for the release flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "no_token",
    "invalid_input",
    "invalid_config",
    "invalid_tag",
    "invalid_version",
    "not_found",
    "cancelled",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error payload.

    ``message`` names the offending value; ``hint`` suggests a fix or
    points at the file involved.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
