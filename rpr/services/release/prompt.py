"""Selection prompt seam used by repository and pull request selection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rpr.services.release.choices import Choice, ChoiceOrSeparator, sort_choices


class PromptProtocol(Protocol):
    async def choose(
        self,
        message: str,
        choices: Sequence[ChoiceOrSeparator],
        *,
        default: str | None = None,
    ) -> str | None:
        """Return the chosen value, or None if the user cancelled."""
        ...


async def prompt_with_choices(
    prompt: PromptProtocol,
    message: str,
    values: Sequence[str],
    history: Sequence[str] = (),
    recent_label: str = "",
    other_label: str = "",
) -> str | None:
    ordered = sort_choices([Choice.of(v) for v in values], history, recent_label, other_label)
    # Default to the latest history entry only when it is on offer
    default = history[0] if history and history[0] in values else None
    return await prompt.choose(message, ordered, default=default)
