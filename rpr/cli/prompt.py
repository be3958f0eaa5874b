"""Interactive fuzzy selection backed by questionary."""

from __future__ import annotations

from collections.abc import Sequence

import questionary

from rpr.services.release.choices import Choice, ChoiceOrSeparator


def to_questionary(item: ChoiceOrSeparator) -> questionary.Choice | questionary.Separator:
    if isinstance(item, Choice):
        return questionary.Choice(
            title=item.name,
            value=item.value,
            disabled="unavailable" if item.disabled else None,
            description=item.description,
        )
    return questionary.Separator(item.label) if item.label else questionary.Separator()


class QuestionaryPrompt:
    """Arrow keys to move, typing filters by substring (case-insensitive)."""

    async def choose(
        self,
        message: str,
        choices: Sequence[ChoiceOrSeparator],
        *,
        default: str | None = None,
    ) -> str | None:
        question = questionary.select(
            message,
            choices=[to_questionary(c) for c in choices],
            default=default,
            use_search_filter=True,
            use_jk_keys=False,
        )
        answer = await question.ask_async()
        if not isinstance(answer, str):
            return None
        return answer
