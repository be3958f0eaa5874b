"""Ordering of prompt choices, with recently used entries grouped first."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias, Union


@dataclass(frozen=True, slots=True)
class Choice:
    """One selectable prompt entry. ``value`` is the unique key."""

    value: str
    name: str
    description: str | None = None
    disabled: bool = False

    @classmethod
    def of(cls, value: str) -> Choice:
        return cls(value=value, name=value)


@dataclass(frozen=True, slots=True)
class Separator:
    """Group marker between choices; ``None`` renders as a plain rule."""

    label: str | None = None


ChoiceOrSeparator: TypeAlias = Union[Choice, Separator]


def _sort_key(choice: Choice) -> str:
    return choice.value.lower()


def sort_choices(
    choices: Sequence[Choice],
    history: Sequence[str],
    recent_label: str,
    other_label: str,
) -> list[ChoiceOrSeparator]:
    """Order ``choices`` for display.

    Values found in ``history`` form a "recent" group shown first between
    labelled separators; the rest follow. Both groups are sorted
    case-insensitively. With no overlap the choices come back sorted and
    ungrouped. ``choices`` itself is never modified.
    """
    lookup: dict[str, Choice] = {}
    for choice in choices:
        lookup[choice.value] = choice

    recent: list[Choice] = []
    seen: set[str] = set()
    for item in history:
        if item in lookup and item not in seen:
            recent.append(lookup[item])
        seen.add(item)

    remaining = sorted((c for c in lookup.values() if c.value not in seen), key=_sort_key)
    if not recent:
        return list(remaining)

    return [
        Separator(recent_label),
        *sorted(recent, key=_sort_key),
        Separator(other_label),
        *remaining,
        Separator(),
    ]
