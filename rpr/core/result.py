"""Result type for explicit error handling.

Services return ``Ok(value)`` or ``Err(error)`` instead of raising for
expected failures (bad tags, unknown selections, missing token). Callers
branch with ``isinstance`` or structural pattern matching:

    match next_tag(release):
        case Ok(tag):
            console.info(f"tag: {tag}")
        case Err(error):
            console.error(error.pretty())

Unexpected failures (network, programming errors) are still exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    def unwrap(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding ``error``."""

    error: E

    def unwrap(self) -> None:
        """Raise, since there is no value.

        Raises:
            ValueError: Always, carrying the error.
        """
        raise ValueError(f"called unwrap on Err: {self.error}")

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]
