"""Result type for explicit error handling.

Every fallible step of a publish run (building the request, talking to the
API, reading the uploads directory) returns ``Ok(value)`` or ``Err(error)``
instead of raising. Callers decide what is fatal: a failed release creation
ends the run, a failed asset upload only produces a warning.

Usage:
    match create_release(http, target, request, console):
        case Ok(release):
            print(release.html_url)
        case Err(error):
            print(f"error: {error.message}")
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def map_err(self, f: Callable[[E], F]) -> Ok[T]:
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result.

    Attributes:
        error: The error value, usually a frozen dataclass with a ``kind``
            and a ``message``.
    """

    error: E

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply ``f`` to the contained error."""
        return Err(f(self.error))

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
