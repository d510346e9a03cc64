"""Result type for decode outcomes.

Every decoder run produces exactly one of ``Ok`` or ``Err``. Failure is an
ordinary value; exceptions are reserved for misuse of the API (see
``UnwrapError``).
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from typing import Any, Never

from pluck.errors import UnwrapError


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """A successful decode carrying the decoded value."""

    value: T

    def __str__(self) -> str:
        return f"Ok({self.value!r})"

    def is_error(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> Never:
        raise UnwrapError(
            f"can't unwrap_error {self}",
            hint="Check is_error() before extracting the error.",
        )

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step onto the value."""
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed decode carrying a human-readable message."""

    error: E

    def __str__(self) -> str:
        return f"Err({self.error!r})"

    def is_error(self) -> bool:
        return True

    def unwrap(self) -> Never:
        raise UnwrapError(
            f"can't unwrap {self}",
            hint="Check is_error() before extracting the value.",
        )

    def unwrap_error(self) -> E:
        return self.error

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self


type Result[T, E] = Ok[T] | Err[E]
