"""Result[T, E] for the LEI pipeline.

Every parse/build entry point returns Ok[LEI] or Err[LEIError] instead of
raising. Callers pattern-match or query is_ok()/is_err().
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, final

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the value, returning Ok(f(value))."""
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        """No-op on Ok."""
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise RuntimeError: an Ok holds no error."""
        raise RuntimeError(f"Called unwrap_err on Ok: {self.value}")

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error variant of Result."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """No-op on Err: short-circuits."""
        return self

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the error, returning Err(f(error))."""
        return Err(f(self.error))

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError with the user-facing rendering of the error."""
        raise RuntimeError(f"Called unwrap on Err: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Ok[T] | Err[E]


def unwrap(result: Ok[T] | Err[Any]) -> T:
    """Extract Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")
