"""
Result — the tagged Ok/Err union.

A Result[T, E] is either Ok(value: T) or Err(error: E). The error is whatever
was raised, stored untouched: no wrapping, no classification, no copying.

    ┌──────────┐   try_safe   ┌──────────────┐   unwrap   ┌──────────────────┐
    │   work   │─────────────→│ Ok  │  Err   │───────────→│ (value, error)   │
    └──────────┘              └──────────────┘            └──────────────────┘

Python-specific design choices:
  - Frozen slotted dataclasses, so match/case works out of the box:
    `case Ok(v)` / `case Err(e)`
  - `ok` is a read-only property, the discriminant is the class itself
  - unwrap() returns a NamedTuple, which gives both field and positional access
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, NamedTuple, TypeVar

from trysafe.errors import UnwrapError

if TYPE_CHECKING:
    from trysafe.outcome import Outcome

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class Unwrapped(NamedTuple, Generic[T, E]):
    """Flat projection of a Result: exactly one side carries data."""

    value: T | None
    error: E | None


class Result(Generic[T, E]):
    """
    Base of the two Result variants.

    Never instantiated directly: use ok()/err() or the adapters in
    trysafe.invoke.

        >>> ok(21).map(lambda x: x * 2)
        Ok(value=42)
        >>> err("boom").value_or(0)
        0
    """

    __slots__ = ()

    # ──────────────────────── Introspection ────────────────────────

    @property
    def ok(self) -> bool:
        raise NotImplementedError

    def is_ok(self) -> bool:
        """Check if this Result is an Ok."""
        return isinstance(self, Ok)

    def is_err(self) -> bool:
        """Check if this Result is an Err."""
        return isinstance(self, Err)

    # ──────────────────────── Transformations ────────────────────────

    def either(self, on_ok: Callable[[T], R], on_err: Callable[[E], R]) -> R:
        """
        Apply one of two functions depending on the variant.

            result.either(
                on_ok=lambda user: f"Hello {user.name}",
                on_err=lambda e: f"Error: {e}",
            )
        """
        match self:
            case Ok(value):
                return on_ok(value)
            case Err(error):
                return on_err(error)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        """Transform the Ok value. An Err passes through unchanged."""
        match self:
            case Ok(value):
                return Ok(mapper(value))
        return self  # type: ignore[return-value]

    def map_err(self, mapper: Callable[[E], F]) -> Result[T, F]:
        """Transform the Err payload. An Ok passes through unchanged."""
        match self:
            case Err(error):
                return Err(mapper(error))
        return self  # type: ignore[return-value]

    # ──────────────────────── Extraction ────────────────────────

    def value_or(self, default: T) -> T:
        """Extract the value or return a default on Err."""
        match self:
            case Ok(value):
                return value
        return default

    def value_or_else(self, fallback: Callable[[E], T]) -> T:
        """Extract the value or compute one from the error."""
        return self.either(lambda value: value, fallback)

    def expect(self, message: str = "") -> T:
        """
        Extract the value, raising UnwrapError on Err.

        Prefer either() or match/case for safe access.
        """
        match self:
            case Ok(value):
                return value
            case Err(error):
                cause = error if isinstance(error, BaseException) else None
                raise UnwrapError(
                    message or f"Expected Ok but got Err({error!r})", error
                ) from cause
        raise TypeError("unreachable")  # pragma: no cover

    def to_outcome(self) -> Outcome[T, E]:
        """Convert to the dual-shape (data, error) Outcome."""
        from trysafe.outcome import Outcome

        match self:
            case Ok(value):
                return Outcome.success(value)
            case Err(error):
                return Outcome.failure(error)
        raise TypeError("unreachable")  # pragma: no cover

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Ok."""
        return self.is_ok()


@dataclass(frozen=True, slots=True)
class Ok(Result[T, E]):
    """The success variant — wraps a value of type T. None is a valid value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err(Result[T, E]):
    """The failure variant — wraps the captured error exactly as received."""

    error: E

    @property
    def ok(self) -> bool:
        return False


# ──────────────────────── Factories ────────────────────────


def ok(value: T) -> Ok[T, Any]:
    """Create an Ok wrapping the given value."""
    return Ok(value)


def err(error: E) -> Err[Any, E]:
    """
    Create an Err wrapping the given error.

    Any object is accepted, not only exceptions:

        >>> err("boom").error
        'boom'
    """
    return Err(error)


def unwrap(result: Result[T, E]) -> Unwrapped[T, E]:
    """
    Project a Result into a flat (value, error) pair.

        >>> unwrap(ok(1))
        Unwrapped(value=1, error=None)
        >>> value, error = unwrap(err("boom"))
        >>> error
        'boom'
    """
    match result:
        case Ok(value):
            return Unwrapped(value, None)
        case Err(error):
            return Unwrapped(None, error)
    raise TypeError(f"Expected a Result, got {type(result).__name__}")
