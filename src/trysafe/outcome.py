"""
Outcome — the (data, error) dual-shape result returned by safe_guard.

    outcome = guarded_invoke(lambda: json.loads(raw))
    if outcome.error is not None:
        ...
    data, error = outcome          # same thing, positionally

Exactly one side carries information: data for a success, error for a
failure. A success whose data is itself None is the only case where both
sides are None; is_success() still reports it correctly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from trysafe.destructurable import Destructurable

if TYPE_CHECKING:
    from trysafe.result import Result

T = TypeVar("T")
E = TypeVar("E")


class Outcome(Destructurable, Generic[T, E]):
    """Read-only record with `data` and `error` that unpacks as (data, error)."""

    __slots__ = ()

    def __init__(self, data: T | None, error: E | None) -> None:
        super().__init__({"data": data, "error": error}, (data, error))

    @classmethod
    def success(cls, data: T) -> Outcome[T, Any]:
        return cls(data, None)

    @classmethod
    def failure(cls, error: E) -> Outcome[Any, E]:
        return cls(None, error)

    @property
    def data(self) -> T | None:
        return self._fields["data"]

    @property
    def error(self) -> E | None:
        return self._fields["error"]

    def is_success(self) -> bool:
        return self.error is None

    def is_failure(self) -> bool:
        return self.error is not None

    def to_result(self) -> Result[T, E]:
        """Convert to the tagged Ok/Err union."""
        from trysafe.result import Err, Ok

        if self.is_failure():
            return Err(self.error)  # type: ignore[arg-type]
        return Ok(self.data)  # type: ignore[arg-type]

    def __bool__(self) -> bool:
        return self.is_success()

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.data, self.error))
