"""
Errors raised by trysafe itself.

The adapters never raise for the work they run: whatever the work raises is
handed back as a value. The exceptions below only signal misuse of the
returned values, such as asking an Err for its value or mutating an Outcome.
"""

from __future__ import annotations

from typing import Any


class TrySafeError(Exception):
    """Base class for every error raised by trysafe."""


class UnwrapError(TrySafeError, ValueError):
    """
    Raised by Result.expect() on an Err.

    The captured error is kept on `error` as-is. When it is an exception it is
    also chained as `__cause__`, so the original traceback survives.

    >>> UnwrapError("Expected Ok", "boom").error
    'boom'
    """

    def __init__(self, message: str, error: Any) -> None:
        super().__init__(message)
        self.error = error


class ReadOnlyError(TrySafeError, AttributeError):
    """Raised when code tries to set or delete a field on a Destructurable."""
