"""
Test assertions for Result and Outcome values.

Expressive assert helpers that narrow the variant and produce clear failure
messages.

Usage in tests:
    from trysafe import ResultAssertions

    def test_parse():
        value = ResultAssertions.assert_ok(try_safe(lambda: parse(raw)))
        assert value.name == "Alice"

    def test_bad_json():
        outcome = guarded_invoke(lambda: json.loads("{bad}"))
        ResultAssertions.assert_failure(outcome, json.JSONDecodeError)
"""

from __future__ import annotations

from typing import Any, TypeVar

from trysafe.outcome import Outcome
from trysafe.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")


def _context(message: str) -> str:
    return f" — {message}" if message else ""


class ResultAssertions:
    """Expressive test assertions for Result and Outcome values."""

    @staticmethod
    def assert_ok(result: Result[T, E], message: str = "") -> T:
        """
        Assert the Result is an Ok and return its value.

            value = ResultAssertions.assert_ok(result)
        """
        assert isinstance(result, Ok), (
            f"Expected Ok but got {result!r}{_context(message)}"
        )
        return result.value

    @staticmethod
    def assert_err(
        result: Result[T, E],
        expected_type: type | None = None,
        message: str = "",
    ) -> E:
        """
        Assert the Result is an Err, optionally checking the error's type.

            error = ResultAssertions.assert_err(result, ValueError)
        """
        assert isinstance(result, Err), (
            f"Expected Err but got {result!r}{_context(message)}"
        )
        if expected_type is not None:
            assert isinstance(result.error, expected_type), (
                f"Expected error of type {expected_type.__name__} "
                f"but got {type(result.error).__name__}: {result.error!r}{_context(message)}"
            )
        return result.error

    @staticmethod
    def assert_success(outcome: Outcome[T, E], message: str = "") -> T | None:
        """Assert the Outcome succeeded and return its data."""
        assert outcome.is_success(), (
            f"Expected success but got error {outcome.error!r}{_context(message)}"
        )
        return outcome.data

    @staticmethod
    def assert_failure(
        outcome: Outcome[T, E],
        expected_type: type | None = None,
        message: str = "",
    ) -> E | None:
        """Assert the Outcome failed, optionally checking the error's type."""
        assert outcome.is_failure(), (
            f"Expected failure but got data {outcome.data!r}{_context(message)}"
        )
        assert outcome.data is None, (
            f"Failed outcome must not carry data, got {outcome.data!r}"
        )
        if expected_type is not None:
            assert isinstance(outcome.error, expected_type), (
                f"Expected error of type {expected_type.__name__} "
                f"but got {type(outcome.error).__name__}: {outcome.error!r}{_context(message)}"
            )
        return outcome.error

    @staticmethod
    def assert_ok_value(result: Result[T, E], expected_value: Any) -> None:
        """Assert the Result is an Ok with the specific value."""
        value = ResultAssertions.assert_ok(result)
        assert value == expected_value, (
            f"Expected Ok value {expected_value!r} but got {value!r}"
        )
