"""
Safe invocation adapters — run work, hand back a value instead of raising.

Work comes in one of four shapes:

    try_safe(lambda: parse(raw))          # callable returning a value
    await try_safe(lambda: fetch(url))    # callable returning an awaitable
    await try_safe(fetch(url))            # an awaitable
    try_safe(42)                          # a plain value

Synchronous work yields a result synchronously; no event loop is involved.
Work that is or produces an awaitable yields a coroutine that resolves to
the result, so the caller awaits it exactly where it would have awaited the
work itself.

Any Exception raised while calling or awaiting the work is captured and
returned. BaseExceptions that are not Exceptions (KeyboardInterrupt,
SystemExit, asyncio.CancelledError) are the host's control flow and
propagate untouched.

The optional `error_type` argument exists for type checkers only: it never
filters, converts or re-raises anything at runtime.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, ParamSpec, TypeVar, overload

from trysafe.config import log_captures_enabled
from trysafe.logs import get_logger
from trysafe.outcome import Outcome
from trysafe.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
R = TypeVar("R")
P = ParamSpec("P")

logger = get_logger("trysafe.invoke")


# ──────────────────────── Core ────────────────────────


def _captured(error: Exception, mode: str) -> None:
    if log_captures_enabled():
        logger.debug("trysafe.captured", error_type=type(error).__name__, mode=mode)


async def _settle(
    awaitable: Awaitable[Any],
    on_value: Callable[[Any], R],
    on_error: Callable[[Exception], R],
) -> R:
    try:
        value = await awaitable
    except Exception as e:
        _captured(e, "async")
        return on_error(e)
    return on_value(value)


def _invoke(
    work: Any,
    on_value: Callable[[Any], R],
    on_error: Callable[[Exception], R],
) -> R | Coroutine[Any, Any, R]:
    """
    Run `work` and route its outcome through on_value / on_error.

    Returns the routed value directly for synchronous work, or a coroutine
    producing it when the work is or returns an awaitable.
    """
    try:
        value = work() if callable(work) else work
    except Exception as e:
        _captured(e, "sync")
        return on_error(e)

    if inspect.isawaitable(value):
        return _settle(value, on_value, on_error)
    return on_value(value)


# ──────────────────────── Result adapter ────────────────────────


@overload
def try_safe(
    work: Callable[[], Awaitable[T]], error_type: type[E] | None = None
) -> Coroutine[Any, Any, Result[T, E]]: ...


@overload
def try_safe(
    work: Awaitable[T], error_type: type[E] | None = None
) -> Coroutine[Any, Any, Result[T, E]]: ...


@overload
def try_safe(
    work: Callable[[], T], error_type: type[E] | None = None
) -> Result[T, E]: ...


@overload
def try_safe(work: T, error_type: type[E] | None = None) -> Result[T, E]: ...


def try_safe(work: Any, error_type: type[E] | None = None) -> Any:
    """
    Run `work` and return Ok(value) or Err(exception).

        >>> try_safe(lambda: 1)
        Ok(value=1)
        >>> try_safe(lambda: int("x")).is_err()
        True

    The Err carries the raised exception itself, not a copy or a wrapper.
    """
    return _invoke(work, Ok, Err)


# ──────────────────────── Outcome adapter ────────────────────────


@overload
def safe_guard(
    work: Callable[[], Awaitable[T]], error_type: type[E] | None = None
) -> Coroutine[Any, Any, Outcome[T, E]]: ...


@overload
def safe_guard(
    work: Awaitable[T], error_type: type[E] | None = None
) -> Coroutine[Any, Any, Outcome[T, E]]: ...


@overload
def safe_guard(
    work: Callable[[], T], error_type: type[E] | None = None
) -> Outcome[T, E]: ...


@overload
def safe_guard(work: T, error_type: type[E] | None = None) -> Outcome[T, E]: ...


def safe_guard(work: Any, error_type: type[E] | None = None) -> Any:
    """
    Run `work` and return an Outcome readable as fields or as a pair.

        outcome = safe_guard(lambda: json.loads(raw))
        data, error = outcome
        outcome.data, outcome.error   # same values
    """
    return _invoke(work, Outcome.success, Outcome.failure)


guarded_invoke = safe_guard


# ──────────────────────── Function wrapping ────────────────────────


@overload
def guarded_invoke_fn(
    fn: Callable[P, Awaitable[T]], error_type: type[E] | None = None
) -> Callable[P, Coroutine[Any, Any, Outcome[T, E]]]: ...


@overload
def guarded_invoke_fn(
    fn: Callable[P, T], error_type: type[E] | None = None
) -> Callable[P, Outcome[T, E]]: ...


@overload
def guarded_invoke_fn(
    fn: None = None, error_type: type[E] | None = None
) -> Callable[[Callable[P, T]], Callable[P, Any]]: ...


def guarded_invoke_fn(fn: Any = None, error_type: Any = None) -> Any:
    """
    Wrap `fn` so that calling it returns an Outcome instead of raising.

    Coroutine functions stay coroutine functions; plain functions stay plain.
    Works as a decorator, bare or with arguments:

        @guarded_invoke_fn
        def parse(raw: str) -> dict: ...

        @guarded_invoke_fn(error_type=httpx.HTTPError)
        async def fetch(url: str) -> bytes: ...
    """
    if fn is None:
        return functools.partial(guarded_invoke_fn, error_type=error_type)

    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            return await safe_guard(lambda: fn(*args, **kwargs), error_type)

        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return safe_guard(lambda: fn(*args, **kwargs), error_type)

    return wrapper
