"""
trysafe — turn raised exceptions into returned values.

    from trysafe import try_safe, guarded_invoke, unwrap

    result = try_safe(lambda: int(raw))          # Ok(value=...) or Err(error=...)
    value, error = unwrap(result)

    data, error = guarded_invoke(lambda: json.loads(raw))
    outcome = await guarded_invoke(fetch(url))   # awaitables work too
"""

from trysafe.assertions import ResultAssertions
from trysafe.config import TrySafeSettings, get_settings
from trysafe.destructurable import Destructurable, create_destructurable
from trysafe.errors import ReadOnlyError, TrySafeError, UnwrapError
from trysafe.invoke import guarded_invoke, guarded_invoke_fn, safe_guard, try_safe
from trysafe.logs import configure_structlog
from trysafe.outcome import Outcome
from trysafe.result import Err, Ok, Result, Unwrapped, err, ok, unwrap

__all__ = [
    "Result",
    "Ok",
    "Err",
    "Unwrapped",
    "ok",
    "err",
    "unwrap",
    "Outcome",
    "Destructurable",
    "create_destructurable",
    "try_safe",
    "safe_guard",
    "guarded_invoke",
    "guarded_invoke_fn",
    "TrySafeError",
    "UnwrapError",
    "ReadOnlyError",
    "TrySafeSettings",
    "get_settings",
    "configure_structlog",
    "ResultAssertions",
]

__version__ = "1.0.0"
