"""
Configuration — typed settings loaded from the environment.

Uses pydantic-settings so that a host application can tune trysafe without
code changes:

    TRYSAFE_LOG_CAPTURES=true     # emit a debug event per captured error
    TRYSAFE_LOG_LEVEL=DEBUG       # default level for configure_structlog()

Settings only affect logging. What gets captured, and how, never depends on
configuration.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrySafeSettings(BaseSettings):
    """
    Root settings for trysafe.

    Load order (highest priority first):
      1. Environment variables prefixed with TRYSAFE_
      2. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TRYSAFE_",
        extra="ignore",
    )

    log_captures: bool = Field(
        default=False,
        description="Emit a debug event whenever an adapter captures an error",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level used by configure_structlog() when none is given",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Reject names the stdlib logging module does not know."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TrySafeSettings:
    """Return the process-wide settings, read once from the environment."""
    return TrySafeSettings()


def log_captures_enabled() -> bool:
    """
    Whether the adapters should emit a capture event.

    Invalid TRYSAFE_ settings count as the default (disabled): a bad
    environment must never turn a captured error into a raised one.
    """
    try:
        return get_settings().log_captures
    except ValidationError:
        return False
