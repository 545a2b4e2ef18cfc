"""
Logging — structlog loggers for trysafe.

trysafe never configures logging on import. A host application that wants
readable console output calls configure_structlog() once at its composition
root; otherwise the host's own structlog configuration applies.
"""

from __future__ import annotations

import logging

import structlog

from trysafe.config import get_settings


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a lazily bound structlog logger named after the module."""
    return structlog.get_logger(name)


def configure_structlog(
    log_level: str | None = None,
    *,
    cache_logger_on_first_use: bool = True,
) -> None:
    """
    Configure structlog for human-readable console logging.

    The level defaults to TRYSAFE_LOG_LEVEL. Unknown level names fall back to INFO.
    """
    level_name = (log_level or get_settings().log_level).upper()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=cache_logger_on_first_use,
    )
