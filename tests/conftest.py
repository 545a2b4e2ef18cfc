"""
Shared fixtures for the trysafe test suite.

Every test starts from default structlog configuration and freshly read
settings, so environment tweaks and logging setup never leak between tests.
"""

from __future__ import annotations

import pytest
import structlog

from trysafe.config import get_settings


@pytest.fixture(autouse=True)
def _reset_global_state():
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class CustomError(Exception):
    """Application-defined error used to check that subclasses survive capture."""


@pytest.fixture()
def custom_error() -> CustomError:
    return CustomError("custom failure")
