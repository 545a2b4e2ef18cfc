"""Tests for TrySafeSettings and get_settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from trysafe import TrySafeSettings, get_settings
from trysafe.config import log_captures_enabled


class TestTrySafeSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TRYSAFE_LOG_CAPTURES", raising=False)
        monkeypatch.delenv("TRYSAFE_LOG_LEVEL", raising=False)
        settings = TrySafeSettings()
        assert settings.log_captures is False
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("TRYSAFE_LOG_CAPTURES", "true")
        monkeypatch.setenv("TRYSAFE_LOG_LEVEL", "debug")
        settings = TrySafeSettings()
        assert settings.log_captures is True
        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            TrySafeSettings(log_level="LOUD")

    def test_ignores_unrelated_variables(self, monkeypatch):
        monkeypatch.setenv("TRYSAFE_SOMETHING_ELSE", "1")
        assert TrySafeSettings().log_captures is False


class TestGetSettings:
    def test_is_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self, monkeypatch):
        monkeypatch.setenv("TRYSAFE_LOG_CAPTURES", "true")
        assert get_settings().log_captures is True
        monkeypatch.setenv("TRYSAFE_LOG_CAPTURES", "false")
        get_settings.cache_clear()
        assert get_settings().log_captures is False


class TestLogCapturesEnabled:
    def test_disabled_by_default(self, monkeypatch):
        monkeypatch.delenv("TRYSAFE_LOG_CAPTURES", raising=False)
        assert log_captures_enabled() is False

    def test_enabled_from_environment(self, monkeypatch):
        monkeypatch.setenv("TRYSAFE_LOG_CAPTURES", "yes")
        assert log_captures_enabled() is True

    @pytest.mark.parametrize(
        ("name", "value"),
        [("TRYSAFE_LOG_LEVEL", "LOUD"), ("TRYSAFE_LOG_CAPTURES", "maybe")],
    )
    def test_invalid_environment_counts_as_disabled(self, monkeypatch, name, value):
        monkeypatch.setenv("TRYSAFE_LOG_CAPTURES", "true")
        monkeypatch.setenv(name, value)
        assert log_captures_enabled() is False
