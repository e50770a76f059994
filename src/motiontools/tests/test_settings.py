"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from motiontools.foundation.config import HttpSettings, LoggingSettings, MotionSettings, get_settings


def test_defaults() -> None:
    settings = MotionSettings()
    assert settings.cache.ttl == 300.0
    assert settings.cache.cleanup_interval == 60.0
    breakers = settings.breakers()
    assert (breakers["external"].failure_threshold, breakers["external"].open_timeout) == (5, 60.0)
    assert (breakers["github"].failure_threshold, breakers["github"].open_timeout) == (3, 30.0)
    assert settings.http.timeout == 30.0
    assert not settings.http.authenticated


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOTIONTOOLS_CACHE_TTL", "600")
    monkeypatch.setenv("MOTIONTOOLS_BREAKER_GITHUB_OPEN_TIMEOUT", "45")
    monkeypatch.setenv("MOTIONTOOLS_HTTP_TIMEOUT", "5")
    settings = MotionSettings()
    assert settings.cache.ttl == 600.0
    assert settings.github_breaker.open_timeout == 45.0
    assert settings.http.timeout == 5.0


def test_github_token_from_standard_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "ghp_abc")
    http = HttpSettings()
    assert http.authenticated
    assert http.github_token.get_secret_value() == "ghp_abc"
    assert "ghp_abc" not in repr(http)


def test_rejects_non_positive_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOTIONTOOLS_CACHE_TTL", "0")
    with pytest.raises(ValidationError):
        MotionSettings()


def test_log_level_case_insensitive() -> None:
    assert LoggingSettings(level="debug").level == "DEBUG"


def test_get_settings_cached() -> None:
    assert get_settings() is get_settings()
