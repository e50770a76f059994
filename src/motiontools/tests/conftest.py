"""Shared fixtures: controllable clock and silent logging."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from motiontools.foundation.config import clear_settings_cache
from motiontools.runtime.observability import configure_logging


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def silent_logging() -> Iterator[None]:
    """Mute log output during tests."""
    configure_logging("none", "DEBUG")
    yield
    configure_logging("none", "INFO")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate settings from the developer's environment."""
    monkeypatch.delenv("GITHUB_PERSONAL_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("MOTIONTOOLS_HTTP_GITHUB_TOKEN", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
