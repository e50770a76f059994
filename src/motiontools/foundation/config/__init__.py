"""Configuration management using pydantic-settings.

Provides environment-based configuration with type safety and validation.
"""

from .settings import (
    BreakerSettings,
    CacheSettings,
    ExternalBreakerSettings,
    GitHubBreakerSettings,
    HttpSettings,
    LoggingSettings,
    MotionSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BreakerSettings",
    "CacheSettings",
    "ExternalBreakerSettings",
    "GitHubBreakerSettings",
    "HttpSettings",
    "LoggingSettings",
    "MotionSettings",
    "clear_settings_cache",
    "get_settings",
]
