"""Environment-based configuration using pydantic-settings.

Provides type-safe, validated configuration from environment variables
with sensible defaults. Supports .env files and nested configuration.

Example:
    >>> from motiontools.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.cache.ttl
    300.0
    >>> settings.breakers()["github"].failure_threshold
    3

    # Or with environment variables:
    # MOTIONTOOLS_CACHE_TTL=600
    # MOTIONTOOLS_BREAKER_GITHUB_OPEN_TIMEOUT=45
    # GITHUB_PERSONAL_ACCESS_TOKEN=ghp_xxx
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, PositiveFloat, PositiveInt, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Result cache configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MOTIONTOOLS_CACHE_",
        extra="ignore",
    )

    ttl: PositiveFloat = Field(default=300.0, description="Default cache TTL in seconds")
    cleanup_interval: PositiveFloat = Field(default=60.0, description="Seconds between expiry sweeps")


class BreakerSettings(BaseSettings):
    """Thresholds for one circuit breaker."""

    model_config = SettingsConfigDict(extra="ignore")

    failure_threshold: PositiveInt = Field(default=5, description="Failures before opening")
    open_timeout: PositiveFloat = Field(default=60.0, description="Seconds before a half-open trial")


class ExternalBreakerSettings(BreakerSettings):
    """Breaker guarding generic external API calls."""

    model_config = SettingsConfigDict(env_prefix="MOTIONTOOLS_BREAKER_EXTERNAL_", extra="ignore")


class GitHubBreakerSettings(BreakerSettings):
    """Breaker guarding the GitHub REST API."""

    model_config = SettingsConfigDict(env_prefix="MOTIONTOOLS_BREAKER_GITHUB_", extra="ignore")

    failure_threshold: PositiveInt = 3
    open_timeout: PositiveFloat = 30.0


class HttpSettings(BaseSettings):
    """HTTP client default configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MOTIONTOOLS_HTTP_",
        populate_by_name=True,
        extra="ignore",
    )

    timeout: PositiveFloat = Field(default=30.0, description="Request deadline in seconds")
    user_agent: str = "motiontools/0.1.0"
    base_url: str = "https://api.github.com"
    repository: str = Field(default="motiondivision/motion", description="owner/name of the Motion repository")
    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("MOTIONTOOLS_HTTP_GITHUB_TOKEN", "GITHUB_PERSONAL_ACCESS_TOKEN"),
        description="GitHub token; anonymous access is rate limited to 60 requests/hour",
    )

    @computed_field
    @property
    def authenticated(self) -> bool:
        """Whether requests will carry a GitHub token."""
        return self.github_token is not None


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MOTIONTOOLS_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class MotionSettings(BaseSettings):
    """Root settings for motiontools.

    Loads configuration from environment variables with MOTIONTOOLS_ prefix.
    Supports nested configuration and .env files.

    Example environment variables:
        MOTIONTOOLS_CACHE_TTL=600
        MOTIONTOOLS_CACHE_CLEANUP_INTERVAL=30
        MOTIONTOOLS_BREAKER_EXTERNAL_FAILURE_THRESHOLD=10
        MOTIONTOOLS_HTTP_TIMEOUT=10
        MOTIONTOOLS_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="MOTIONTOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    cache: CacheSettings = Field(default_factory=CacheSettings)
    external_breaker: ExternalBreakerSettings = Field(default_factory=ExternalBreakerSettings)
    github_breaker: GitHubBreakerSettings = Field(default_factory=GitHubBreakerSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def breakers(self) -> dict[str, BreakerSettings]:
        """Breaker configuration keyed by dependency name."""
        return {"external": self.external_breaker, "github": self.github_breaker}


# Singleton pattern for settings
@lru_cache(maxsize=1)
def get_settings() -> MotionSettings:
    """Get the global settings instance (cached)."""
    return MotionSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
