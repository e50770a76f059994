"""Composition root wiring settings, cache, breakers, HTTP client and tools.

One MotionService per process (or per test). Nothing here is a module-level
singleton; every collaborator is reachable from the instance.

Example:
    >>> async with MotionService.from_env() as service:
    ...     envelope = await service.invoke_envelope("get_motion_docs", {"topic": "gestures"})
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from motiontools.foundation.config import MotionSettings, get_settings
from motiontools.foundation.errors import DependencyError, JsonDict, JsonValue, ToolResult
from motiontools.foundation.registry import ToolRegistry
from motiontools.io.cache import CacheSweeper, Clock, TTLCache
from motiontools.io.http import GitHubClient
from motiontools.runtime.dispatch import ToolDispatcher
from motiontools.runtime.observability import configure_logging, get_logger
from motiontools.runtime.resilience import CircuitBreaker
from motiontools.tools import builtin_tools

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

log = get_logger("service")


class MotionService:
    """Process-level owner of the dispatcher and its collaborators.

    Args:
        settings: Configuration (default: ``MotionSettings()`` from the environment)
        http_client: Preconfigured httpx client for the GitHub API (tests inject MockTransport)
        clock: Monotonic time source shared by the cache and breakers
    """

    __slots__ = ("settings", "cache", "sweeper", "breakers", "github", "dispatcher")

    def __init__(
        self,
        settings: MotionSettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.settings = settings or MotionSettings()
        self.cache = TTLCache(self.settings.cache.ttl, clock=clock)
        self.sweeper = CacheSweeper(self.cache, self.settings.cache.cleanup_interval)
        self.breakers = {
            name: CircuitBreaker(
                name, cfg.failure_threshold, cfg.open_timeout, clock=clock, trip_on=(DependencyError,),
            )
            for name, cfg in self.settings.breakers().items()
        }
        self.github = GitHubClient(self.settings.http, http_client)
        self.dispatcher = ToolDispatcher(ToolRegistry(), self.cache, self.breakers)
        for spec in builtin_tools(self.github, self.settings.http.repository):
            self.dispatcher.register(spec)

    @classmethod
    def from_env(cls) -> MotionService:
        """Build from cached environment settings and apply their logging config."""
        settings = get_settings()
        configure_logging(settings.logging.format, settings.logging.level)
        return cls(settings)

    # ─────────────────────────────────────────────────────────────────
    # Invocation
    # ─────────────────────────────────────────────────────────────────

    async def invoke(self, name: str, params: object = None) -> ToolResult:
        return await self.dispatcher.invoke(name, params)

    async def invoke_envelope(self, name: str, params: object = None) -> JsonValue | JsonDict:
        return await self.dispatcher.invoke_envelope(name, params)

    def tools(self) -> list[JsonDict]:
        return self.dispatcher.tools()

    def stats(self) -> dict[str, object]:
        return {**self.dispatcher.stats(), "sweeps": self.sweeper.sweeps}

    # ─────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────

    async def start(self) -> None:
        """Start the periodic cache sweep. Requires a running event loop."""
        self.sweeper.start()
        log.info("service started", tools=len(self.dispatcher.registry),
                 github_authenticated=self.settings.http.authenticated)

    async def stop(self) -> None:
        """Cancel the sweep and close the HTTP client. Idempotent."""
        await self.sweeper.stop()
        await self.github.aclose()
        log.info("service stopped")

    async def __aenter__(self) -> MotionService:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()
