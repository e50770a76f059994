"""Periodic expiry sweep for TTLCache.

Runs ``cache.cleanup()`` on its own asyncio task at a fixed interval,
independent of request traffic. The task is owned by the sweeper: ``stop()``
cancels it and waits for it to finish, so shutdown never leaves a dangling
timer behind.

Example:
    >>> async with CacheSweeper(cache, interval=60):
    ...     await serve_forever()
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from motiontools.runtime.observability import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from .cache import TTLCache

log = get_logger("cache.sweeper")


class CacheSweeper:
    """Cancellable repeating cleanup task for a TTLCache.

    Args:
        cache: Cache to sweep
        interval: Seconds between sweeps
    """

    __slots__ = ("_cache", "_interval", "_task", "_sweeps")

    def __init__(self, cache: TTLCache, interval: float = 60.0) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._cache = cache
        self._interval = interval
        self._task: asyncio.Task[None] | None = None
        self._sweeps = 0

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def sweeps(self) -> int:
        """Number of completed sweeps since construction."""
        return self._sweeps

    def start(self) -> None:
        """Start sweeping on the running event loop. No-op if already running."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="cache-sweeper")
        log.debug("sweeper started", interval=self._interval)

    async def stop(self) -> None:
        """Cancel the sweep task and wait for it to exit. Idempotent."""
        if (task := self._task) is None:
            return
        self._task = None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        log.debug("sweeper stopped", sweeps=self._sweeps)

    def sweep(self) -> int:
        """Run one sweep now. Returns entries removed."""
        removed = self._cache.cleanup()
        self._sweeps += 1
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                self.sweep()
            except Exception:
                log.exception("cache sweep failed")

    async def __aenter__(self) -> CacheSweeper:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()
