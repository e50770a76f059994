"""Tests for the periodic cache sweep task."""

from __future__ import annotations

import asyncio

import pytest

from motiontools.io.cache import CacheSweeper, TTLCache
from motiontools.tests.conftest import FakeClock


def test_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        CacheSweeper(TTLCache(), interval=0)


def test_sweep_runs_cleanup(clock: FakeClock) -> None:
    cache = TTLCache(clock=clock)
    cache.set("k", "v", 1.0)
    clock.advance(2)
    sweeper = CacheSweeper(cache, interval=60)
    assert sweeper.sweep() == 1
    assert sweeper.sweeps == 1
    assert cache.size == 0


@pytest.mark.asyncio
async def test_background_sweeps_then_stops(clock: FakeClock) -> None:
    """Task sweeps on its interval and stop() leaves nothing running."""
    cache = TTLCache(clock=clock)
    cache.set("k", "v", 1.0)
    clock.advance(2)

    sweeper = CacheSweeper(cache, interval=0.01)
    sweeper.start()
    assert sweeper.running
    for _ in range(100):
        if sweeper.sweeps:
            break
        await asyncio.sleep(0.01)
    await sweeper.stop()

    assert sweeper.sweeps >= 1
    assert cache.size == 0
    assert not sweeper.running


@pytest.mark.asyncio
async def test_stop_is_idempotent() -> None:
    sweeper = CacheSweeper(TTLCache(), interval=60)
    await sweeper.stop()  # never started
    sweeper.start()
    sweeper.start()  # no second task
    await sweeper.stop()
    await sweeper.stop()
    assert not sweeper.running


@pytest.mark.asyncio
async def test_context_manager_cancels_on_exit() -> None:
    async with CacheSweeper(TTLCache(), interval=60) as sweeper:
        assert sweeper.running
    assert not sweeper.running
