"""Tests for the circuit breaker state machine."""

from __future__ import annotations

import asyncio

import pytest

from motiontools.foundation.errors import CircuitOpenError
from motiontools.runtime.resilience import CircuitBreaker, State
from motiontools.tests.conftest import FakeClock


class Flaky:
    """Operation that fails while ``failing`` is set, counting calls."""

    def __init__(self, failing: bool = True) -> None:
        self.failing = failing
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self.failing:
            raise ConnectionError("dependency down")
        return "ok"


async def _trip(breaker: CircuitBreaker, op: Flaky, times: int) -> None:
    for _ in range(times):
        with pytest.raises(ConnectionError):
            await breaker.execute(op)


# ─────────────────────────────────────────────────────────────────────────────
# CLOSED
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_success_passes_through(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=2, open_timeout=30, clock=clock)
    assert await breaker.execute(Flaky(failing=False)) == "ok"
    assert breaker.state == State.CLOSED


@pytest.mark.asyncio
async def test_sync_operation_supported(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", clock=clock)
    assert await breaker.execute(lambda: 42) == 42


@pytest.mark.asyncio
async def test_success_resets_failure_count(clock: FakeClock) -> None:
    """Failures must be consecutive to open the circuit."""
    breaker = CircuitBreaker("api", failure_threshold=2, open_timeout=30, clock=clock)
    op = Flaky()
    await _trip(breaker, op, 1)
    assert breaker.failures == 1

    op.failing = False
    await breaker.execute(op)
    assert breaker.failures == 0

    op.failing = True
    await _trip(breaker, op, 1)
    assert breaker.state == State.CLOSED


# ─────────────────────────────────────────────────────────────────────────────
# OPEN
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_opens_on_threshold_and_skips_operation(clock: FakeClock) -> None:
    """Two failures open it; the third call never reaches the operation."""
    breaker = CircuitBreaker("api", failure_threshold=2, open_timeout=30, clock=clock)
    op = Flaky()
    await _trip(breaker, op, 2)
    assert breaker.state == State.OPEN

    with pytest.raises(CircuitOpenError) as exc_info:
        await breaker.execute(op)
    assert op.calls == 2
    assert exc_info.value.dependency == "api"
    assert exc_info.value.retry_after == pytest.approx(30)


@pytest.mark.asyncio
async def test_retry_after_counts_down(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=30, clock=clock)
    assert breaker.retry_after is None
    await _trip(breaker, Flaky(), 1)
    clock.advance(10)
    assert breaker.retry_after == pytest.approx(20)


@pytest.mark.asyncio
async def test_state_inspection_does_not_transition(clock: FakeClock) -> None:
    """OPEN -> HALF_OPEN happens only on the next call."""
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=30, clock=clock)
    await _trip(breaker, Flaky(), 1)
    clock.advance(60)
    assert breaker.state == State.OPEN
    assert breaker.retry_after == 0.0


# ─────────────────────────────────────────────────────────────────────────────
# HALF_OPEN
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_half_open_trial_recovers(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=2, open_timeout=30, clock=clock)
    op = Flaky()
    await _trip(breaker, op, 2)

    clock.advance(30)
    op.failing = False
    assert await breaker.execute(op) == "ok"
    assert op.calls == 3
    assert breaker.state == State.CLOSED
    assert breaker.failures == 0


@pytest.mark.asyncio
async def test_half_open_failure_reopens(clock: FakeClock) -> None:
    """A failed trial restarts the open window from the new failure."""
    breaker = CircuitBreaker("api", failure_threshold=2, open_timeout=30, clock=clock)
    op = Flaky()
    await _trip(breaker, op, 2)
    first_failure = breaker.last_failure

    clock.advance(31)
    await _trip(breaker, op, 1)
    assert op.calls == 3
    assert breaker.state == State.OPEN
    assert breaker.failures >= 2
    assert breaker.last_failure == first_failure + 31

    with pytest.raises(CircuitOpenError):
        await breaker.execute(op)
    assert op.calls == 3


@pytest.mark.asyncio
async def test_open_window_does_not_grow(clock: FakeClock) -> None:
    """Each failed trial waits the same fixed timeout."""
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=10, clock=clock)
    op = Flaky()
    await _trip(breaker, op, 1)
    for _ in range(3):
        clock.advance(10)
        await _trip(breaker, op, 1)
        assert breaker.retry_after == pytest.approx(10)


@pytest.mark.asyncio
async def test_single_trial_in_flight(clock: FakeClock) -> None:
    """Callers arriving during a pending trial fail fast."""
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=5, clock=clock)
    await _trip(breaker, Flaky(), 1)
    clock.advance(5)

    release = asyncio.Event()

    async def slow_trial() -> str:
        await release.wait()
        return "recovered"

    trial = asyncio.create_task(breaker.execute(slow_trial))
    await asyncio.sleep(0)
    assert breaker.state == State.HALF_OPEN

    with pytest.raises(CircuitOpenError) as exc_info:
        await breaker.execute(lambda: "second")
    assert exc_info.value.retry_after is None

    release.set()
    assert await trial == "recovered"
    assert breaker.state == State.CLOSED


@pytest.mark.asyncio
async def test_cancelled_trial_frees_slot(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=5, clock=clock)
    await _trip(breaker, Flaky(), 1)
    clock.advance(5)

    trial = asyncio.create_task(breaker.execute(lambda: asyncio.sleep(60)))
    await asyncio.sleep(0)
    trial.cancel()
    with pytest.raises(asyncio.CancelledError):
        await trial

    assert await breaker.execute(lambda: "next") == "next"
    assert breaker.state == State.CLOSED


# ─────────────────────────────────────────────────────────────────────────────
# Failure filter
# ─────────────────────────────────────────────────────────────────────────────


async def _reject() -> None:
    raise ValueError("caller error")


@pytest.mark.asyncio
async def test_untracked_exceptions_do_not_count(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=30, clock=clock, trip_on=(ConnectionError,))
    for _ in range(3):
        with pytest.raises(ValueError):
            await breaker.execute(_reject)
    assert breaker.state == State.CLOSED
    assert breaker.failures == 0

    await _trip(breaker, Flaky(), 1)
    assert breaker.state == State.OPEN


@pytest.mark.asyncio
async def test_untracked_exception_frees_half_open_trial(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=30, clock=clock, trip_on=(ConnectionError,))
    await _trip(breaker, Flaky(), 1)
    clock.advance(30)

    with pytest.raises(ValueError):
        await breaker.execute(_reject)
    assert breaker.state == State.HALF_OPEN

    assert await breaker.execute(Flaky(failing=False)) == "ok"
    assert breaker.state == State.CLOSED


# ─────────────────────────────────────────────────────────────────────────────
# Operations
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_reset_closes(clock: FakeClock) -> None:
    breaker = CircuitBreaker("api", failure_threshold=1, open_timeout=30, clock=clock)
    await _trip(breaker, Flaky(), 1)
    breaker.reset()
    assert breaker.state == State.CLOSED
    assert breaker.failures == 0


@pytest.mark.asyncio
async def test_stats(clock: FakeClock) -> None:
    breaker = CircuitBreaker("github", failure_threshold=3, open_timeout=30, clock=clock)
    await _trip(breaker, Flaky(), 1)
    stats = breaker.stats()
    assert stats["name"] == "github"
    assert stats["state"] == "CLOSED"
    assert stats["failures"] == 1
    assert stats["failure_threshold"] == 3


def test_rejects_invalid_threshold() -> None:
    with pytest.raises(ValueError):
        CircuitBreaker("api", failure_threshold=0)
