"""Core circuit breaker primitive for fault tolerance.

Implements the circuit breaker pattern as a standalone state machine guarding
one external dependency. Open circuits reject calls immediately, converting
slow failures of a degraded dependency into cheap ones.

State Machine:
    CLOSED → failures reach threshold → OPEN
    OPEN → open_timeout elapsed since last failure, on the next call → HALF_OPEN
    HALF_OPEN → trial succeeds → CLOSED (failures reset)
    HALF_OPEN → trial fails → OPEN (window restarts from this failure)

There is no background timer: the OPEN → HALF_OPEN transition happens lazily
when a call arrives. Exactly one trial runs in HALF_OPEN; callers arriving
while it is pending fail fast. Repeated trial failures keep a fixed open
window (no backoff growth).
"""

from __future__ import annotations

import inspect
import threading
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypeVar

from motiontools.foundation.errors import CircuitOpenError
from motiontools.runtime.observability import get_logger

T = TypeVar("T")

Operation = Callable[[], T | Awaitable[T]]

log = get_logger("breaker")


class State(IntEnum):
    """Circuit breaker states."""
    CLOSED, OPEN, HALF_OPEN = 0, 1, 2  # Normal → Failing fast → Testing recovery


@dataclass(slots=True)
class CircuitState:
    """Mutable per-breaker state. Only the owning breaker touches it."""
    state: State = State.CLOSED
    failures: int = 0
    last_failure: float | None = None
    trial_in_flight: bool = False

    def to_dict(self) -> dict[str, object]:
        return {"state": self.state.name, "failures": self.failures, "last_failure": self.last_failure}


@dataclass(slots=True)
class CircuitBreaker:
    """Standalone circuit breaker guarding one dependency.

    Args:
        name: Dependency name, reported in CircuitOpenError and logs
        failure_threshold: Consecutive failures before opening (default: 5)
        open_timeout: Seconds after the last failure before a half-open trial (default: 60)
        clock: Monotonic time source (injectable for tests)
        trip_on: Exception types counted as dependency failures (default: all).
            Other exceptions propagate without touching the failure count.

    Example:
        >>> github = CircuitBreaker("github", failure_threshold=3, open_timeout=30)
        >>> release = await github.execute(lambda: client.get_json("/repos/o/r/releases/latest"))

    Example (monitoring):
        >>> github.state        # Current State enum
        >>> github.failures     # Current failure count
        >>> github.retry_after  # Seconds until a trial is allowed
    """

    name: str = "_default_"
    failure_threshold: int = 5
    open_timeout: float = 60.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    trip_on: tuple[type[Exception], ...] = (Exception,)
    _circuit: CircuitState = field(default_factory=CircuitState, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.failure_threshold < 1:
            raise ValueError("failure_threshold must be >= 1")
        if self.open_timeout < 0:
            raise ValueError("open_timeout must be >= 0")

    # ─────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────

    async def execute(self, operation: Operation[T]) -> T:
        """Run operation through the breaker.

        Args:
            operation: Zero-argument callable returning a value or an awaitable

        Raises:
            CircuitOpenError: The breaker is open (operation not invoked)
            Exception: Whatever the operation raised, after it is recorded
        """
        self._acquire()
        try:
            result = operation()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            if isinstance(e, self.trip_on):
                self._on_failure()
            else:
                self._release_trial()
            raise
        except BaseException:
            # Cancelled trial: neither outcome, the next caller may try
            self._release_trial()
            raise
        self._on_success()
        return result  # type: ignore[return-value]

    def reset(self) -> None:
        """Manually reset to CLOSED (for operations)."""
        with self._lock:
            self._circuit = CircuitState()
        log.info("circuit reset", breaker=self.name)

    # ─────────────────────────────────────────────────────────────────
    # State Transitions
    # ─────────────────────────────────────────────────────────────────

    def _acquire(self) -> None:
        """Gate a call: fail fast, or admit it (possibly as the half-open trial)."""
        with self._lock:
            c = self._circuit
            if c.state == State.OPEN:
                if (remaining := self._remaining(c)) > 0:
                    raise CircuitOpenError(self.name, remaining)
                c.state = State.HALF_OPEN
                log.info("circuit half-open", breaker=self.name, failures=c.failures)
            if c.state == State.HALF_OPEN:
                if c.trial_in_flight:
                    raise CircuitOpenError(self.name, None)
                c.trial_in_flight = True

    def _on_success(self) -> None:
        with self._lock:
            c = self._circuit
            c.failures, c.trial_in_flight = 0, False
            if c.state == State.HALF_OPEN:
                c.state = State.CLOSED
                log.info("circuit closed", breaker=self.name)

    def _on_failure(self) -> None:
        with self._lock:
            c = self._circuit
            c.failures += 1
            c.last_failure = self.clock()
            c.trial_in_flight = False
            if c.state == State.HALF_OPEN or (c.state == State.CLOSED and c.failures >= self.failure_threshold):
                c.state = State.OPEN
                log.warning("circuit open", breaker=self.name, failures=c.failures,
                            retry_in_seconds=self.open_timeout)

    def _release_trial(self) -> None:
        with self._lock:
            self._circuit.trial_in_flight = False

    def _remaining(self, c: CircuitState) -> float:
        """Seconds left in the open window (caller holds the lock)."""
        if c.last_failure is None:
            return 0.0
        return self.open_timeout - (self.clock() - c.last_failure)

    # ─────────────────────────────────────────────────────────────────
    # Observability Properties (read-only, no transitions)
    # ─────────────────────────────────────────────────────────────────

    @property
    def state(self) -> State:
        """Current circuit state."""
        return self._circuit.state

    @property
    def failures(self) -> int:
        """Current failure count."""
        return self._circuit.failures

    @property
    def last_failure(self) -> float | None:
        """Clock reading of the most recent failure."""
        return self._circuit.last_failure

    @property
    def retry_after(self) -> float | None:
        """Seconds until a half-open trial is allowed, or None if not open."""
        with self._lock:
            if self._circuit.state != State.OPEN:
                return None
            return max(0.0, self._remaining(self._circuit))

    def stats(self) -> dict[str, object]:
        """Get circuit statistics for monitoring."""
        with self._lock:
            return {"name": self.name, **self._circuit.to_dict(),
                    "failure_threshold": self.failure_threshold, "open_timeout": self.open_timeout}
