"""Resilience primitives for guarded external calls."""

from .breaker import CircuitBreaker, CircuitState, Operation, State

__all__ = ["CircuitBreaker", "CircuitState", "Operation", "State"]
