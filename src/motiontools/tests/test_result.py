"""Tests for the Result monad and the ToolError envelope.

Validates:
- Functor and monad laws
- Error extraction
- Envelope rendering of ToolResult
"""

from __future__ import annotations

from typing import Callable

import pytest

from motiontools.foundation.errors import (
    CircuitOpenError,
    Err,
    ErrorKind,
    Ok,
    Result,
    ToolError,
    failure,
    to_envelope,
)


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Ok(42).map(lambda x: x) == Ok(42)
    assert Err("fail").map(lambda x: x) == Err("fail")


def test_functor_composition() -> None:
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    result: Result[int, str] = Ok(5)
    assert result.map(lambda x: f(g(x))) == result.map(g).map(f)


def test_monad_laws() -> None:
    f: Callable[[int], Result[int, str]] = lambda x: Ok(x + 1)
    g: Callable[[int], Result[int, str]] = lambda x: Ok(x * 2) if x < 10 else Err("too big")
    m: Result[int, str] = Ok(5)

    assert Ok(3).flat_map(f) == f(3)
    assert m.flat_map(Ok) == m
    assert m.flat_map(f).flat_map(g) == m.flat_map(lambda x: f(x).flat_map(g))


def test_err_short_circuits() -> None:
    calls: list[int] = []
    result: Result[int, str] = Err("fail")
    assert result.flat_map(lambda x: calls.append(x) or Ok(x)) == Err("fail")
    assert calls == []


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap() -> None:
    assert Ok(1).unwrap() == 1
    assert Err("e").unwrap_err() == "e"
    assert Err("e").unwrap_or(7) == 7
    with pytest.raises(RuntimeError):
        Err("e").unwrap()
    with pytest.raises(RuntimeError):
        Ok(1).unwrap_err()


def test_inspection_and_match() -> None:
    assert Ok(1).ok() == 1 and Ok(1).err() is None
    assert Err("e").err() == "e" and Err("e").ok() is None
    assert Ok(2).match(ok=lambda v: v * 10, err=len) == 20
    assert Err("abc").match(ok=lambda v: v * 10, err=len) == 3
    assert bool(Ok(0)) and not bool(Err(0))
    assert list(Ok(1)) == [1] and list(Err(1)) == []


def test_structural_pattern_matching() -> None:
    match Ok("v"):
        case Result(value):
            assert value == "v"


def test_map_err() -> None:
    assert Err(2).map_err(lambda e: e * 3) == Err(6)
    assert Ok(2).map_err(lambda e: e * 3) == Ok(2)


# ═════════════════════════════════════════════════════════════════════════════
# ToolError
# ═════════════════════════════════════════════════════════════════════════════


def test_error_kind_policies() -> None:
    assert ErrorKind.NOT_FOUND.cacheable
    assert not ErrorKind.DEPENDENCY_ERROR.cacheable
    assert not ErrorKind.VALIDATION_ERROR.transient
    assert ErrorKind.CIRCUIT_OPEN.transient


def test_render_omits_absent_details() -> None:
    error = ToolError.create("get_motion_docs", "Boom", ErrorKind.INTERNAL_ERROR)
    assert error.render() == {"error": "Boom", "code": "INTERNAL_ERROR"}
    assert error.recoverable


def test_envelope_of_failure() -> None:
    result = failure("t", "bad", ErrorKind.VALIDATION_ERROR, details=[{"field": "topic"}])
    assert to_envelope(result) == {"error": "bad", "code": "VALIDATION_ERROR", "details": [{"field": "topic"}]}
    assert to_envelope(Ok({"a": 1})) == {"a": 1}


def test_circuit_open_message() -> None:
    assert str(CircuitOpenError("github", 12.4)) == "Circuit breaker for 'github' is OPEN, retry in 13s"
    assert str(CircuitOpenError("github", 0.2)).endswith("retry in 1s")
    assert str(CircuitOpenError("github")) == "Circuit breaker for 'github' is OPEN"
