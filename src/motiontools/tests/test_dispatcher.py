"""Tests for ToolDispatcher outcome normalization, caching and breaker routing."""

from __future__ import annotations

from typing import Annotated

import pytest
from pydantic import Field

from motiontools.foundation.errors import (
    DependencyError,
    ErrorKind,
    Ok,
    ToolResult,
    ValidationToolException,
    not_found,
)
from motiontools.foundation.registry import ToolRegistry, ToolSpec
from motiontools.foundation.validation import ParamsModel
from motiontools.io.cache import TTLCache
from motiontools.runtime.dispatch import ToolDispatcher
from motiontools.runtime.resilience import CircuitBreaker, State
from motiontools.tests.conftest import FakeClock


class LookupParams(ParamsModel):
    item_name: Annotated[str, Field(min_length=1, max_length=20, pattern=r"^[a-z]+$")]


class Counter:
    """Handler recording calls; behavior chosen per item name."""

    def __init__(self) -> None:
        self.calls = 0

    async def __call__(self, params: LookupParams) -> ToolResult:
        self.calls += 1
        match params.item_name:
            case "missing":
                return not_found("lookup", "Item not found", available=["apple"], suggestions=["apple"])
            case "down":
                raise DependencyError("remote", "HTTP 503", status=503)
            case "crash":
                raise RuntimeError("password=hunter2 leaked")
            case "strict":
                LookupParams.model_validate({"itemName": "UPPER"})
            case "reserved":
                raise ValidationToolException.create(
                    "lookup", "Item name is reserved", ErrorKind.VALIDATION_ERROR,
                    details=[{"field": "itemName", "constraint": "reserved", "message": "reserved"}],
                )
            case name:
                return Ok({"item": name})


@pytest.fixture
def handler() -> Counter:
    return Counter()


@pytest.fixture
def dispatcher(handler: Counter, clock: FakeClock) -> ToolDispatcher:
    registry = ToolRegistry()
    registry.register(ToolSpec("lookup", "Look up an item by name", LookupParams, handler, ttl=600, miss_ttl=300))
    registry.register(ToolSpec(
        "remote_lookup", "Look up an item on the remote service", LookupParams, handler,
        ttl=600, dependency="remote",
    ))
    breakers = {"remote": CircuitBreaker(
        "remote", failure_threshold=2, open_timeout=30, clock=clock, trip_on=(DependencyError,),
    )}
    return ToolDispatcher(registry, TTLCache(clock=clock), breakers)


# ═════════════════════════════════════════════════════════════════════════════
# Normalization
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_success(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.invoke("lookup", {"itemName": "apple"})
    assert result.unwrap() == {"item": "apple"}


@pytest.mark.asyncio
async def test_unknown_tool(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.invoke("nope", {})
    error = result.unwrap_err()
    assert error.kind == ErrorKind.UNKNOWN_TOOL
    assert error.details["available"] == ["lookup", "remote_lookup"]


@pytest.mark.asyncio
async def test_invalid_field_is_identified(dispatcher: ToolDispatcher, handler: Counter) -> None:
    result = await dispatcher.invoke("lookup", {"itemName": "Not Valid!"})
    error = result.unwrap_err()
    assert error.kind == ErrorKind.VALIDATION_ERROR
    assert error.details[0]["field"] in ("itemName", "item_name")
    assert handler.calls == 0


@pytest.mark.asyncio
async def test_missing_params_fail_validation(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.invoke("lookup")
    assert result.unwrap_err().kind == ErrorKind.VALIDATION_ERROR


@pytest.mark.asyncio
async def test_non_object_params(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.invoke("lookup", "apple")
    error = result.unwrap_err()
    assert error.kind == ErrorKind.VALIDATION_ERROR
    assert error.details[0]["field"] == "params"


@pytest.mark.asyncio
async def test_params_sanitized_before_validation(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.invoke("lookup", {"itemName": "  apple \n"})
    assert result.unwrap() == {"item": "apple"}


@pytest.mark.asyncio
async def test_internal_error_hides_exception_text(dispatcher: ToolDispatcher) -> None:
    """Unexpected faults become INTERNAL_ERROR without leaking details."""
    result = await dispatcher.invoke("lookup", {"itemName": "crash"})
    error = result.unwrap_err()
    assert error.kind == ErrorKind.INTERNAL_ERROR
    assert "hunter2" not in error.message
    assert error.details is None

    # Dispatcher keeps serving
    assert (await dispatcher.invoke("lookup", {"itemName": "pear"})).is_ok()


@pytest.mark.asyncio
async def test_dependency_error(dispatcher: ToolDispatcher) -> None:
    error = (await dispatcher.invoke("lookup", {"itemName": "down"})).unwrap_err()
    assert error.kind == ErrorKind.DEPENDENCY_ERROR
    assert error.details == {"dependency": "remote", "status": 503}
    assert error.recoverable


@pytest.mark.asyncio
@pytest.mark.parametrize("item", ["strict", "reserved"])
async def test_handler_validation_errors_not_cached(dispatcher: ToolDispatcher, handler: Counter, item: str) -> None:
    """Validation failures raised inside a handler come back as VALIDATION_ERROR values."""
    for _ in range(2):
        error = (await dispatcher.invoke("lookup", {"itemName": item})).unwrap_err()
        assert error.kind == ErrorKind.VALIDATION_ERROR
        assert error.details[0]["field"] in ("itemName", "item_name")
    assert handler.calls == 2
    assert dispatcher.cache.size == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("item", ["strict", "reserved"])
async def test_handler_validation_errors_do_not_trip_breaker(dispatcher: ToolDispatcher, item: str) -> None:
    for _ in range(3):
        error = (await dispatcher.invoke("remote_lookup", {"itemName": item})).unwrap_err()
        assert error.kind == ErrorKind.VALIDATION_ERROR
    assert dispatcher.breakers["remote"].state == State.CLOSED
    assert dispatcher.breakers["remote"].failures == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("name", [["lookup"], {"tool": "lookup"}, None, ""])
async def test_non_string_tool_name(dispatcher: ToolDispatcher, name: object) -> None:
    error = (await dispatcher.invoke(name, {"itemName": "apple"})).unwrap_err()  # type: ignore[arg-type]
    assert error.kind == ErrorKind.UNKNOWN_TOOL
    assert error.details["available"] == ["lookup", "remote_lookup"]


@pytest.mark.asyncio
async def test_bare_payload_wrapped() -> None:
    registry = ToolRegistry()
    registry.register(ToolSpec("plain", "Return a bare dict payload", LookupParams, lambda p: {"n": p.item_name}))
    dispatcher = ToolDispatcher(registry, TTLCache())
    assert (await dispatcher.invoke("plain", {"itemName": "x"})).unwrap() == {"n": "x"}


# ═════════════════════════════════════════════════════════════════════════════
# Caching
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_success_cached_until_ttl(dispatcher: ToolDispatcher, handler: Counter, clock: FakeClock) -> None:
    first = await dispatcher.invoke("lookup", {"itemName": "apple"})
    second = await dispatcher.invoke("lookup", {"item_name": " apple "})
    assert first == second
    assert handler.calls == 1

    clock.advance(601)
    await dispatcher.invoke("lookup", {"itemName": "apple"})
    assert handler.calls == 2


@pytest.mark.asyncio
async def test_not_found_cached_with_miss_ttl(dispatcher: ToolDispatcher, handler: Counter, clock: FakeClock) -> None:
    for _ in range(2):
        result = await dispatcher.invoke("lookup", {"itemName": "missing"})
        assert result.unwrap_err().kind == ErrorKind.NOT_FOUND
    assert handler.calls == 1

    clock.advance(301)
    await dispatcher.invoke("lookup", {"itemName": "missing"})
    assert handler.calls == 2


@pytest.mark.asyncio
async def test_transient_failures_not_cached(dispatcher: ToolDispatcher, handler: Counter) -> None:
    await dispatcher.invoke("lookup", {"itemName": "down"})
    await dispatcher.invoke("lookup", {"itemName": "down"})
    await dispatcher.invoke("lookup", {"itemName": "crash"})
    await dispatcher.invoke("lookup", {"itemName": "crash"})
    assert handler.calls == 4


@pytest.mark.asyncio
async def test_tools_cached_separately(dispatcher: ToolDispatcher, handler: Counter) -> None:
    await dispatcher.invoke("lookup", {"itemName": "apple"})
    await dispatcher.invoke("remote_lookup", {"itemName": "apple"})
    assert handler.calls == 2


# ═════════════════════════════════════════════════════════════════════════════
# Breaker routing
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_dependency_failures_open_breaker(dispatcher: ToolDispatcher, handler: Counter) -> None:
    for _ in range(2):
        kind = (await dispatcher.invoke("remote_lookup", {"itemName": "down"})).unwrap_err().kind
        assert kind == ErrorKind.DEPENDENCY_ERROR
    assert dispatcher.breakers["remote"].state == State.OPEN

    error = (await dispatcher.invoke("remote_lookup", {"itemName": "down"})).unwrap_err()
    assert error.kind == ErrorKind.CIRCUIT_OPEN
    assert error.details["dependency"] == "remote"
    assert handler.calls == 2


@pytest.mark.asyncio
async def test_cache_hits_bypass_open_breaker(dispatcher: ToolDispatcher, handler: Counter) -> None:
    await dispatcher.invoke("remote_lookup", {"itemName": "apple"})
    for _ in range(2):
        await dispatcher.invoke("remote_lookup", {"itemName": "down"})

    assert (await dispatcher.invoke("remote_lookup", {"itemName": "apple"})).is_ok()
    assert (await dispatcher.invoke("remote_lookup", {"itemName": "pear"})).unwrap_err().kind == ErrorKind.CIRCUIT_OPEN


@pytest.mark.asyncio
async def test_breaker_recovers_after_timeout(dispatcher: ToolDispatcher, clock: FakeClock) -> None:
    for _ in range(2):
        await dispatcher.invoke("remote_lookup", {"itemName": "down"})
    clock.advance(30)
    assert (await dispatcher.invoke("remote_lookup", {"itemName": "pear"})).is_ok()
    assert dispatcher.breakers["remote"].state == State.CLOSED


@pytest.mark.asyncio
async def test_not_found_does_not_trip_breaker(dispatcher: ToolDispatcher) -> None:
    await dispatcher.invoke("remote_lookup", {"itemName": "missing"})
    assert dispatcher.breakers["remote"].failures == 0


def test_register_requires_breaker(dispatcher: ToolDispatcher, handler: Counter) -> None:
    with pytest.raises(ValueError, match="no breaker"):
        dispatcher.register(ToolSpec("other", "Calls an unconfigured service", LookupParams, handler,
                                     dependency="unknown"))


# ═════════════════════════════════════════════════════════════════════════════
# Envelope & listing
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_envelope_shapes(dispatcher: ToolDispatcher) -> None:
    assert await dispatcher.invoke_envelope("lookup", {"itemName": "apple"}) == {"item": "apple"}

    envelope = await dispatcher.invoke_envelope("lookup", {"itemName": "missing"})
    assert envelope == {
        "error": "Item not found",
        "code": "NOT_FOUND",
        "details": {"available": ["apple"], "suggestions": ["apple"]},
    }


def test_tools_listing_uses_camel_case_schema(dispatcher: ToolDispatcher) -> None:
    [lookup, _] = dispatcher.tools()
    assert lookup["name"] == "lookup"
    assert "itemName" in lookup["inputSchema"]["properties"]
    assert lookup["inputSchema"]["required"] == ["itemName"]


def test_stats(dispatcher: ToolDispatcher) -> None:
    stats = dispatcher.stats()
    assert stats["tools"] == 2
    assert stats["breakers"]["remote"]["state"] == "CLOSED"
