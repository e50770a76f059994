"""Tool dispatcher: the single entry point for tool invocations.

Pipeline per invocation:
    lookup → sanitize → validate → cache lookup → handler (through the
    dependency's circuit breaker, if any) → normalize → cache write

Every path ends in a ToolResult. Expected failures (unknown tool, invalid
params, not found) are built as values; exceptions are caught once here and
mapped onto the error taxonomy. Unexpected exceptions are logged with their
traceback and reported to the caller as a generic INTERNAL_ERROR.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from motiontools.foundation.errors import (
    CircuitOpenError,
    DependencyError,
    Err,
    ErrorKind,
    JsonDict,
    JsonValue,
    Ok,
    Result,
    ToolException,
    ToolResult,
    failure,
    format_validation_error,
    to_envelope,
)
from motiontools.foundation.registry import ToolRegistry, ToolSpec
from motiontools.foundation.validation import sanitize_params
from motiontools.io.cache import TTLCache
from motiontools.runtime.observability import get_logger, log_context
from motiontools.runtime.resilience import CircuitBreaker

log = get_logger("dispatcher")


class ToolDispatcher:
    """Routes invocations to registered tools with caching and fault isolation.

    Collaborators are injected so each test (or process) owns isolated
    instances of the cache and breakers.

    Args:
        registry: Registered tools
        cache: Result cache shared by all tools
        breakers: Circuit breakers keyed by dependency name

    Example:
        >>> dispatcher = ToolDispatcher(registry, TTLCache(), {"github": CircuitBreaker("github")})
        >>> result = await dispatcher.invoke("get_motion_docs", {"topic": " gestures "})
        >>> result.is_ok()
        True
    """

    __slots__ = ("_registry", "_cache", "_breakers")

    def __init__(
        self,
        registry: ToolRegistry,
        cache: TTLCache,
        breakers: Mapping[str, CircuitBreaker] | None = None,
    ) -> None:
        self._registry = registry
        self._cache = cache
        self._breakers: dict[str, CircuitBreaker] = dict(breakers or {})
        for spec in registry:
            self._check_dependency(spec)

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    @property
    def cache(self) -> TTLCache:
        return self._cache

    @property
    def breakers(self) -> Mapping[str, CircuitBreaker]:
        return self._breakers

    def register(self, spec: ToolSpec) -> None:
        """Register a tool whose dependency (if any) has a breaker."""
        self._check_dependency(spec)
        self._registry.register(spec)

    def tools(self) -> list[JsonDict]:
        """Listing entries for the transport's tool discovery."""
        return self._registry.describe()

    def _check_dependency(self, spec: ToolSpec) -> None:
        if spec.dependency is not None and spec.dependency not in self._breakers:
            raise ValueError(f"Tool '{spec.name}' depends on '{spec.dependency}' but no breaker is configured")

    # ─────────────────────────────────────────────────────────────────
    # Invocation
    # ─────────────────────────────────────────────────────────────────

    async def invoke(self, name: str, raw_params: object = None) -> ToolResult:
        """Run one invocation. Never raises for a tool failure."""
        if not isinstance(name, str) or (spec := self._registry.get(name)) is None:
            log.info("unknown tool", tool=str(name))
            return failure(
                str(name).strip() or "<unnamed>", f"Unknown tool: {name!r}", ErrorKind.UNKNOWN_TOOL,
                details={"available": self._registry.names},
            )

        with log_context(tool=name):
            try:
                params = spec.params_model.model_validate(sanitize_params(name, raw_params))
            except ValidationError as e:
                log.info("invalid params", errors=len(e.errors()))
                return failure(
                    name, f"Invalid parameters for {name}", ErrorKind.VALIDATION_ERROR,
                    details=format_validation_error(e),
                )
            except ToolException as e:
                return Err(e.error)

            key = TTLCache.make_key(name, params)
            if (cached := self._cache.get(key)) is not None:
                log.debug("served from cache")
                return cached  # type: ignore[return-value]

            result = await self._run(spec, params)
            if result.is_ok():
                log.info("tool succeeded")
            else:
                log.info("tool failed", kind=result.unwrap_err().kind.value)
            self._store(spec, key, result)
            return result

    async def invoke_envelope(self, name: str, raw_params: object = None) -> JsonValue | JsonDict:
        """Invoke and render as the transport envelope: payload or ``{error, code, details?}``."""
        return to_envelope(await self.invoke(name, raw_params))

    async def _run(self, spec: ToolSpec, params: BaseModel) -> ToolResult:
        """Call the handler, guarded by its breaker, and map any exception."""
        try:
            if spec.dependency is not None:
                out = await self._breakers[spec.dependency].execute(lambda: spec.handler(params))
            else:
                out = spec.handler(params)
                if inspect.isawaitable(out):
                    out = await out
        except ToolException as e:
            return Err(e.error)
        except ValidationError as e:
            return failure(
                spec.name, f"Invalid parameters for {spec.name}", ErrorKind.VALIDATION_ERROR,
                details=format_validation_error(e),
            )
        except CircuitOpenError as e:
            log.warning("circuit open", dependency=e.dependency, retry_after=e.retry_after)
            return failure(
                spec.name, str(e), ErrorKind.CIRCUIT_OPEN,
                details={"dependency": e.dependency, "retryAfter": e.retry_after},
            )
        except DependencyError as e:
            log.warning("dependency failed", dependency=e.dependency, status=e.status)
            return failure(
                spec.name, f"{e.dependency} request failed: {e}", ErrorKind.DEPENDENCY_ERROR,
                details={"dependency": e.dependency, "status": e.status},
            )
        except Exception:
            log.exception("handler raised")
            return failure(spec.name, f"Internal error while running {spec.name}", ErrorKind.INTERNAL_ERROR)
        return _normalize(out)

    def _store(self, spec: ToolSpec, key: str, result: ToolResult) -> None:
        """Cache successes and cacheable failures with the tool's TTLs."""
        if result.is_ok():
            self._cache.set(key, result, spec.ttl)
        elif (kind := result.unwrap_err().kind).cacheable:
            self._cache.set(key, result, spec.miss_ttl)
        else:
            log.debug("result not cached", kind=kind.value)

    def stats(self) -> dict[str, Any]:
        """Cache and breaker statistics for monitoring."""
        return {
            "tools": len(self._registry),
            "cache": self._cache.stats(),
            "breakers": {name: b.stats() for name, b in self._breakers.items()},
        }


def _normalize(out: object) -> ToolResult:
    """Handlers may return a ToolResult or a bare payload."""
    return out if isinstance(out, Result) else Ok(out)
