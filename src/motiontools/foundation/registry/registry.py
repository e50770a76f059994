"""Central registry of named tool handlers.

The registry provides:
- Tool registration and lookup by name
- Per-tool parameter schema, cache TTLs and guarded dependency
- Formatted tool descriptions for the transport's tool listing
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from motiontools.foundation.errors import JsonDict, ToolResult

# handle(params) -> payload | ToolResult, sync or async; may raise
Handler = Callable[[Any], "ToolResult | BaseModel | Any | Awaitable[ToolResult | BaseModel | Any]"]

DEFAULT_MISS_TTL: float = 300.0  # 5 minutes


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Registration record for one tool.

    Attributes:
        name: Tool name used in invocations
        description: Human-readable description for tool listings
        params_model: Pydantic model validating sanitized params
        handler: Callable receiving the validated params model
        ttl: Cache TTL in seconds for successful results
        miss_ttl: Cache TTL in seconds for cacheable failures (not found)
        dependency: Name of the circuit breaker guarding the handler, if any
    """

    name: str
    description: str
    params_model: type[BaseModel]
    handler: Handler = field(repr=False)
    ttl: float = 300.0
    miss_ttl: float = DEFAULT_MISS_TTL
    dependency: str | None = None

    def describe(self) -> JsonDict:
        """Tool listing entry with the JSON schema of its parameters."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.params_model.model_json_schema(by_alias=True),
        }


class ToolRegistry:
    """Registry of available tools keyed by name.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register(ToolSpec("echo", "Echo back the input text", EchoParams, echo))
        >>> registry.get("echo").ttl
        300.0
    """

    __slots__ = ("_tools",)

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        """Register a tool. Names must be unique."""
        if spec.name in self._tools:
            raise ValueError(f"Tool '{spec.name}' already registered. Use unregister() first.")
        if len(spec.description) < 10:
            raise ValueError(f"Tool '{spec.name}' description too short for tool selection.")
        self._tools[spec.name] = spec

    def unregister(self, name: str) -> bool:
        """Remove a tool by name. Returns True if found."""
        return self._tools.pop(name, None) is not None

    def get(self, name: str) -> ToolSpec | None:
        """Get tool by name."""
        return self._tools.get(name)

    @property
    def names(self) -> list[str]:
        """Registered tool names in registration order."""
        return list(self._tools)

    def describe(self) -> list[JsonDict]:
        """Listing entries for every registered tool."""
        return [spec.describe() for spec in self._tools.values()]

    def __getitem__(self, name: str) -> ToolSpec:
        """Get tool by name, raises KeyError if not found."""
        return self._tools[name]

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(self._tools.values())
