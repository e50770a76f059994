"""Integration between the Result monad and ToolError."""

from __future__ import annotations

from typing import Any, TypeAlias

from pydantic import BaseModel

from .errors import ErrorKind, ToolError
from .result import Err, Result
from .types import JsonDict, JsonValue

# Success payloads are pydantic models (or plain JSON for ad-hoc handlers)
ToolResult: TypeAlias = Result[Any, ToolError]


def failure(tool_name: str, message: str, kind: ErrorKind, *, details: JsonValue = None) -> ToolResult:
    """Create Err ToolResult from error parameters."""
    return Err(ToolError.create(tool_name, message, kind, details=details))


def not_found(tool_name: str, message: str, *, available: list[str], suggestions: list[str]) -> ToolResult:
    """Create a cacheable NOT_FOUND result carrying lookup hints."""
    return failure(
        tool_name, message, ErrorKind.NOT_FOUND,
        details={"available": available, "suggestions": suggestions},
    )


def to_payload(value: Any) -> JsonValue:
    """Render a success payload as plain JSON."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def to_envelope(result: ToolResult) -> JsonValue | JsonDict:
    """Render a ToolResult as the transport envelope (payload or error object)."""
    return result.match(ok=to_payload, err=lambda e: e.render())
