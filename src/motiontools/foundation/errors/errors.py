"""Standardized error handling for tool invocations.

Provides error kinds and structured error responses for the invocation
envelope. Uses Pydantic for validation and serialization.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .types import JsonDict, JsonValue

if TYPE_CHECKING:
    from pydantic import ValidationError


class ErrorKind(StrEnum):
    """Error taxonomy for tool invocation failures.

    VALIDATION_ERROR and NOT_FOUND are expected outcomes, returned as values.
    CIRCUIT_OPEN and DEPENDENCY_ERROR come from guarded external calls.
    INTERNAL_ERROR is the downgraded form of any unexpected fault.
    """
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    NOT_FOUND = "NOT_FOUND"
    CIRCUIT_OPEN = "CIRCUIT_OPEN"
    DEPENDENCY_ERROR = "DEPENDENCY_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def cacheable(self) -> bool:
        """Whether a failure of this kind may be memoized like a success."""
        return self in _CACHEABLE_KINDS

    @property
    def transient(self) -> bool:
        """Whether a retry later might produce a different outcome."""
        return self in _TRANSIENT_KINDS


_CACHEABLE_KINDS: frozenset[ErrorKind] = frozenset({ErrorKind.NOT_FOUND})
_TRANSIENT_KINDS: frozenset[ErrorKind] = frozenset({
    ErrorKind.CIRCUIT_OPEN,
    ErrorKind.DEPENDENCY_ERROR,
    ErrorKind.INTERNAL_ERROR,
})


class ToolError(BaseModel):
    """Structured error response for a failed invocation.

    Attributes:
        tool_name: Name of the requested tool
        kind: Machine-readable error classification
        message: Human-readable error message (never raw exception text)
        details: Optional JSON details (per-field violations, suggestions)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "title": "Tool Error",
            "description": "Structured error from a tool invocation",
            "examples": [{
                "tool_name": "get_motion_docs",
                "kind": "NOT_FOUND",
                "message": 'Documentation topic "springs" not found',
                "details": {"suggestions": ["getting-started"]},
            }],
        },
    )

    tool_name: Annotated[str, Field(min_length=1, description="Name of the requested tool")]
    kind: ErrorKind = Field(description="Machine-readable error classification")
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    details: JsonValue = Field(default=None, description="Optional structured details")

    @computed_field
    @property
    def recoverable(self) -> bool:
        """Whether the caller might succeed by retrying later."""
        return self.kind.transient

    @classmethod
    def create(
        cls,
        tool_name: str,
        message: str,
        kind: ErrorKind,
        *,
        details: JsonValue = None,
    ) -> Self:
        """Factory method for construction."""
        return cls(tool_name=tool_name, kind=kind, message=message, details=details)

    def render(self) -> JsonDict:
        """Envelope form returned to the transport: ``{error, code, details?}``."""
        out: JsonDict = {"error": self.message, "code": self.kind.value}
        if self.details is not None:
            out["details"] = self.details
        return out

    def __hash__(self) -> int:
        return hash((self.tool_name, self.kind, self.message))


class ToolException(Exception):
    """Exception wrapping a ToolError for raising from deep inside a handler."""

    __slots__ = ("error",)

    def __init__(self, error: ToolError) -> None:
        self.error = error
        super().__init__(error.message)

    @classmethod
    def create(cls, tool_name: str, message: str, kind: ErrorKind, *, details: JsonValue = None) -> Self:
        """Create tool exception."""
        return cls(ToolError.create(tool_name, message, kind, details=details))


class ValidationToolException(ToolException):
    """Raised when input fails validation before the params schema check."""


class CircuitOpenError(Exception):
    """Raised by a circuit breaker that rejects a call without attempting it."""

    __slots__ = ("dependency", "retry_after")

    def __init__(self, dependency: str, retry_after: float | None = None) -> None:
        self.dependency = dependency
        self.retry_after = retry_after
        wait = f", retry in {math.ceil(retry_after)}s" if retry_after is not None else ""
        super().__init__(f"Circuit breaker for '{dependency}' is OPEN{wait}")


class DependencyError(Exception):
    """Raised when a call to an external dependency itself fails."""

    __slots__ = ("dependency", "status")

    def __init__(self, dependency: str, message: str, *, status: int | None = None) -> None:
        self.dependency = dependency
        self.status = status
        super().__init__(message)


def format_validation_error(exc: ValidationError) -> list[JsonDict]:
    """Flatten a pydantic ValidationError into ``{field, constraint, message}`` items."""
    return [
        {
            "field": ".".join(str(p) for p in err["loc"]) or "params",
            "constraint": err["type"],
            "message": err["msg"],
        }
        for err in exc.errors(include_url=False)
    ]
