"""Unified error handling for motiontools.

- ErrorKind: Error taxonomy for invocation failures
- ToolError/ToolException: Structured errors and exceptions
- CircuitOpenError/DependencyError: Failures of guarded external calls
- Result/Ok/Err: Monadic error handling for expected failures
- ToolResult helpers: failure, not_found, to_envelope
"""

from .errors import (
    CircuitOpenError,
    DependencyError,
    ErrorKind,
    ToolError,
    ToolException,
    ValidationToolException,
    format_validation_error,
)
from .result import Err, Ok, Result
from .tool import ToolResult, failure, not_found, to_envelope, to_payload
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    # Core errors
    "ErrorKind", "ToolError", "ToolException", "ValidationToolException", "format_validation_error",
    "CircuitOpenError", "DependencyError",
    # Result monad
    "Result", "Ok", "Err",
    # Tool integration
    "ToolResult", "failure", "not_found", "to_envelope", "to_payload",
    # JSON aliases
    "JsonDict", "JsonPrimitive", "JsonValue",
]
