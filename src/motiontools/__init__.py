"""Motiontools - Resilient tool dispatch for Motion animation reference lookups.

Serves Motion component references, examples, docs and release metadata as
named tools. Every invocation goes through one pipeline: input sanitization,
schema validation, a TTL result cache, and (for tools calling GitHub) a
circuit breaker. Outcomes are always a ``Result``: a payload or a structured
``ToolError``, never an exception.

Quick Start:
    >>> from motiontools import MotionService
    >>>
    >>> async with MotionService.from_env() as service:
    ...     result = await service.invoke("get_motion_component", {"componentName": " motion.div "})
    ...     result.unwrap().category
    'react'

Transport Envelope:
    >>> await service.invoke_envelope("get_motion_docs", {"topic": "springs"})
    {'error': 'Documentation topic "springs" not found', 'code': 'NOT_FOUND', 'details': {...}}

Building Blocks (for custom composition):
    >>> from motiontools import TTLCache, CircuitBreaker, ToolRegistry, ToolDispatcher
    >>> dispatcher = ToolDispatcher(ToolRegistry(), TTLCache(60), {"github": CircuitBreaker("github", 3, 30)})

Configuration:
    MOTIONTOOLS_CACHE_TTL, MOTIONTOOLS_CACHE_CLEANUP_INTERVAL,
    MOTIONTOOLS_BREAKER_GITHUB_FAILURE_THRESHOLD, MOTIONTOOLS_HTTP_TIMEOUT,
    GITHUB_PERSONAL_ACCESS_TOKEN, MOTIONTOOLS_LOG_FORMAT ...
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import (
    CircuitOpenError,
    DependencyError,
    Err,
    ErrorKind,
    Ok,
    Result,
    ToolError,
    ToolException,
    ToolResult,
    to_envelope,
)

# Config
from .foundation.config import MotionSettings, clear_settings_cache, get_settings

# Registry & validation
from .foundation.registry import ToolRegistry, ToolSpec
from .foundation.validation import ParamsModel, sanitize

# Cache
from .io.cache import DEFAULT_TTL, CacheSweeper, TTLCache

# HTTP
from .io.http import ExternalCall, GitHubClient

# Runtime
from .runtime.dispatch import ToolDispatcher
from .runtime.observability import configure_logging, get_logger, log_context
from .runtime.resilience import CircuitBreaker, State

# Tools & service
from .tools import builtin_tools
from .service import MotionService

__all__ = [
    "__version__",
    # Errors
    "ErrorKind", "ToolError", "ToolException", "CircuitOpenError", "DependencyError",
    "Result", "Ok", "Err", "ToolResult", "to_envelope",
    # Config
    "MotionSettings", "get_settings", "clear_settings_cache",
    # Registry & validation
    "ToolRegistry", "ToolSpec", "ParamsModel", "sanitize",
    # Cache
    "DEFAULT_TTL", "TTLCache", "CacheSweeper",
    # HTTP
    "ExternalCall", "GitHubClient",
    # Runtime
    "ToolDispatcher", "CircuitBreaker", "State",
    "configure_logging", "get_logger", "log_context",
    # Tools & service
    "builtin_tools", "MotionService",
]
