"""Tool dispatch: lookup, validation, caching and fault isolation."""

from .dispatcher import ToolDispatcher

__all__ = ["ToolDispatcher"]
