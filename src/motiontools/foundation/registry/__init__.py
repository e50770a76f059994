from .registry import DEFAULT_MISS_TTL, Handler, ToolRegistry, ToolSpec

__all__ = ["DEFAULT_MISS_TTL", "Handler", "ToolRegistry", "ToolSpec"]
