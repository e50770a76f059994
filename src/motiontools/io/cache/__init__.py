"""Tool result caching with TTL support.

Provides in-memory caching to prevent repeated lookups for identical
invocations. Cache keys are generated from tool name + hashed parameters.

- TTLCache: Thread-safe in-memory cache, lazy expiry on read
- CacheSweeper: Cancellable periodic ``cleanup()`` task
"""

from .cache import DEFAULT_TTL, CacheEntry, Clock, TTLCache
from .sweeper import CacheSweeper

__all__ = ["DEFAULT_TTL", "CacheEntry", "CacheSweeper", "Clock", "TTLCache"]
