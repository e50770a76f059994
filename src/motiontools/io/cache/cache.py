"""Tool result caching with TTL support.

Provides in-memory memoization so repeated identical invocations skip the
handler. Cache keys are generated from tool name + hashed canonical params.

Expiry is lazy on read (``get``/``has``) and active through ``cleanup()``,
which CacheSweeper calls periodically. There is no size-based eviction: the
key space is a handful of tool/parameter combinations. Free-text keys (search
queries) grow it with traffic, bounded only by the sweep.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from motiontools.runtime.observability import get_logger

if TYPE_CHECKING:
    from pydantic import BaseModel

DEFAULT_TTL: float = 300.0  # 5 minutes

Clock = Callable[[], float]

log = get_logger("cache")


@dataclass(slots=True)
class CacheEntry:
    """A cached value with age tracking."""
    value: object
    created_at: float
    ttl: float

    def expired(self, now: float) -> bool:
        return now - self.created_at > self.ttl


class TTLCache:
    """Thread-safe in-memory key/value cache with per-entry TTL.

    Uses RLock for synchronization, safe under concurrent access.

    Args:
        default_ttl: Default TTL in seconds for entries
        clock: Monotonic time source (injectable for tests)

    Example:
        >>> cache = TTLCache(default_ttl=60)
        >>> cache.set("docs:abc", {"title": "Gestures"})
        >>> cache.get("docs:abc")
        {'title': 'Gestures'}
    """

    __slots__ = ("_cache", "_default_ttl", "_clock", "_lock")

    def __init__(self, default_ttl: float = DEFAULT_TTL, *, clock: Clock = time.monotonic) -> None:
        self._cache: dict[str, CacheEntry] = {}
        self._default_ttl = default_ttl
        self._clock = clock
        self._lock = threading.RLock()

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def set(self, key: str, value: object, ttl: float | None = None) -> None:
        """Store value, replacing any prior entry and resetting its age."""
        with self._lock:
            self._cache[key] = CacheEntry(value, self._clock(), ttl if ttl is not None else self._default_ttl)
        log.debug("cache set", key=key)

    def get(self, key: str) -> object | None:
        """Return the live value for key, or None (expired entries are dropped)."""
        with self._lock:
            if (entry := self._cache.get(key)) is None:
                log.debug("cache miss", key=key)
                return None
            if entry.expired(self._clock()):
                del self._cache[key]
                log.debug("cache expired", key=key)
                return None
        log.debug("cache hit", key=key)
        return entry.value

    def has(self, key: str) -> bool:
        """Liveness check consistent with get(); drops an expired entry."""
        with self._lock:
            if (entry := self._cache.get(key)) is None:
                return False
            if entry.expired(self._clock()):
                del self._cache[key]
                return False
            return True

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns True if something was removed."""
        with self._lock:
            removed = self._cache.pop(key, None) is not None
        if removed:
            log.debug("cache delete", key=key)
        return removed

    def clear(self) -> None:
        """Remove all entries unconditionally."""
        with self._lock:
            self._cache.clear()
        log.debug("cache cleared")

    def cleanup(self) -> int:
        """Delete every expired entry. Returns the count removed."""
        with self._lock:
            now = self._clock()
            expired = [k for k, v in self._cache.items() if v.expired(now)]
            for key in expired:
                del self._cache[key]
        if expired:
            log.debug("cache cleanup", removed=len(expired))
        return len(expired)

    @property
    def size(self) -> int:
        """Stored entries, including expired ones not yet swept."""
        with self._lock:
            return len(self._cache)

    def __len__(self) -> int:
        return self.size

    def stats(self) -> dict[str, object]:
        """Get cache statistics for monitoring."""
        with self._lock:
            now = self._clock()
            expired = sum(1 for v in self._cache.values() if v.expired(now))
            return {
                "total_entries": len(self._cache),
                "expired_entries": expired,
                "active_entries": len(self._cache) - expired,
                "default_ttl": self._default_ttl,
            }

    @staticmethod
    def make_key(tool_name: str, params: BaseModel | dict[str, object]) -> str:
        """Generate cache key from tool name and parameters.

        Params are dumped in JSON mode with sorted keys, so the key does not
        depend on field order and is stable across restarts.
        """
        if hasattr(params, "model_dump"):
            params_dict = params.model_dump(mode="json")  # type: ignore[union-attr]
        else:
            params_dict = params
        params_json = json.dumps(params_dict, sort_keys=True, separators=(",", ":"), default=str)
        return f"{tool_name}:{hashlib.sha256(params_json.encode()).hexdigest()}"
