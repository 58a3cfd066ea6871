"""Formatter cache.

Constructing a locale formatter resolves pattern tables and plural rules,
so formatters are built once per distinct key and reused. The cache is a
bounded LRU map guarded by a re-entrant lock.

Example:
    >>> cache = FormatterCache(max_size=50)
    >>> formatter = cache.get_or_create("rel:en:long:auto", build_formatter)
    >>> cache.stats.hit_rate
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CACHE_SIZE = 100


@dataclass
class CacheStats:
    """Statistics for cache operations.

    Attributes:
        hits: Number of cache hits.
        misses: Number of cache misses.
        evictions: Number of evicted entries.
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0

    def record_hit(self) -> None:
        self.hits += 1

    def record_miss(self) -> None:
        self.misses += 1

    def record_eviction(self, count: int = 1) -> None:
        self.evictions += count

    def reset(self) -> None:
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @property
    def hit_rate(self) -> float:
        """Get cache hit rate as percentage."""
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return (self.hits / total) * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate_percent": self.hit_rate,
        }


class FormatterCache(Generic[T]):
    """Thread-safe LRU cache for formatter instances.

    Uses an OrderedDict (hash map over a doubly linked list) so lookups,
    inserts and evictions are O(1). The most recently used entry sits at
    the end; the least recently used entry is evicted first.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        """Initialize cache.

        Args:
            max_size: Maximum number of distinct keys

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self._max_size = max_size
        self._entries: OrderedDict[str, T] = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats()

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def size(self) -> int:
        """Get current number of entries."""
        with self._lock:
            return len(self._entries)

    @property
    def stats(self) -> CacheStats:
        return self._stats

    def get(self, key: str) -> T | None:
        """Get value by key, marking it most recently used.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found
        """
        with self._lock:
            if key not in self._entries:
                self._stats.record_miss()
                return None

            self._entries.move_to_end(key)
            self._stats.record_hit()
            return self._entries[key]

    def set(self, key: str, value: T) -> None:
        """Store a value, evicting the least recently used entry if full."""
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = value
            self._evict_overflow()

    def get_or_create(self, key: str, factory: Callable[[], T]) -> T:
        """Return the cached value for key, building it on a miss.

        The factory runs under the cache lock, so concurrent callers
        asking for the same key construct it only once.

        Args:
            key: Cache key
            factory: Zero-argument callable that builds the value

        Returns:
            Cached or newly created value
        """
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
                self._stats.record_hit()
                return self._entries[key]

            self._stats.record_miss()
            logger.debug("Formatter cache miss for %s", key)
            value = factory()
            self._entries[key] = value
            self._evict_overflow()
            return value

    def delete(self, key: str) -> bool:
        """Delete a key, returns True if it was present."""
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                return True
            return False

    def clear(self) -> None:
        """Remove all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._stats.reset()

    def resize(self, max_size: int) -> None:
        """Change the capacity, evicting entries if it shrinks."""
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        with self._lock:
            if max_size != self._max_size:
                logger.debug("Resizing formatter cache from %d to %d", self._max_size, max_size)
                self._max_size = max_size
                self._evict_overflow()

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

    def _evict_overflow(self) -> None:
        evicted = 0
        while len(self._entries) > self._max_size:
            key, _ = self._entries.popitem(last=False)
            logger.debug("Evicted formatter %s", key)
            evicted += 1
        if evicted:
            self._stats.record_eviction(evicted)

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries


# Process-lifetime default instance
_default_cache: FormatterCache[Any] | None = None
_default_cache_lock = threading.Lock()


def get_default_cache() -> FormatterCache[Any]:
    """Get the shared process-wide formatter cache."""
    global _default_cache
    if _default_cache is None:
        with _default_cache_lock:
            if _default_cache is None:
                _default_cache = FormatterCache()
    return _default_cache


def clear_cache() -> None:
    """Clear the shared formatter cache."""
    get_default_cache().clear()


__all__ = [
    "DEFAULT_CACHE_SIZE",
    "CacheStats",
    "FormatterCache",
    "get_default_cache",
    "clear_cache",
]
