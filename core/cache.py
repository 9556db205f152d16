"""
Grantha - Bounded Result Cache

Provides the cache that holds generated study text:
- O(1) LRU cache with bounded entry count
- Optional TTL-based expiration
- Thread-safe operations
- Hit/miss statistics

Callers own the instance and inject it where it is needed; nothing in
the package keeps a module-level cache of generated text.
"""

from __future__ import annotations

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class CacheEntry(Generic[T]):
    """Cached value and its insertion time."""

    value: T
    created_at: float


@dataclass
class CacheStats:
    """Statistics for cache monitoring."""

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    expirations: int = 0
    entry_count: int = 0

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": self.hit_rate,
            "evictions": self.evictions,
            "expirations": self.expirations,
            "entry_count": self.entry_count,
        }


class LRUCache(Generic[T]):
    """
    O(1) LRU cache with bounded size and optional TTL.

    Usage:
        cache = LRUCache[str](max_size=256, ttl_seconds=None)
        cache.put(("John", 3, 16, "INTERLINEAR", "EN"), text)
        result = cache.get(("John", 3, 16, "INTERLINEAR", "EN"))
    """

    def __init__(
        self,
        max_size: int = 512,
        ttl_seconds: Optional[float] = None,
    ):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds

        self._cache: "OrderedDict[Hashable, CacheEntry[T]]" = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats()

    def _is_expired(self, entry: CacheEntry[T]) -> bool:
        if self.ttl_seconds is None:
            return False
        return time.monotonic() - entry.created_at > self.ttl_seconds

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry. Must be called with lock held."""
        if self._cache:
            self._cache.popitem(last=False)
            self._stats.evictions += 1

    def get(self, key: Hashable) -> Optional[T]:
        """
        Get a value from the cache.

        O(1) operation that also updates access order.
        """
        with self._lock:
            entry = self._cache.get(key)

            if entry is None:
                self._stats.misses += 1
                return None

            if self._is_expired(entry):
                del self._cache[key]
                self._stats.expirations += 1
                self._stats.misses += 1
                self._stats.entry_count = len(self._cache)
                return None

            self._cache.move_to_end(key)
            self._stats.hits += 1
            return entry.value

    def put(self, key: Hashable, value: T) -> None:
        """Put a value into the cache, evicting the least recently used entry when full."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]

            while len(self._cache) >= self.max_size:
                self._evict_oldest()

            self._cache[key] = CacheEntry(value=value, created_at=time.monotonic())
            self._stats.entry_count = len(self._cache)

    def contains(self, key: Hashable) -> bool:
        """Check if key exists and is not expired."""
        with self._lock:
            entry = self._cache.get(key)
            return entry is not None and not self._is_expired(entry)

    def delete(self, key: Hashable) -> bool:
        """Remove a key from the cache."""
        with self._lock:
            if key in self._cache:
                del self._cache[key]
                self._stats.entry_count = len(self._cache)
                return True
            return False

    def clear(self) -> None:
        """Clear all entries from the cache."""
        with self._lock:
            self._cache.clear()
            self._stats = CacheStats()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> CacheStats:
        """Get a snapshot of cache statistics."""
        with self._lock:
            return CacheStats(
                hits=self._stats.hits,
                misses=self._stats.misses,
                evictions=self._stats.evictions,
                expirations=self._stats.expirations,
                entry_count=len(self._cache),
            )
