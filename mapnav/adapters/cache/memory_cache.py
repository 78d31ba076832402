"""Thread-safe in-memory cache implementation.

Routes never change once the network is loaded, so entries do not
expire; the cache is only bounded in size. When full, the least
recently used entry is evicted.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe, size-bounded LRU cache.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[Route](name="routes", max_size=128)
        route = cache.get_or_compute(key, lambda: network.shortest_path(a, b))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: "OrderedDict[str, T]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        if self.max_size is not None and self.max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {self.max_size}")
        self._logger = logging.getLogger(f"mapnav.cache.{self.name}")

    def get(self, key: str) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._store.move_to_end(key)
            self._hits += 1
            return self._store[key]

    def set(self, key: str, value: T) -> None:
        with self._lock:
            self._store[key] = value
            self._store.move_to_end(key)
            if self.max_size is not None and len(self._store) > self.max_size:
                evicted, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": evicted, "reason": "max_size"},
                )

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        ``compute_fn`` runs outside the lock; two threads missing on the
        same key may both compute it, and the last one stored wins.
        A ``None`` result is returned but not stored.
        """
        value = self.get(key)
        if value is not None:
            return value

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        if computed is not None:
            self.set(key, computed)
        return computed

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._store.pop(key, None) is not None

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return cache statistics.

        Returns:
            Dictionary with hit/miss counts and size.
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
