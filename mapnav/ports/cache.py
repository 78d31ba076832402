"""Cache port - Injectable caching abstraction.

The route finder caches computed routes through this protocol, so tests
and configuration can swap in a cache that never stores anything.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Disabled caching, tests
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None on a miss."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        1. Check if key exists in cache
        2. If yes, return cached value
        3. If no, call compute_fn, cache result, return result
        """
        ...

    def clear(self) -> int:
        """Clear all entries and return how many were removed."""
        ...

    def size(self) -> int:
        ...

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counters and the current size."""
        ...
