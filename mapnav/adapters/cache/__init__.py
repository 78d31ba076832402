"""Cache adapters - Implementations of the CachePort.

Available implementations:
- InMemoryCache: Thread-safe, size-bounded LRU cache
- NullCache: No-op cache (always misses)
"""

from .memory_cache import InMemoryCache
from .null_cache import NullCache

__all__ = ["InMemoryCache", "NullCache"]
