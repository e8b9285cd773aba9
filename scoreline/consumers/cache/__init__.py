"""Per-query result cache.

Provides:
1. Single-flight: one request per key no matter how many observers
2. Stale-while-revalidate: cached data stays visible during refreshes
3. Bounded immediate retry before settling into an error

The cache is an object handed to whoever needs it; there is no
module-level instance.
"""

from collections.abc import Callable

from .queries import QueryCache, format_key
from .types import CacheEntry, CacheStats, Producer


def create_query_cache(clock: Callable[[], float] | None = None) -> QueryCache:
    """Create a cache, optionally with a custom monotonic clock."""
    return QueryCache(clock=clock) if clock else QueryCache()


__all__ = [
    # Types
    "CacheEntry",
    "CacheStats",
    "Producer",
    # Classes
    "QueryCache",
    # Functions
    "create_query_cache",
    "format_key",
]
