"""Query cache types."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

Producer = Callable[[], Awaitable[Any]]

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class CacheEntry:
    """Settled result for one query key. Replaced wholesale, never mutated."""

    status: str  # "success" | "error"
    data: Any = None
    error: Exception | None = None
    updated_at: float = 0.0
    invalidated: bool = False


@dataclass
class CacheStats:
    """Cache statistics."""

    entries_count: int
    success_count: int
    error_count: int
    in_flight_count: int

    @property
    def is_empty(self) -> bool:
        return self.entries_count == 0 and self.in_flight_count == 0
