"""In-memory query cache with single-flight, staleness and retry.

One entry per QueryKey. A key moves through:

    (none) -> in flight -> success | error
    success --stale--> in flight (old data still visible) -> success | error

Concurrent observers of a key share one in-flight task. Producer
failures are retried immediately up to the retry budget, then stored
as the key's error. Nothing here raises producer exceptions to callers.
"""

import asyncio
import dataclasses
import logging
import time
from collections.abc import Callable

from scoreline.core.types import QueryKey, QueryResult

from .types import ERROR, SUCCESS, CacheEntry, CacheStats, Producer

logger = logging.getLogger(__name__)


def format_key(key: QueryKey) -> str:
    """Render a key for log messages: scoreboard/NBA/today."""
    league = getattr(key.league, "name", key.league)
    return f"{key.kind}/{league}/{key.variable}"


class QueryCache:
    """Keyed cache of async query results.

    Usage:
        cache = QueryCache()
        result = await cache.fetch(key, producer, stale_time=30.0, retry=1)
        if result.is_error:
            ...
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[QueryKey, CacheEntry] = {}
        self._in_flight: dict[QueryKey, asyncio.Task] = {}

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def peek(self, key: QueryKey) -> QueryResult:
        """Current result for a key. Never starts a request."""
        entry = self._entries.get(key)
        fetching = key in self._in_flight

        if entry is not None and entry.status == SUCCESS:
            return QueryResult(data=entry.data, is_fetching=fetching)
        if fetching:
            return QueryResult(is_loading=True, is_fetching=True)
        if entry is not None:
            return QueryResult(error=entry.error)
        return QueryResult()

    def is_stale(self, key: QueryKey, stale_time: float) -> bool:
        """True unless the key holds a success younger than stale_time."""
        entry = self._entries.get(key)
        if entry is None or entry.status != SUCCESS or entry.invalidated:
            return True
        return self._clock() - entry.updated_at >= stale_time

    def is_fetching(self, key: QueryKey) -> bool:
        return key in self._in_flight

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def observe(
        self,
        key: QueryKey,
        producer: Producer,
        *,
        stale_time: float,
        retry: int = 1,
        enabled: bool = True,
    ) -> QueryResult:
        """Snapshot a key, starting a request if it is missing or stale.

        Args:
            key: Query identity
            producer: Zero-argument coroutine function returning the data
            stale_time: Seconds a success stays fresh
            retry: Extra attempts after a failure (no delay between them)
            enabled: False gates the query off entirely (neutral result)

        Returns:
            QueryResult for the key as of now
        """
        if not enabled:
            return QueryResult()

        if key not in self._in_flight and self.is_stale(key, stale_time):
            self._start(key, producer, retry)

        return self.peek(key)

    async def fetch(
        self,
        key: QueryKey,
        producer: Producer,
        *,
        stale_time: float,
        retry: int = 1,
        enabled: bool = True,
    ) -> QueryResult:
        """Like observe(), but waits while the key has nothing to show yet.

        Stale data is returned immediately while it is revalidated in the
        background. Cancelling the caller does not cancel the shared request.
        """
        result = self.observe(key, producer, stale_time=stale_time, retry=retry, enabled=enabled)
        if not result.is_loading:
            return result

        task = self._in_flight.get(key)
        if task is not None:
            await asyncio.wait({task})
        return self.peek(key)

    # -------------------------------------------------------------------------
    # Invalidation
    # -------------------------------------------------------------------------

    def invalidate(self, key: QueryKey) -> None:
        """Mark a key stale; its data stays visible until the next refetch settles."""
        entry = self._entries.get(key)
        if entry is not None:
            self._entries[key] = dataclasses.replace(entry, invalidated=True)

    def clear(self) -> None:
        """Drop all settled entries. In-flight requests still complete and store."""
        self._entries.clear()

    def get_stats(self) -> CacheStats:
        """Get cache statistics."""
        entries = list(self._entries.values())
        return CacheStats(
            entries_count=len(entries),
            success_count=sum(1 for e in entries if e.status == SUCCESS),
            error_count=sum(1 for e in entries if e.status == ERROR),
            in_flight_count=len(self._in_flight),
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _start(self, key: QueryKey, producer: Producer, retry: int) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("[QUERY_CACHE] No running event loop, not fetching %s", format_key(key))
            return

        task = loop.create_task(self._run(key, producer, retry))
        self._in_flight[key] = task

        def _done(t: asyncio.Task) -> None:
            if self._in_flight.get(key) is t:
                del self._in_flight[key]

        task.add_done_callback(_done)
        logger.debug("[QUERY_CACHE] Fetching %s", format_key(key))

    async def _run(self, key: QueryKey, producer: Producer, retry: int) -> None:
        attempts = max(retry, 0) + 1
        error: Exception | None = None

        for attempt in range(1, attempts + 1):
            try:
                data = await producer()
            except Exception as e:
                error = e
                logger.warning(
                    "[QUERY_CACHE] %s failed (attempt %d/%d): %s",
                    format_key(key),
                    attempt,
                    attempts,
                    e,
                )
                continue

            self._entries[key] = CacheEntry(status=SUCCESS, data=data, updated_at=self._clock())
            return

        logger.error("[QUERY_CACHE] %s failed after %d attempts: %s", format_key(key), attempts, error)
        self._entries[key] = CacheEntry(status=ERROR, error=error, updated_at=self._clock())
