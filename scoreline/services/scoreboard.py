"""Scoreboard service layer.

Consumer-facing queries over the ESPN client, backed by the query cache.
Consumers call this service - never the client directly.

Query keys and policies:
- Scoreboard: ("scoreboard", league, date or "today"), fresh 30s, 1 retry
- Summary: ("summary", league, event_id), fresh 60s, 1 retry,
  gated off until an event id is supplied
"""

import dataclasses
import logging

from scoreline.config import ScorelineSettings, get_settings
from scoreline.consumers.cache import QueryCache, format_key
from scoreline.core.types import (
    DetailsResult,
    GamesResult,
    League,
    QueryKey,
    QueryResult,
    TeamsResult,
)
from scoreline.providers.espn import (
    ESPNClient,
    aggregate_teams,
    map_events_to_games,
    map_summary_to_details,
)

logger = logging.getLogger(__name__)

SCOREBOARD = "scoreboard"
SUMMARY = "summary"
TODAY = "today"


def scoreboard_key(league: League | str, date: str | None = None) -> QueryKey:
    """Key for a league's scoreboard; no date means 'today'."""
    return QueryKey(SCOREBOARD, League.parse(league), date or TODAY)


def summary_key(league: League | str, event_id: str | None) -> QueryKey:
    """Key for a single event's summary."""
    return QueryKey(SUMMARY, League.parse(league), str(event_id or ""))


def _extend(result: QueryResult, result_cls: type, **extra) -> QueryResult:
    """Copy a base result into a richer result type."""
    base = {f.name: getattr(result, f.name) for f in dataclasses.fields(QueryResult)}
    return result_cls(**base, **extra)


def create_default_service(settings: ScorelineSettings | None = None) -> "ScoreboardService":
    """Create a ScoreboardService with its own client and cache."""
    settings = settings or get_settings()
    client = ESPNClient(base_url=settings.base_url, timeout=settings.timeout)
    return ScoreboardService(client=client, cache=QueryCache(), settings=settings)


class ScoreboardService:
    """Service layer for scoreboard and summary queries.

    Every method returns a QueryResult and never raises for provider
    failures; those arrive as result.error. With wait=False the current
    snapshot is returned at once (possibly still loading).
    """

    def __init__(
        self,
        client: ESPNClient | None = None,
        cache: QueryCache | None = None,
        settings: ScorelineSettings | None = None,
    ):
        self._settings = settings or get_settings()
        self._client = client or ESPNClient(
            base_url=self._settings.base_url, timeout=self._settings.timeout
        )
        self._cache = cache or QueryCache()

    @property
    def cache(self) -> QueryCache:
        return self._cache

    async def _query(self, key: QueryKey, producer, *, stale_time, retry, enabled, wait):
        if not enabled:
            logger.debug("[SCOREBOARD] %s is disabled, not fetching", format_key(key))
        if wait:
            return await self._cache.fetch(
                key, producer, stale_time=stale_time, retry=retry, enabled=enabled
            )
        return self._cache.observe(key, producer, stale_time=stale_time, retry=retry, enabled=enabled)

    async def scoreboard(
        self, league: League | str, date: str | None = None, *, wait: bool = True
    ) -> QueryResult[dict]:
        """Raw scoreboard payload for a league and optional date."""
        league = League.parse(league)
        return await self._query(
            scoreboard_key(league, date),
            lambda: self._client.get_scoreboard(league, date),
            stale_time=self._settings.scoreboard_stale_time,
            retry=self._settings.scoreboard_retry,
            enabled=True,
            wait=wait,
        )

    async def game_summary(
        self, league: League | str, event_id: str | None, *, wait: bool = True
    ) -> QueryResult[dict]:
        """Raw summary payload for an event. Neutral until event_id is set."""
        league = League.parse(league)
        return await self._query(
            summary_key(league, event_id),
            lambda: self._client.get_summary(league, str(event_id)),
            stale_time=self._settings.summary_stale_time,
            retry=self._settings.summary_retry,
            enabled=bool(event_id),
            wait=wait,
        )

    async def teams(
        self, league: League | str, date: str | None = None, *, wait: bool = True
    ) -> TeamsResult:
        """Scoreboard result plus the teams playing in it."""
        result = await self.scoreboard(league, date, wait=wait)
        teams = aggregate_teams(result.data) if result.data is not None else []
        return _extend(result, TeamsResult, teams=teams)

    async def games(
        self, league: League | str, date: str | None = None, *, wait: bool = True
    ) -> GamesResult:
        """Scoreboard result plus its normalized games."""
        result = await self.scoreboard(league, date, wait=wait)
        games = map_events_to_games(result.data) if result.data is not None else []
        return _extend(result, GamesResult, games=games)

    async def game_details(
        self, league: League | str, event_id: str | None, *, wait: bool = True
    ) -> DetailsResult:
        """Summary result plus normalized game details."""
        result = await self.game_summary(league, event_id, wait=wait)
        details = map_summary_to_details(result.data) if result.data is not None else None
        return _extend(result, DetailsResult, details=details)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
