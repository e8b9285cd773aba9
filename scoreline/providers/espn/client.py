"""ESPN API HTTP client.

Handles raw HTTP requests to ESPN endpoints.
No data transformation - just fetch and return JSON.
No retries, timeouts or caching here; the query cache owns those.
"""

import logging

import httpx

from scoreline.config import ESPN_BASE_URL
from scoreline.core.types import League
from scoreline.providers.errors import RequestError, TransportError

logger = logging.getLogger(__name__)


def league_path(league: League) -> str:
    """Convert a league to its ESPN sport/league path (e.g. 'basketball/nba')."""
    return League.parse(league).path


class ESPNClient:
    """Low-level async ESPN API client."""

    def __init__(
        self,
        base_url: str = ESPN_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def build_url(self, league: League, endpoint: str) -> str:
        """Build an endpoint URL: {base}/{sport}/{league}/{endpoint}."""
        return f"{self._base_url}/{league_path(league)}/{endpoint}"

    async def _request(self, url: str, params: dict | None = None) -> dict:
        """Make a single GET request and return the parsed JSON body.

        Raises:
            TransportError: no response was obtained
            RequestError: response had a non-success status
        """
        logger.debug("[ESPN] GET %s params=%s", url, params)
        try:
            response = await self._get_client().get(url, params=params)
        except httpx.TransportError as e:
            logger.warning("[ESPN] Request failed for %s: %s", url, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning("[ESPN] HTTP %d for %s", response.status_code, url)
            raise RequestError(response.status_code, response.reason_phrase, str(response.url))

        return response.json()

    async def get_scoreboard(self, league: League, date: str | None = None) -> dict:
        """Fetch scoreboard for a league.

        Args:
            league: League to fetch
            date: Optional date, sent verbatim as ?dates= (typically YYYYMMDD)

        Returns:
            Raw ESPN response
        """
        params = {}
        if date:
            params["dates"] = date
        return await self._request(self.build_url(league, "scoreboard"), params)

    async def get_summary(self, league: League, event_id: str) -> dict:
        """Fetch the summary for a single event.

        Args:
            league: League the event belongs to
            event_id: ESPN event ID

        Returns:
            Raw ESPN response
        """
        if not event_id:
            raise ValueError("event_id is required for a game summary")
        return await self._request(self.build_url(league, "summary"), {"event": str(event_id)})

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ESPNClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
