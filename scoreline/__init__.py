"""scoreline - ESPN scoreboard fetching, caching and normalization."""

from scoreline.config import ScorelineSettings
from scoreline.consumers.cache import QueryCache
from scoreline.core import (
    Game,
    GameDetails,
    League,
    QueryKey,
    QueryResult,
    Side,
    StatusVariant,
    Team,
)
from scoreline.providers import RequestError, TransportError
from scoreline.providers.espn import (
    ESPNClient,
    aggregate_teams,
    get_status_variant,
    league_path,
    map_events_to_games,
    map_summary_to_details,
)
from scoreline.services import ScoreboardService, create_default_service

__version__ = "0.1.0"

__all__ = [
    "ESPNClient",
    "Game",
    "GameDetails",
    "League",
    "QueryCache",
    "QueryKey",
    "QueryResult",
    "RequestError",
    "ScoreboardService",
    "ScorelineSettings",
    "Side",
    "StatusVariant",
    "Team",
    "TransportError",
    "aggregate_teams",
    "create_default_service",
    "get_status_variant",
    "league_path",
    "map_events_to_games",
    "map_summary_to_details",
]
