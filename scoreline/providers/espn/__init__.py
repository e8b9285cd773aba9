"""ESPN provider: HTTP client and payload normalization."""

from scoreline.providers.espn.client import ESPNClient, league_path
from scoreline.providers.espn.normalize import (
    get_status_variant,
    map_event_to_game,
    map_events_to_games,
    map_summary_to_details,
)
from scoreline.providers.espn.teams import aggregate_teams

__all__ = [
    "ESPNClient",
    "aggregate_teams",
    "get_status_variant",
    "league_path",
    "map_event_to_game",
    "map_events_to_games",
    "map_summary_to_details",
]
