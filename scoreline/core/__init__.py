"""Core types for scoreline.

All data structures are dataclasses with attribute access.
"""

from scoreline.core.types import (
    DetailsResult,
    Game,
    GameDetails,
    GamesResult,
    League,
    QueryKey,
    QueryResult,
    Side,
    StatusVariant,
    Team,
    TeamsResult,
    UnknownLeagueError,
    get_status_variant,
)

__all__ = [
    # Records
    "Game",
    "GameDetails",
    "League",
    "Side",
    "StatusVariant",
    "Team",
    # Query types
    "DetailsResult",
    "GamesResult",
    "QueryKey",
    "QueryResult",
    "TeamsResult",
    # Errors
    "UnknownLeagueError",
    # Functions
    "get_status_variant",
]
