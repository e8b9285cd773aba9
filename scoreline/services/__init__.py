"""Service layer."""

from scoreline.services.scoreboard import (
    ScoreboardService,
    create_default_service,
    scoreboard_key,
    summary_key,
)

__all__ = [
    "ScoreboardService",
    "create_default_service",
    "scoreboard_key",
    "summary_key",
]
