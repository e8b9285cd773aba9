"""ESPN read API endpoints.

- GET /espn/{league}/games - Normalized games for a scoreboard
- GET /espn/{league}/teams - Teams playing on a scoreboard
- GET /espn/{league}/summary/{event_id} - Details for one event
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from scoreline.api.models import (
    GameDetailsResponse,
    GameResponse,
    GamesResponse,
    TeamResponse,
    TeamsResponse,
)
from scoreline.core.types import League, QueryResult, UnknownLeagueError
from scoreline.services import ScoreboardService, create_default_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/espn")


def get_service(request: Request) -> ScoreboardService:
    """Shared ScoreboardService stored on the app, created on first use."""
    service = getattr(request.app.state, "scoreboard_service", None)
    if service is None:
        service = create_default_service()
        request.app.state.scoreboard_service = service
    return service


def _parse_league(league: str) -> League:
    try:
        return League.parse(league)
    except UnknownLeagueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None


def _raise_for_error(result: QueryResult) -> None:
    if result.error is not None:
        logger.warning("[API] Upstream failure: %s", result.error)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(result.error))


@router.get("/{league}/games", response_model=GamesResponse)
async def list_games(
    league: str,
    date: str | None = Query(None, description="Scoreboard date, e.g. 20250115"),
    service: ScoreboardService = Depends(get_service),
) -> GamesResponse:
    """Normalized games for a league's scoreboard."""
    result = await service.games(_parse_league(league), date)
    _raise_for_error(result)
    return GamesResponse(games=[GameResponse.from_game(g) for g in result.games])


@router.get("/{league}/teams", response_model=TeamsResponse)
async def list_teams(
    league: str,
    date: str | None = Query(None, description="Scoreboard date, e.g. 20250115"),
    service: ScoreboardService = Depends(get_service),
) -> TeamsResponse:
    """Teams on a league's scoreboard, sorted by name."""
    result = await service.teams(_parse_league(league), date)
    _raise_for_error(result)
    return TeamsResponse(teams=[TeamResponse.from_team(t) for t in result.teams])


@router.get("/{league}/summary/{event_id}", response_model=GameDetailsResponse)
async def get_summary(
    league: str,
    event_id: str,
    service: ScoreboardService = Depends(get_service),
) -> GameDetailsResponse:
    """Details for a single event."""
    result = await service.game_details(_parse_league(league), event_id)
    _raise_for_error(result)
    if result.details is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No details found")
    return GameDetailsResponse.from_details(result.details)
