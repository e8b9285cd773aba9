"""Pydantic response models for the read API."""

from pydantic import BaseModel

from scoreline.core.types import Game, GameDetails, Side, Team
from scoreline.providers.espn import get_status_variant


class SideResponse(BaseModel):
    name: str
    short: str
    logo: str
    score: str

    @classmethod
    def from_side(cls, side: Side) -> "SideResponse":
        return cls(name=side.name, short=side.short, logo=side.logo, score=side.score)


class GameResponse(BaseModel):
    """Normalized game with its display bucket."""

    id: str
    status: str
    variant: str
    date: str
    home: SideResponse
    away: SideResponse

    @classmethod
    def from_game(cls, game: Game) -> "GameResponse":
        return cls(
            id=game.id,
            status=game.status,
            variant=game.variant.value,
            date=game.date,
            home=SideResponse.from_side(game.home),
            away=SideResponse.from_side(game.away),
        )


class TeamResponse(BaseModel):
    id: str
    name: str
    abbreviation: str
    logo: str

    @classmethod
    def from_team(cls, team: Team) -> "TeamResponse":
        return cls(id=team.id, name=team.name, abbreviation=team.abbreviation, logo=team.logo)


class GameDetailsResponse(BaseModel):
    """Single-event details."""

    status: str
    variant: str
    headline: str
    venue: str
    location: str
    home: SideResponse
    away: SideResponse

    @classmethod
    def from_details(cls, details: GameDetails) -> "GameDetailsResponse":
        return cls(
            status=details.status,
            variant=get_status_variant(details.status).value,
            headline=details.headline,
            venue=details.venue,
            location=details.location,
            home=SideResponse.from_side(details.home),
            away=SideResponse.from_side(details.away),
        )


class GamesResponse(BaseModel):
    games: list[GameResponse]


class TeamsResponse(BaseModel):
    teams: list[TeamResponse]
