"""Core data types for scoreline.

All records are frozen dataclasses with attribute access.
Normalizers build them from raw ESPN payloads; consumers only read them.

String fields are never None - absent source fields become "".
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, NamedTuple, TypeVar

T = TypeVar("T")


class UnknownLeagueError(ValueError):
    """League name outside the supported set."""


class League(Enum):
    """Supported leagues. Value is the ESPN sport/league path segment."""

    NBA = "basketball/nba"
    NFL = "football/nfl"

    @property
    def path(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | League") -> "League":
        """Resolve a league from its name ('nba', 'NFL', ...).

        Raises:
            UnknownLeagueError: name is not a supported league
        """
        if isinstance(name, cls):
            return name
        try:
            return cls[str(name).strip().upper()]
        except KeyError:
            raise UnknownLeagueError(f"Unsupported league: {name!r}") from None


class StatusVariant(str, Enum):
    """Display bucket for a free-text provider status."""

    LIVE = "live"
    FINAL = "final"
    SCHEDULED = "scheduled"


def get_status_variant(status: str) -> StatusVariant:
    """Classify a free-text ESPN status.

    Case-insensitive substring match: "live" or "in progress" -> LIVE,
    "final" -> FINAL, anything else -> SCHEDULED.
    """
    s = status.lower() if isinstance(status, str) else ""

    if "live" in s or "in progress" in s:
        return StatusVariant.LIVE
    if "final" in s:
        return StatusVariant.FINAL

    return StatusVariant.SCHEDULED


@dataclass(frozen=True)
class Side:
    """One side (home or away) of a game."""

    name: str = ""
    short: str = ""
    logo: str = ""
    score: str = ""


@dataclass(frozen=True)
class Game:
    """A single game from a scoreboard snapshot."""

    id: str
    status: str
    date: str  # ISO-ish from ESPN, or "unknown"
    home: Side
    away: Side

    @property
    def variant(self) -> StatusVariant:
        return get_status_variant(self.status)


@dataclass(frozen=True)
class Team:
    """Team identity as seen in a scoreboard snapshot."""

    id: str
    name: str
    abbreviation: str
    logo: str


@dataclass(frozen=True)
class GameDetails:
    """Single-event details from the summary endpoint."""

    status: str = ""
    headline: str = ""
    venue: str = ""
    city: str = ""
    state: str = ""
    home: Side = field(default_factory=lambda: Side(name="Home"))
    away: Side = field(default_factory=lambda: Side(name="Away"))

    @property
    def location(self) -> str:
        """'City, ST' with empty parts dropped."""
        return ", ".join(part for part in (self.city, self.state) if part)


# =============================================================================
# Query Types
# Used by the query cache and the service layer
# =============================================================================


class QueryKey(NamedTuple):
    """Identity of one cacheable request.

    kind: "scoreboard" | "summary"
    variable: date string, "today", or event id
    """

    kind: str
    league: League
    variable: str


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Tri-state view of a query: loading, error, or data.

    data and error are never both set. is_loading is only true while
    a request is in flight and nothing has been cached yet; is_fetching
    is true for any in-flight request, including background refreshes.
    """

    is_loading: bool = False
    error: Exception | None = None
    data: T | None = None
    is_fetching: bool = False

    @property
    def is_success(self) -> bool:
        return self.data is not None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_idle(self) -> bool:
        """Neutral state: nothing loading, no error, no data."""
        return not self.is_loading and self.error is None and self.data is None


@dataclass(frozen=True)
class GamesResult(QueryResult[dict]):
    """Scoreboard result with normalized games."""

    games: list[Game] = field(default_factory=list)


@dataclass(frozen=True)
class TeamsResult(QueryResult[dict]):
    """Scoreboard result with the aggregated team list."""

    teams: list[Team] = field(default_factory=list)


@dataclass(frozen=True)
class DetailsResult(QueryResult[dict]):
    """Summary result with normalized game details."""

    details: GameDetails | None = None
