"""ESPN payload normalization.

Turns raw scoreboard/summary JSON into flat Game and GameDetails records.
The ESPN schema is not validated: every accessor tolerates missing or
mistyped nodes and falls back to an empty default, so these functions
never raise.
"""

from collections.abc import Iterable

from scoreline.core.types import Game, GameDetails, Side, get_status_variant  # noqa: F401

UNKNOWN_DATE = "unknown"


def as_dict(value) -> dict:
    """Return value if it is a dict, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value) -> list:
    """Return value if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def text(value) -> str:
    """Coerce a scalar JSON value to str; anything else becomes ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def first_text(*values) -> str:
    """First non-empty string among values, or ''."""
    for value in values:
        s = text(value)
        if s:
            return s
    return ""


def first_competition(event: dict) -> dict:
    """First competition of an event; later competitions are ignored."""
    competitions = as_list(as_dict(event).get("competitions"))
    return as_dict(competitions[0]) if competitions else {}


def find_competitor(competitors: Iterable, home_away: str) -> dict | None:
    """First competitor whose homeAway matches, or None."""
    for competitor in competitors:
        competitor = as_dict(competitor)
        if competitor.get("homeAway") == home_away:
            return competitor
    return None


def _status_text(status) -> str:
    # Short form ("Final/OT", "7:00 PM ET") preferred over the long description
    status_type = as_dict(as_dict(status).get("type"))
    return first_text(status_type.get("shortDetail"), status_type.get("description"))


def _to_side(competitor: dict | None, placeholder: str) -> Side:
    competitor = as_dict(competitor)
    team = as_dict(competitor.get("team"))
    return Side(
        name=first_text(team.get("displayName")) or placeholder,
        short=text(team.get("abbreviation")),
        logo=text(team.get("logo")),
        score=text(competitor.get("score")),
    )


def map_event_to_game(event: dict, index: int) -> Game:
    """Normalize one scoreboard event.

    index is the event's position in the snapshot and only matters
    when neither the event nor its competition carries an id.
    """
    event = as_dict(event)
    comp = first_competition(event)
    competitors = as_list(comp.get("competitors"))

    date = first_text(event.get("date"), comp.get("date")) or UNKNOWN_DATE

    return Game(
        id=first_text(event.get("id"), comp.get("id")) or f"{date}-{index}",
        status=_status_text(event.get("status")),
        date=date,
        home=_to_side(find_competitor(competitors, "home"), "Home"),
        away=_to_side(find_competitor(competitors, "away"), "Away"),
    )


def map_events_to_games(payload) -> list[Game]:
    """Normalize a scoreboard payload into games, preserving event order."""
    events = as_list(as_dict(payload).get("events"))
    return [map_event_to_game(event, idx) for idx, event in enumerate(events)]


def map_summary_to_details(payload) -> GameDetails:
    """Normalize a summary payload into GameDetails.

    Reads header.competitions[0] for status, sides and headline, and
    gameInfo.venue for the venue and its address.
    """
    payload = as_dict(payload)
    comp = first_competition(as_dict(payload.get("header")))
    competitors = as_list(comp.get("competitors"))

    headlines = as_list(comp.get("headlines"))
    headline = as_dict(headlines[0]) if headlines else {}

    venue = as_dict(as_dict(payload.get("gameInfo")).get("venue"))
    address = as_dict(venue.get("address"))

    return GameDetails(
        status=_status_text(comp.get("status")),
        headline=first_text(headline.get("headline"), headline.get("shortLinkText")),
        venue=text(venue.get("fullName")),
        city=text(address.get("city")),
        state=text(address.get("state")),
        home=_to_side(find_competitor(competitors, "home"), "Home"),
        away=_to_side(find_competitor(competitors, "away"), "Away"),
    )
