"""Team aggregation from ESPN scoreboard snapshots.

Collects every competitor's team across all events, deduplicated by a
derived id and sorted by display name.
"""

import logging
import unicodedata

from scoreline.core.types import Team
from scoreline.providers.espn.normalize import as_dict, as_list, first_competition, first_text, text

logger = logging.getLogger(__name__)


def team_id(team: dict) -> str:
    """Derive a stable id: team id, else abbreviation, else display name.

    Returns '' when none is available.
    """
    team = as_dict(team)
    return first_text(team.get("id"), team.get("abbreviation"), team.get("displayName"))


def collation_key(name: str) -> str:
    """Case- and accent-insensitive sort key: 'Écureuils' -> 'ecureuils'."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def sort_teams(teams) -> list[Team]:
    """Sort teams by name, ignoring case and accents; ties fall back to the raw name."""
    return sorted(teams, key=lambda t: (collation_key(t.name), t.name))


def aggregate_teams(payload) -> list[Team]:
    """Build the deduplicated, name-sorted team list for a scoreboard.

    Later events overwrite earlier snapshots of the same team id.
    Teams without any usable id are skipped.
    """
    teams: dict[str, Team] = {}
    skipped = 0

    for event in as_list(as_dict(payload).get("events")):
        comp = first_competition(event)
        for competitor in as_list(comp.get("competitors")):
            data = as_dict(competitor).get("team")
            if not isinstance(data, dict):
                continue

            tid = team_id(data)
            if not tid:
                skipped += 1
                continue

            teams[tid] = Team(
                id=tid,
                name=text(data.get("displayName")),
                abbreviation=text(data.get("abbreviation")),
                logo=text(data.get("logo")),
            )

    if skipped:
        logger.debug("[TEAMS] Skipped %d competitors without a team id", skipped)

    return sort_teams(teams.values())
