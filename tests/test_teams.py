"""Tests for scoreboard team aggregation."""

from scoreline.core.types import Team
from scoreline.providers.espn.teams import aggregate_teams, collation_key, sort_teams, team_id

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _event(*teams: dict) -> dict:
    return {"competitions": [{"competitors": [{"team": t} for t in teams]}]}


def _payload(*events: dict) -> dict:
    return {"events": list(events)}


# ---------------------------------------------------------------------------
# Id derivation
# ---------------------------------------------------------------------------


class TestTeamId:
    def test_prefers_id(self):
        assert team_id({"id": "13", "abbreviation": "LAL", "displayName": "Lakers"}) == "13"

    def test_falls_back_to_abbreviation(self):
        assert team_id({"abbreviation": "LAL", "displayName": "Lakers"}) == "LAL"

    def test_falls_back_to_display_name(self):
        assert team_id({"displayName": "Lakers"}) == "Lakers"

    def test_numeric_id(self):
        assert team_id({"id": 13}) == "13"

    def test_nothing_usable(self):
        assert team_id({"logo": "x.png"}) == ""
        assert team_id(None) == ""


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


class TestAggregateTeams:
    def test_fixture_scoreboard_sorted_by_name(self, scoreboard_payload):
        teams = aggregate_teams(scoreboard_payload)

        assert [t.abbreviation for t in teams] == ["BOS", "DEN", "GS", "LAL"]
        assert teams[0] == Team(
            id="2",
            name="Boston Celtics",
            abbreviation="BOS",
            logo="https://a.espncdn.com/i/teamlogos/nba/500/bos.png",
        )
        # Missing logo resolves to empty string
        assert teams[1].logo == ""

    def test_same_team_across_events_collapses(self):
        payload = _payload(
            _event({"id": "1", "displayName": "Lakers", "abbreviation": "LAL"}),
            _event({"id": "1", "displayName": "Lakers", "abbreviation": "LAL"}),
        )
        teams = aggregate_teams(payload)
        assert len(teams) == 1

    def test_no_duplicate_ids(self, scoreboard_payload):
        scoreboard_payload["events"].append(scoreboard_payload["events"][0])
        ids = [t.id for t in aggregate_teams(scoreboard_payload)]
        assert len(ids) == len(set(ids))

    def test_last_write_wins(self):
        payload = _payload(
            _event({"id": "1", "displayName": "Old Name", "logo": "old.png"}),
            _event({"id": "1", "displayName": "New Name", "logo": "new.png"}),
        )
        teams = aggregate_teams(payload)
        assert teams == [Team(id="1", name="New Name", abbreviation="", logo="new.png")]

    def test_teams_without_identity_are_dropped(self):
        payload = _payload(_event({"logo": "x.png"}, {"id": "5", "displayName": "Kept"}))
        assert [t.id for t in aggregate_teams(payload)] == ["5"]

    def test_competitors_without_team_are_skipped(self):
        payload = {"events": [{"competitions": [{"competitors": [{}, {"team": None}, None]}]}]}
        assert aggregate_teams(payload) == []

    def test_only_first_competition(self):
        payload = {
            "events": [
                {
                    "competitions": [
                        {"competitors": [{"team": {"id": "1", "displayName": "A"}}]},
                        {"competitors": [{"team": {"id": "2", "displayName": "B"}}]},
                    ]
                }
            ]
        }
        assert [t.id for t in aggregate_teams(payload)] == ["1"]

    def test_empty_payloads(self):
        assert aggregate_teams(None) == []
        assert aggregate_teams({"events": None}) == []

    def test_resorting_is_noop(self, scoreboard_payload):
        teams = aggregate_teams(scoreboard_payload)
        assert sort_teams(teams) == teams


# ---------------------------------------------------------------------------
# Name collation
# ---------------------------------------------------------------------------


class TestSortTeams:
    def test_mixed_case_and_accents(self):
        payload = _payload(
            _event(
                {"id": "1", "displayName": "Celtics"},
                {"id": "2", "displayName": "bulls"},
            ),
            _event(
                {"id": "3", "displayName": "Écureuils"},
                {"id": "4", "displayName": "Zebras"},
            ),
        )
        names = [t.name for t in aggregate_teams(payload)]
        assert names == ["bulls", "Celtics", "Écureuils", "Zebras"]

    def test_accented_initial_sorts_with_base_letter(self):
        teams = [
            Team(id="1", name="Estrellas", abbreviation="", logo=""),
            Team(id="2", name="Águilas", abbreviation="", logo=""),
            Team(id="3", name="Bravos", abbreviation="", logo=""),
        ]
        assert [t.name for t in sort_teams(teams)] == ["Águilas", "Bravos", "Estrellas"]

    def test_equal_names_tie_break_on_raw_name(self):
        payload = _payload(
            _event({"id": "1", "displayName": "Rangers"}, {"id": "2", "displayName": "rangers"}),
            _event({"id": "3", "displayName": "Rangers"}),
        )
        teams = aggregate_teams(payload)
        assert [t.name for t in teams] == ["Rangers", "Rangers", "rangers"]
        assert sort_teams(teams) == teams
        assert {t.id for t in teams} == {"1", "2", "3"}

    def test_null_character_in_name_does_not_raise(self):
        payload = _payload(
            _event({"id": "0", "displayName": "A\x00B"}, {"id": "1", "displayName": "Aces"})
        )
        teams = aggregate_teams(payload)
        assert [t.id for t in teams] == ["0", "1"]

    def test_collation_key(self):
        assert collation_key("Écureuils") == "ecureuils"
        assert collation_key("CELTICS") == collation_key("celtics")
        assert collation_key("") == ""
