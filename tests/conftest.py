"""Shared ESPN payload fixtures."""

import pytest


@pytest.fixture
def scoreboard_payload() -> dict:
    """Two-event NBA scoreboard in ESPN's shape."""
    return {
        "leagues": [{"id": "46", "abbreviation": "NBA"}],
        "events": [
            {
                "id": "401585001",
                "date": "2025-01-15T00:30Z",
                "status": {"type": {"shortDetail": "Final", "description": "Final"}},
                "competitions": [
                    {
                        "id": "401585001",
                        "competitors": [
                            {
                                "homeAway": "home",
                                "score": "102",
                                "team": {
                                    "id": "13",
                                    "displayName": "Los Angeles Lakers",
                                    "abbreviation": "LAL",
                                    "logo": "https://a.espncdn.com/i/teamlogos/nba/500/lal.png",
                                },
                            },
                            {
                                "homeAway": "away",
                                "score": "99",
                                "team": {
                                    "id": "2",
                                    "displayName": "Boston Celtics",
                                    "abbreviation": "BOS",
                                    "logo": "https://a.espncdn.com/i/teamlogos/nba/500/bos.png",
                                },
                            },
                        ],
                    }
                ],
            },
            {
                "id": "401585002",
                "date": "2025-01-15T03:00Z",
                "status": {"type": {"shortDetail": "10:00 PM ET", "description": "Scheduled"}},
                "competitions": [
                    {
                        "competitors": [
                            {
                                "homeAway": "home",
                                "score": "0",
                                "team": {
                                    "id": "9",
                                    "displayName": "Golden State Warriors",
                                    "abbreviation": "GS",
                                },
                            },
                            {
                                "homeAway": "away",
                                "score": "0",
                                "team": {
                                    "id": "7",
                                    "displayName": "Denver Nuggets",
                                    "abbreviation": "DEN",
                                },
                            },
                        ],
                    }
                ],
            },
        ],
    }


@pytest.fixture
def summary_payload() -> dict:
    """NBA event summary in ESPN's shape."""
    return {
        "header": {
            "id": "401585001",
            "competitions": [
                {
                    "status": {"type": {"shortDetail": "Final/OT", "description": "Final"}},
                    "headlines": [
                        {"headline": "Lakers edge Celtics in overtime", "shortLinkText": "Lakers win"}
                    ],
                    "competitors": [
                        {
                            "homeAway": "away",
                            "score": "99",
                            "team": {"displayName": "Boston Celtics", "abbreviation": "BOS"},
                        },
                        {
                            "homeAway": "home",
                            "score": "102",
                            "team": {"displayName": "Los Angeles Lakers", "abbreviation": "LAL"},
                        },
                    ],
                }
            ],
        },
        "gameInfo": {
            "venue": {
                "fullName": "Crypto.com Arena",
                "address": {"city": "Los Angeles", "state": "CA"},
            }
        },
    }
