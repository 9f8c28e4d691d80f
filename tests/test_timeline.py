import pytest

from scoreboard.timeline import build_summary_timeline
from scoreboard.exceptions import DuplicateTeamNamesError


# -------------------------------------------------
# Basic Timeline Build
# -------------------------------------------------

def test_timeline_basic_build():
    commands = [
        {"action": "start", "home": "Spain", "away": "Brazil"},
        {"action": "start", "home": "Italy", "away": "France"},
        {"action": "update", "home": "Italy", "away": "France", "home_score": 1, "away_score": 0},
        {"action": "end", "home": "Italy", "away": "France"},
    ]

    timeline = build_summary_timeline(commands)

    assert [step["command_index"] for step in timeline] == [1, 2, 3, 4]
    assert [step["live_matches"] for step in timeline] == [1, 2, 2, 1]
    assert timeline[1]["leader"] == "Italy 0 - France 0"
    assert timeline[2]["leader"] == "Italy 1 - France 0"
    assert timeline[3]["leader"] == "Spain 0 - Brazil 0"


def test_timeline_leader_none_when_empty():
    commands = [
        {"action": "start", "home": "Spain", "away": "Brazil"},
        {"action": "end", "home": "Spain", "away": "Brazil"},
    ]

    timeline = build_summary_timeline(commands)

    assert timeline[-1]["leader"] is None
    assert timeline[-1]["action"] == "end"


def test_timeline_propagates_errors():
    with pytest.raises(DuplicateTeamNamesError):
        build_summary_timeline([{"action": "start", "home": "Spain", "away": "Spain"}])
