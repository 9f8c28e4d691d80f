import logging

import pytest

from scoreboard.models import Match, MatchScore
from scoreboard.validation import normalize_team_names, validate_scores
from scoreboard.exceptions import InvalidArgumentError
from scoreboard import logger as logger_module
from scoreboard.logger import get_logger, enable_console_logging
from scoreboard.registry import InMemoryScoreboard


# -------------------------------------------------
# Match
# -------------------------------------------------

def test_match_defaults_to_initial_score():
    match = Match("Spain", "Brazil")

    assert (match.home_score, match.away_score) == (0, 0)
    assert match.total_score == 0


def test_match_pair_is_unordered():
    match = Match("Spain", "Brazil")

    assert match.has_teams("Spain", "Brazil")
    assert match.has_teams("Brazil", "Spain")
    assert not match.has_teams("Spain", "Italy")


def test_match_to_score_copies_values():
    match = Match("Spain", "Brazil")
    match.update_score(2, 1)

    score = match.to_score()
    match.update_score(5, 5)

    assert score == MatchScore("Spain", "Brazil", 2, 1)
    assert score.total_score == 3


# -------------------------------------------------
# Validation
# -------------------------------------------------

def test_normalize_strips_unicode_whitespace():
    assert normalize_team_names(" Spain\t", "\nBrazil ") == ("Spain", "Brazil")


@pytest.mark.parametrize("home, away", [(1, "Brazil"), ("Spain", b"Brazil")])
def test_normalize_rejects_non_strings(home, away):
    with pytest.raises(InvalidArgumentError):
        normalize_team_names(home, away)


def test_large_scores_accepted():
    validate_scores(10 ** 30, 10 ** 30)


# -------------------------------------------------
# Logger
# -------------------------------------------------

def test_logger_is_cached():
    first = get_logger("test")
    second = get_logger("test")

    assert first is second
    assert first.name == "scoreboard.test"
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0], logging.NullHandler)
    assert first.propagate is True


def test_registry_records_reach_host_handlers(caplog):
    caplog.set_level(logging.DEBUG, logger="scoreboard.registry")

    InMemoryScoreboard().start_match("Spain", "Brazil")

    messages = [r.getMessage() for r in caplog.records if r.name == "scoreboard.registry"]
    assert messages == ["Started match Spain - Brazil"]


def test_failures_are_not_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="scoreboard.registry")

    with pytest.raises(InvalidArgumentError):
        InMemoryScoreboard().start_match("", "Brazil")

    assert [r for r in caplog.records if r.name == "scoreboard.registry"] == []


def test_console_logging_is_opt_in():
    namespace = logging.getLogger("scoreboard")
    previous_level = namespace.level

    try:
        enable_console_logging(logging.INFO)
        enable_console_logging(logging.DEBUG)

        consoles = [h for h in namespace.handlers if type(h) is logging.StreamHandler]
        assert len(consoles) == 1
        assert namespace.level == logging.DEBUG
    finally:
        for handler in list(namespace.handlers):
            if type(handler) is logging.StreamHandler:
                namespace.removeHandler(handler)
        logger_module._CONSOLE.clear()
        namespace.setLevel(previous_level)
