from typing import Tuple

from scoreboard.exceptions import InvalidArgumentError


def normalize_team_names(home_team, away_team) -> Tuple[str, str]:
    """
    Shared name pipeline for every registry operation.

    Order: missing check, blank check, trim, empty-after-trim check.
    Whitespace follows ``str.isspace`` / ``str.strip``.
    """
    if home_team is None or away_team is None:
        raise InvalidArgumentError("Team names must not be None")

    if not isinstance(home_team, str) or not isinstance(away_team, str):
        raise InvalidArgumentError("Team names must be strings")

    if _is_blank(home_team) or _is_blank(away_team):
        raise InvalidArgumentError("Team names must not be blank")

    home_team = home_team.strip()
    away_team = away_team.strip()

    if not home_team or not away_team:
        raise InvalidArgumentError("Team names must not be empty after trimming")

    return home_team, away_team


def validate_scores(home_score, away_score):
    for score in (home_score, away_score):
        # bool is an int subclass
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidArgumentError(f"Score must be an integer: {score!r}")

    if home_score < 0 or away_score < 0:
        raise InvalidArgumentError(
            f"Scores must be non-negative: {home_score}, {away_score}"
        )


def _is_blank(value: str) -> bool:
    return not value or value.isspace()
