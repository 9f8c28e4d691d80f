from typing import List, Optional

from scoreboard.config import INITIAL_SCORE
from scoreboard.exceptions import (
    DuplicateTeamNamesError,
    MatchAlreadyExistsError,
    MatchNotFoundError,
    TeamAlreadyInMatchError,
)
from scoreboard.logger import get_logger
from scoreboard.models import Match, MatchScore
from scoreboard.validation import normalize_team_names, validate_scores

logger = get_logger("registry")


class InMemoryScoreboard:
    """
    Live scoreboard for matches in progress.

    Responsibilities:
    - Keep live matches in insertion order
    - Enforce team/pair uniqueness across live matches
    - Validate every mutation before touching state (atomic failures)
    - Produce ranked, by-value summaries

    A match is identified by its unordered team pair. Not thread-safe;
    callers sharing an instance must lock externally.
    """

    INITIAL_SCORE = INITIAL_SCORE

    def __init__(self):
        self._matches: List[Match] = []

    # =========================================================
    # PUBLIC API
    # =========================================================

    def start_match(self, home_team: str, away_team: str):
        home_team, away_team = normalize_team_names(home_team, away_team)

        if home_team == away_team:
            raise DuplicateTeamNamesError(
                f"Home and away team are the same: {home_team}"
            )

        # Pair check runs before occupancy so a restart reports the pair
        for match in self._matches:
            if match.has_teams(home_team, away_team):
                raise MatchAlreadyExistsError(
                    f"Match already in progress: {home_team} - {away_team}"
                )
            if match.involves(home_team):
                raise TeamAlreadyInMatchError(
                    f"Team already playing: {home_team}"
                )
            if match.involves(away_team):
                raise TeamAlreadyInMatchError(
                    f"Team already playing: {away_team}"
                )

        self._matches.append(Match(home_team=home_team, away_team=away_team))
        logger.debug("Started match %s - %s", home_team, away_team)

    def update_score(
        self,
        home_team: str,
        away_team: str,
        home_score: int,
        away_score: int,
    ):
        """
        Replace both scores of a live match.

        The match is found by unordered pair, but scores are assigned
        positionally: ``home_score`` always goes to the team the match was
        started with as home, even if the caller swaps the names.
        """
        validate_scores(home_score, away_score)
        home_team, away_team = normalize_team_names(home_team, away_team)

        match = self._matches[self._require_index(home_team, away_team)]
        match.update_score(home_score, away_score)

        logger.debug(
            "Updated %s %d - %s %d",
            match.home_team, home_score, match.away_team, away_score,
        )

    def end_match(self, home_team: str, away_team: str):
        home_team, away_team = normalize_team_names(home_team, away_team)

        index = self._require_index(home_team, away_team)
        match = self._matches.pop(index)

        logger.debug("Ended match %s - %s", match.home_team, match.away_team)

    def get_match_summary(self) -> List[MatchScore]:
        """
        Live matches ordered by total score, highest first.
        Ties go to the most recently started match.
        """
        ranked = sorted(
            enumerate(self._matches),
            key=lambda item: (item[1].total_score, item[0]),
            reverse=True,
        )
        return [match.to_score() for _, match in ranked]

    # =========================================================
    # LOOKUP
    # =========================================================

    def _find_index(self, home_team: str, away_team: str) -> Optional[int]:
        for index, match in enumerate(self._matches):
            if match.has_teams(home_team, away_team):
                return index
        return None

    def _require_index(self, home_team: str, away_team: str) -> int:
        index = self._find_index(home_team, away_team)
        if index is None:
            raise MatchNotFoundError(
                f"No match in progress: {home_team} - {away_team}"
            )
        return index

    def __len__(self) -> int:
        return len(self._matches)
