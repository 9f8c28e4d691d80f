from dataclasses import dataclass

from scoreboard.config import INITIAL_SCORE


@dataclass
class Match:
    home_team: str
    away_team: str
    home_score: int = INITIAL_SCORE
    away_score: int = INITIAL_SCORE

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    def has_teams(self, home_team: str, away_team: str) -> bool:
        """Unordered pair equality: roles are ignored."""
        return {self.home_team, self.away_team} == {home_team, away_team}

    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)

    def update_score(self, home_score: int, away_score: int):
        self.home_score = home_score
        self.away_score = away_score

    def to_score(self) -> "MatchScore":
        return MatchScore(
            home_team=self.home_team,
            away_team=self.away_team,
            home_score=self.home_score,
            away_score=self.away_score,
        )


# --- PUBLIC SNAPSHOT ---

@dataclass(frozen=True)
class MatchScore:
    home_team: str
    away_team: str
    home_score: int
    away_score: int

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score
