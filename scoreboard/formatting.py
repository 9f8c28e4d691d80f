from typing import List

from scoreboard.models import MatchScore


def format_match(score: MatchScore) -> str:
    return (
        f"{score.home_team} {score.home_score} - "
        f"{score.away_team} {score.away_score}"
    )


def format_summary(summary: List[MatchScore]) -> List[str]:
    return [
        f"{rank}. {format_match(score)}"
        for rank, score in enumerate(summary, 1)
    ]
