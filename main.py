import logging

from scoreboard.registry import InMemoryScoreboard
from scoreboard.formatting import format_summary
from scoreboard.exceptions import ScoreboardError
from scoreboard.logger import enable_console_logging

enable_console_logging(logging.DEBUG)

board = InMemoryScoreboard()

board.start_match("Mexico", "Canada")
board.update_score("Mexico", "Canada", 0, 5)

board.start_match("Spain", "Brazil")
board.update_score("Spain", "Brazil", 10, 2)

board.start_match("Germany", "France")
board.update_score("Germany", "France", 2, 2)

board.start_match("Uruguay", "Italy")
board.update_score("Uruguay", "Italy", 6, 6)

board.start_match("Argentina", "Australia")
board.update_score("Argentina", "Australia", 3, 1)

print("Summary:")
for line in format_summary(board.get_match_summary()):
    print(line)

print("\nTrying to start a match with a team already playing...")

try:
    board.start_match("Spain", "Portugal")
except ScoreboardError as e:
    print(f"{type(e).__name__}: {e}")
