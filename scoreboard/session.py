from typing import Dict, List
from copy import deepcopy

from scoreboard.models import MatchScore
from scoreboard.registry import InMemoryScoreboard

ACTIONS = ("start", "update", "end")


class ScoreboardSession:
    """
    Replayable scoreboard session.

    Responsibilities:
    - Manage one InMemoryScoreboard instance
    - Bulk replay scoreboard commands (atomic)
    - Store the summary after every command
    - Export the original commands
    """

    def __init__(self):
        self._board = InMemoryScoreboard()
        self._timeline: List[List[MatchScore]] = []
        self._commands: List[Dict] = []
        self._loaded = False

    # ---------------------------------------------------------
    # Core API
    # ---------------------------------------------------------

    def load_commands(self, commands: List[Dict]) -> List[List[MatchScore]]:
        """
        Bulk load commands from a list of dicts.
        Atomic: if any command fails -> no state mutation.
        """
        if not isinstance(commands, list):
            raise ValueError("commands must be a list")

        parsed = [parse_command(c) for c in commands]

        temp_board = InMemoryScoreboard()
        temp_timeline: List[List[MatchScore]] = []

        for command in parsed:
            apply_command(temp_board, command)
            temp_timeline.append(temp_board.get_match_summary())

        self._board = temp_board
        self._timeline = temp_timeline
        self._commands = parsed
        self._loaded = True

        return deepcopy(self._timeline)

    def get_summary(self) -> List[MatchScore]:
        if not self._loaded:
            raise RuntimeError("No commands loaded")

        return self._board.get_match_summary()

    def get_timeline(self) -> List[List[MatchScore]]:
        return deepcopy(self._timeline)

    def export_commands(self) -> List[Dict]:
        return deepcopy(self._commands)

    def reset(self):
        self._board = InMemoryScoreboard()
        self._timeline = []
        self._commands = []
        self._loaded = False


# ---------------------------------------------------------
# Command handling
# ---------------------------------------------------------

def parse_command(command: Dict) -> Dict:
    if not isinstance(command, dict):
        raise ValueError("command must be a dict")

    action = command.get("action")
    if action not in ACTIONS:
        raise ValueError(f"invalid action: {action!r}")

    required = ["home", "away"]
    if action == "update":
        required += ["home_score", "away_score"]

    missing = [key for key in required if key not in command]
    if missing:
        raise ValueError(f"invalid command format, missing: {missing}")

    parsed = {"action": action}
    for key in required:
        parsed[key] = command[key]
    return parsed


def apply_command(board: InMemoryScoreboard, command: Dict):
    action = command["action"]

    if action == "start":
        board.start_match(command["home"], command["away"])
    elif action == "update":
        board.update_score(
            command["home"],
            command["away"],
            command["home_score"],
            command["away_score"],
        )
    else:
        board.end_match(command["home"], command["away"])
