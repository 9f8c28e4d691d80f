from typing import Dict, List

from scoreboard.formatting import format_match
from scoreboard.registry import InMemoryScoreboard
from scoreboard.session import apply_command, parse_command


def build_summary_timeline(commands: List[Dict]) -> List[dict]:
    """
    Replays scoreboard commands from scratch.
    Returns a flattened timeline after each command.
    Does NOT mutate external state.
    """

    board = InMemoryScoreboard()

    timeline: List[dict] = []

    for index, raw in enumerate(commands):

        command = parse_command(raw)
        apply_command(board, command)

        summary = board.get_match_summary()

        timeline.append({
            "command_index": index + 1,
            "action": command["action"],
            "live_matches": len(summary),
            "leader": format_match(summary[0]) if summary else None,
        })

    return timeline
