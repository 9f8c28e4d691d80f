import argparse

from scoreboard.timeline import build_summary_timeline
from scoreboard.session import ScoreboardSession
from scoreboard.logger import enable_console_logging
from render.renderer import SummaryRenderer

COMMANDS = [
    {"action": "start", "home": "Mexico", "away": "Canada"},
    {"action": "update", "home": "Mexico", "away": "Canada", "home_score": 0, "away_score": 5},
    {"action": "start", "home": "Spain", "away": "Brazil"},
    {"action": "update", "home": "Spain", "away": "Brazil", "home_score": 10, "away_score": 2},
    {"action": "start", "home": "Germany", "away": "France"},
    {"action": "update", "home": "Germany", "away": "France", "home_score": 2, "away_score": 2},
    {"action": "start", "home": "Uruguay", "away": "Italy"},
    {"action": "update", "home": "Uruguay", "away": "Italy", "home_score": 6, "away_score": 6},
    {"action": "start", "home": "Argentina", "away": "Australia"},
    {"action": "update", "home": "Argentina", "away": "Australia", "home_score": 3, "away_score": 1},
]


def main():
    ap = argparse.ArgumentParser(description="Overlay the live summary on a video")
    ap.add_argument("--input", default="input.mp4")
    ap.add_argument("--output", default="output.mp4")
    args = ap.parse_args()

    enable_console_logging()

    for step in build_summary_timeline(COMMANDS):
        print(f"[{step['command_index']:02d}] {step['action']:<6} leader: {step['leader']}")

    session = ScoreboardSession()
    session.load_commands(COMMANDS)

    renderer = SummaryRenderer(session.get_summary())
    renderer.render(args.input, args.output)

    print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
