"""CLI options for selecting players, difficulty levels, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Othello AI (five difficulty levels)")
    parser.add_argument("--board-size", type=int, help="Board size (default 8)")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default from settings)")
    parser.add_argument("--level", type=int, choices=range(1, 6), help="Difficulty level for every AI player")
    parser.add_argument("--black-level", type=int, choices=range(1, 6), help="Difficulty level for a black AI")
    parser.add_argument("--white-level", type=int, choices=range(1, 6), help="Difficulty level for a white AI")
    parser.add_argument("--delay", type=float, help="Seconds an AI waits before answering")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default="human-vs-ai",
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the level-1 random source")
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Accept non-capturing placements (legacy behaviour) instead of rejecting them",
    )
    parser.add_argument(
        "--pass-in-search",
        action="store_true",
        help="Let minimax pass the turn when a side has no move instead of scoring the leaf",
    )
    parser.add_argument(
        "--leaf-for-mover",
        action="store_true",
        help="Score minimax leaves for the side to move there (legacy behaviour)",
    )
    return parser.parse_args(argv)
