"""Level-vs-level match runner for comparing AI difficulty settings."""

from __future__ import annotations

import argparse
import json
import random
import statistics
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .ComputerPlayer import ComputerPlayer
from .Othellogame import Othellogame
from .engine import othello_rules
from .utils.logger import log_event


@dataclass(frozen=True)
class AgentSpec:
    tag: str
    level: int


def _quiet(_message):
    pass


def play_game(board_size: int, black, white, timeout: float | None = None) -> Tuple[int, dict]:
    """Play one silent game. Returns (winner, info) with steps, passes and final score."""
    game = Othellogame(
        board_size=board_size,
        move_timeout=timeout,
        black_player=black,
        white_player=white,
        logger=_quiet,
    )
    winner = game.play()
    black_discs, white_discs = othello_rules.score(game.board)
    info = {
        "steps": game.move_index,
        "passes": dict(game.passes),
        "score": (black_discs, white_discs),
        "margin": black_discs - white_discs,
    }
    return winner, info


def build_player(color: int, spec: AgentSpec, rng: random.Random, *, collect_stats: bool = False) -> ComputerPlayer:
    player = ComputerPlayer(color=color, level=spec.level, rng=rng)
    if collect_stats:
        player.stats = []
    return player


def run_match(
    games: int,
    first: AgentSpec,
    second: AgentSpec,
    *,
    board_size: int = 8,
    swap_colors: bool = False,
    seed: int | None = None,
    collect_stats: bool = False,
) -> dict:
    """
    Play `games` games between two agents. With swap_colors the agents trade
    colours every other game. Returns a JSON-serialisable summary.
    """
    if first.tag == second.tag:
        raise ValueError(f"agent tags must differ, both are {first.tag!r}")
    rng = random.Random(seed)
    agent_wins = Counter()
    agent_games = Counter()
    draws = 0
    lengths: List[int] = []
    margins: List[int] = []
    nodes: List[int] = []

    for game_idx in range(games):
        black_spec, white_spec = first, second
        if swap_colors and game_idx % 2 == 1:
            black_spec, white_spec = second, first

        black = build_player(-1, black_spec, rng, collect_stats=collect_stats)
        white = build_player(1, white_spec, rng, collect_stats=collect_stats)
        winner, info = play_game(board_size, black, white)

        agent_games[black_spec.tag] += 1
        agent_games[white_spec.tag] += 1
        if winner == -1:
            agent_wins[black_spec.tag] += 1
        elif winner == 1:
            agent_wins[white_spec.tag] += 1
        else:
            draws += 1
        lengths.append(info["steps"])
        margins.append(abs(info["margin"]))
        for player in (black, white):
            if player.stats:
                nodes.extend(s["nodes"] for s in player.stats)

    summary = {
        "games": games,
        "wins": {first.tag: agent_wins[first.tag], second.tag: agent_wins[second.tag]},
        "draws": draws,
        "games_per_agent": dict(agent_games),
        "mean_length": statistics.mean(lengths) if lengths else 0.0,
        "mean_margin": statistics.mean(margins) if margins else 0.0,
    }
    if nodes:
        summary["nodes_mean"] = statistics.mean(nodes)
        summary["nodes_total"] = sum(nodes)
    return summary


def main(argv=None):
    parser = argparse.ArgumentParser(description="Othello level-vs-level match runner")
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--board-size", type=int, default=8, help="Board size")
    parser.add_argument("--black-level", type=int, choices=range(1, 6), default=5, help="Level of the first agent")
    parser.add_argument("--white-level", type=int, choices=range(1, 6), default=1, help="Level of the second agent")
    parser.add_argument("--black-tag", default=None, help="Label for the first agent (default: L<level>-a)")
    parser.add_argument("--white-tag", default=None, help="Label for the second agent (default: L<level>-b)")
    parser.add_argument("--swap-colors", action="store_true", help="Swap colours every other game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for level-1 randomness")
    parser.add_argument("--collect-stats", action="store_true", help="Collect minimax node counts")
    parser.add_argument("--output", default=None, help="Write the summary JSON to this path")
    args = parser.parse_args(argv)

    first = AgentSpec(tag=args.black_tag or f"L{args.black_level}-a", level=args.black_level)
    second = AgentSpec(tag=args.white_tag or f"L{args.white_level}-b", level=args.white_level)
    if first.tag == second.tag:
        parser.error(f"--black-tag and --white-tag must differ (both {first.tag!r})")

    summary = run_match(
        args.games,
        first,
        second,
        board_size=args.board_size,
        swap_colors=args.swap_colors,
        seed=args.seed,
        collect_stats=args.collect_stats,
    )

    log_event(
        f"{first.tag} {summary['wins'][first.tag]} - {summary['wins'][second.tag]} {second.tag} "
        f"(draws {summary['draws']}, mean length {summary['mean_length']:.1f})"
    )
    if args.output:
        Path(args.output).write_text(json.dumps(summary, indent=2), encoding="utf-8")
        log_event(f"Saved summary to {args.output}")
    return summary


if __name__ == "__main__":
    main()
