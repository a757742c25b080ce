"""Difficulty-level move selection: random, greedy, and minimax levels."""

import logging
import random

from . import heuristic, search_minimax
from ..engine import othello_rules


LOGGER = logging.getLogger(__name__)

RANDOM_LEVEL = 1
GREEDY_LEVEL = 2
# Levels 3-5 run minimax at increasing depth
LEVEL_DEPTHS = {3: 1, 4: 2, 5: 3}
LEVELS = (RANDOM_LEVEL, GREEDY_LEVEL, *LEVEL_DEPTHS)


class InvalidLevelError(ValueError):
    """Raised when a difficulty level outside 1-5 is requested."""


def validate_level(level):
    # bool is an int subclass; True/False are not levels
    if isinstance(level, bool) or not isinstance(level, int) or level not in LEVELS:
        raise InvalidLevelError(f"level must be one of {list(LEVELS)}, got {level!r}")
    return level


def random_move(moves, rng=None):
    """Uniform choice over the legal moves using a pluggable random source."""
    rng = rng if rng is not None else random
    return rng.choice(moves)


def greedy_move(board, color, moves):
    """Move leaving `color` with the most discs; first-found wins ties."""
    best_move = moves[0]
    best_count = -1
    for x, y in moves:
        after = othello_rules.apply_move(board, x, y, color)
        count = heuristic.count_discs(after, color)
        if count > best_count:
            best_count = count
            best_move = (x, y)
    return best_move


def choose_move(board, color, level, rng=None, *, pass_on_no_moves=False, leaf_for_mover=False, stats=None):
    """
    Return the move `color` should play at difficulty `level`, or None to pass.
    - 1: uniform random legal move (rng.choice)
    - 2: greedy disc maximisation
    - 3/4/5: minimax at depth 1/2/3 with material-difference evaluation
    """
    validate_level(level)

    moves = othello_rules.get_valid_moves(board, color)
    if not moves:
        LOGGER.debug("No legal moves for %d; passing", color)
        return None

    if level == RANDOM_LEVEL:
        return random_move(moves, rng)
    if level == GREEDY_LEVEL:
        return greedy_move(board, color, moves)

    return search_minimax.choose_move(
        board,
        color,
        depth=LEVEL_DEPTHS[level],
        pass_on_no_moves=pass_on_no_moves,
        leaf_for_mover=leaf_for_mover,
        stats=stats,
    )
