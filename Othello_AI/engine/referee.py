"""Move validation, time control, and disqualification handling."""

import time

from . import othello_rules
from .othello_rules import InvalidMoveError


def check_move(move, board, color, deadline, move_index=None):
    """
    Validate a move against time, bounds, occupancy, and the capture rule.
    Raises InvalidMoveError/TimeoutError on invalid moves.
    """
    if deadline is not None and time.time() > deadline:
        raise TimeoutError("Move exceeded allotted time")

    try:
        x, y = move
    except (TypeError, ValueError):
        raise InvalidMoveError(f"Malformed move {move!r}") from None

    if not board.in_bounds(x, y):
        raise InvalidMoveError("Move out of bounds")
    if not board.is_empty(x, y):
        raise InvalidMoveError("Cell already occupied")
    if not othello_rules.is_legal_move(board, x, y, color):
        label = f" (move {move_index + 1})" if move_index is not None else ""
        raise InvalidMoveError(f"Move {tuple(move)} captures nothing{label}")

    return True
