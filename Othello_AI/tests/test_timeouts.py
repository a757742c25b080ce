"""Tests for per-move timeouts and referee enforcement."""

import time
import pytest

from Othello_AI.Board import BLACK, WHITE, Board
from Othello_AI.engine import referee
from Othello_AI.engine.othello_rules import InvalidMoveError
from Othello_AI.utils import timer


def test_timeout_rejected():
    b = Board.initial()
    deadline = time.time() - 0.1
    with pytest.raises(TimeoutError):
        referee.check_move((2, 3), b, BLACK, deadline, move_index=0)


def test_valid_move_passes():
    b = Board.initial()
    deadline = time.time() + 1
    assert referee.check_move((2, 3), b, BLACK, deadline, move_index=0) is True
    assert referee.check_move((4, 2), b, WHITE, None) is True


@pytest.mark.parametrize("move", [(8, 0), (3, 3), (0, 0), None, (1,)])
def test_invalid_moves_rejected(move):
    b = Board.initial()
    with pytest.raises(InvalidMoveError):
        referee.check_move(move, b, BLACK, time.time() + 1, move_index=0)


def test_deadline_helpers():
    assert timer.deadline_after(None) is None
    assert timer.time_remaining(None) == float("inf")
    assert 0 < timer.time_remaining(timer.deadline_after(10)) <= 10
