"""Tests for minimax move selection."""

import pytest

from Othello_AI.Board import BLACK, WHITE, Board
from Othello_AI.ai import heuristic, search_minimax


# Black can take two discs on row 3, but White recaptures four in reply.
# Taking one disc on row 6 leaves White without a move.
TRAP = [
    "........",
    "........",
    "........",
    "....WWBW",
    "........",
    "........",
    "BW......",
    "........",
]


def test_evaluate_board_is_material_difference():
    b = Board.from_rows(TRAP)
    assert heuristic.evaluate_board(b, BLACK) == 2 - 4
    assert heuristic.evaluate_board(b, WHITE) == 4 - 2
    assert heuristic.evaluate_board(Board.initial(), BLACK) == 0


def test_depth_one_takes_most_material():
    b = Board.from_rows(TRAP)
    assert search_minimax.choose_move(b, BLACK, depth=1) == (3, 3)


def test_depth_two_avoids_recapture():
    b = Board.from_rows(TRAP)
    searcher = search_minimax.MinimaxSearcher(color=BLACK, depth=2)
    assert searcher.choose_move(b) == (2, 6)
    # White cannot reply, so the position is scored as it stands: 4 - 3
    assert searcher.root_score == 1


def test_depth_three_prefers_quiet_move():
    b = Board.from_rows(TRAP)
    assert search_minimax.choose_move(b, BLACK, depth=3) == (2, 6)


def test_pass_on_no_moves_continues_search():
    b = Board.from_rows(TRAP)
    searcher = search_minimax.MinimaxSearcher(color=BLACK, depth=2, pass_on_no_moves=True)
    assert searcher.choose_move(b) == (2, 6)
    # White passes and Black also captures on row 3: 7 - 1
    assert searcher.root_score == 6


def test_ties_keep_first_move_in_scan_order():
    b = Board.initial()
    for depth in (1, 2, 3):
        assert search_minimax.choose_move(b, BLACK, depth=depth) == (3, 2)


def test_search_does_not_mutate_board_and_records_stats():
    b = Board.from_rows(TRAP)
    before = [row[:] for row in b.cells]
    stats = []
    search_minimax.choose_move(b, BLACK, depth=3, stats=stats)
    assert b.cells == before
    assert len(stats) == 1
    assert stats[0]["depth"] == 3
    assert stats[0]["nodes"] > 1


def test_no_legal_move_returns_none():
    b = Board.from_rows(["BBBBWWWW"] * 8)
    assert search_minimax.choose_move(b, BLACK, depth=2) is None


def test_depth_must_be_positive():
    with pytest.raises(ValueError):
        search_minimax.MinimaxSearcher(color=BLACK, depth=0)


def test_leaf_for_mover_scores_for_side_to_move():
    b = Board.from_rows(TRAP)
    # Leaves after one ply are scored for White: (3,3) gives 2 - 5, (2,6) gives 3 - 4
    searcher = search_minimax.MinimaxSearcher(color=BLACK, depth=1, leaf_for_mover=True)
    assert searcher.choose_move(b) == (2, 6)
    assert searcher.root_score == -1
