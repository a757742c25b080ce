"""Tests for Othellogame turn handling, passes, and end-of-game state."""

from Othello_AI.Board import BLACK, WHITE, Board
from Othello_AI.ComputerPlayer import ComputerPlayer
from Othello_AI.Othellogame import Othellogame
from Othello_AI.Player import Player
from Othello_AI.engine import othello_rules


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, color, moves):
        super().__init__(color)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board, deadline=None):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


def _game(black, white, **kwargs):
    log = []
    kwargs.setdefault("move_timeout", 5.0)
    game = Othellogame(board_size=8, black_player=black, white_player=white, logger=log.append, **kwargs)
    return game, log


def test_illegal_move_disqualifies():
    game, log = _game(SeqPlayer(BLACK, [(0, 0)]), SeqPlayer(WHITE, []))
    assert game.play() == WHITE
    assert any("Disqualification: Black" in line for line in log)
    assert game.board == Board.initial()


def test_timeout_disqualifies():
    game, log = _game(SeqPlayer(BLACK, [(2, 3)]), SeqPlayer(WHITE, []), move_timeout=-1.0)
    assert game.play() == WHITE
    assert any("exceeded" in line for line in log)


def test_permissive_mode_accepts_non_capturing_move():
    game, log = _game(SeqPlayer(BLACK, [(0, 0)]), SeqPlayer(WHITE, []), strict_moves=False)
    # White runs out of scripted moves and is disqualified after Black's placement
    assert game.play() == BLACK
    assert game.board.get(0, 0) == BLACK
    assert game.board.count(BLACK) == 3 and game.board.count(WHITE) == 2
    assert log[0].startswith("Move 1: B")


def test_side_without_moves_passes_and_game_ends():
    black = SeqPlayer(BLACK, [])
    white = SeqPlayer(WHITE, [(2, 0)])
    game, log = _game(black, white)
    game.board = Board.from_rows(["WB......"] + ["........"] * 7)

    assert game.play() == WHITE
    assert game.passes[BLACK] == 1
    assert log[0] == "Pass: Black has no legal move"
    assert log[1] == "Move 1: W (2, 0)"
    assert log[-1] == "Winner: White (0-3)"


def test_ai_game_runs_to_completion():
    black = ComputerPlayer(BLACK, level=2)
    white = ComputerPlayer(WHITE, level=3)
    game, log = _game(black, white)
    result = game.play()

    assert othello_rules.is_game_over(game.board)
    assert result == othello_rules.winner(game.board)
    assert not any("Disqualification" in line for line in log)
    assert game.move_index == game.board.count(BLACK) + game.board.count(WHITE) - 4


def test_final_render_color_is_side_to_move(monkeypatch):
    import importlib

    game_mod = importlib.import_module("Othello_AI.Othellogame")
    monkeypatch.setattr(game_mod.time, "sleep", lambda *_: None)

    renders = []

    def renderer(board, last_move, current_color, game_result):
        renders.append((last_move, current_color, game_result))

    game, _ = _game(SeqPlayer(BLACK, [(2, 3)]), SeqPlayer(WHITE, [(0, 0)]), renderer=renderer)
    result = game.play()

    assert result == BLACK
    assert renders[0] == (None, BLACK, None)
    assert renders[-1] == ((2, 3), WHITE, BLACK)


def test_loop_ends_when_rules_report_game_over(monkeypatch):
    import importlib

    game_mod = importlib.import_module("Othello_AI.Othellogame")
    monkeypatch.setattr(game_mod.othello_rules, "is_game_over", lambda board: True)

    game, log = _game(SeqPlayer(BLACK, []), SeqPlayer(WHITE, []))
    assert game.play() == 0
    assert game.move_index == 0
    assert log == ["Result: Draw (2-2)"]
