"""Game loop and turn management for Othello, including passes and game end."""

import time

from .Board import BLACK, Board
from .engine import othello_rules, referee
from .engine.othello_rules import InvalidMoveError
from .utils import timer


def color_name(color):
    return "Black" if color == BLACK else "White"


class Othellogame:
    def __init__(self, board_size, move_timeout, black_player, white_player, logger=print, renderer=None, closer=None, strict_moves=True, result_pause=3.0):
        self.board = Board.initial(size=board_size)
        self.move_timeout = move_timeout
        self.players = {-1: black_player, 1: white_player}
        self.logger = logger
        self.move_index = 0
        self.passes = {-1: 0, 1: 0}
        self.renderer = renderer
        self.closer = closer
        self.strict_moves = strict_moves
        self.result_pause = result_pause

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), or 0 (draw)."""
        color = BLACK  # black starts
        game_result = None
        last_move = None
        try:
            while game_result is None:
                if self.renderer:
                    self.renderer(self.board, last_move, color, game_result)

                if othello_rules.is_game_over(self.board):
                    game_result = self._final_result()
                    break
                if not othello_rules.has_any_move(self.board, color):
                    self.logger(f"Pass: {color_name(color)} has no legal move")
                    self.passes[color] += 1
                    color = -color
                    continue

                player = self.players[color]
                deadline = timer.deadline_after(self.move_timeout)

                try:
                    move = player.next_move(self.board, deadline=deadline)
                    if move is None:
                        raise InvalidMoveError("Passed while legal moves were available")
                    if self.strict_moves:
                        referee.check_move(move, self.board, color, deadline, move_index=self.move_index)
                    elif deadline is not None and time.time() > deadline:
                        raise TimeoutError("Move exceeded allotted time")
                    self.board = othello_rules.apply_move(self.board, *move, color, strict=self.strict_moves)
                    last_move = tuple(move)
                except (TimeoutError, ValueError) as exc:
                    self.logger(f"Disqualification: {color_name(color)} - {exc}")
                    game_result = -color  # opponent wins
                    break

                self.logger(f"Move {self.move_index + 1}: {'B' if color == BLACK else 'W'} {last_move}")

                color = -color  # swap turns
                self.move_index += 1

            if self.renderer:
                self.renderer(self.board, last_move, color, game_result)
                # Pause to show the result
                time.sleep(self.result_pause)

            return game_result
        finally:
            if self.closer:
                self.closer()

    def _final_result(self):
        black, white = othello_rules.score(self.board)
        result = othello_rules.winner(self.board)
        if result == 0:
            self.logger(f"Result: Draw ({black}-{white})")
        else:
            self.logger(f"Winner: {color_name(result)} ({black}-{white})")
        return result
