"""Computer player driving the level-based move selector."""

import random
import time

from .Player import Player
from .ai import move_selector


class ComputerPlayer(Player):
    def __init__(self, color, level=3, rng=None, delay=0.0, pass_on_no_moves=False, leaf_for_mover=False):
        super().__init__(color)
        self.level = move_selector.validate_level(level)
        self.rng = rng if rng is not None else random.Random()
        self.delay = delay
        self.pass_on_no_moves = pass_on_no_moves
        self.leaf_for_mover = leaf_for_mover
        self.stats = None

    def next_move(self, board, deadline=None):
        """Return the chosen move, or None when there is nothing to play."""
        if self.delay > 0:
            wait = self.delay
            if deadline is not None:
                wait = min(wait, max(deadline - time.time(), 0.0))
            time.sleep(wait)

        return move_selector.choose_move(
            board,
            self.color,
            self.level,
            rng=self.rng,
            pass_on_no_moves=self.pass_on_no_moves,
            leaf_for_mover=self.leaf_for_mover,
            stats=self.stats,
        )
