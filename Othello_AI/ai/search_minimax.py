"""Fixed-depth minimax over Othello positions with a material-difference leaf score."""

import time

from . import heuristic
from ..engine import othello_rules


INF = 10 ** 9


class MinimaxSearcher:
    """Encapsulates the state and logic for a minimax search."""

    def __init__(self, color, depth, pass_on_no_moves=False, leaf_for_mover=False, stats=None):
        if depth < 1:
            raise ValueError("search depth must be >= 1")
        self.color = color
        self.depth = depth
        self.pass_on_no_moves = pass_on_no_moves
        # Legacy scoring: leaves are evaluated for the side to move at the leaf
        self.leaf_for_mover = leaf_for_mover
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.start_time = None
        self.root_score = None

    def choose_move(self, board):
        """Return the best move for self.color, or None if it has no legal move."""
        self.node_counter = 0
        self.start_time = time.time()

        score, move = self._minimax(board, self.color, self.depth, True)
        self.root_score = score

        if self.stats_list is not None:
            self._record_stats()

        return move

    def _evaluate(self, board, node_color):
        perspective = node_color if self.leaf_for_mover else self.color
        return heuristic.evaluate_board(board, perspective)

    def _minimax(self, board, node_color, depth, maximizing):
        self.node_counter += 1

        if depth == 0:
            return self._evaluate(board, node_color), None

        moves = othello_rules.get_valid_moves(board, node_color)
        if not moves:
            if self.pass_on_no_moves and othello_rules.has_any_move(board, -node_color):
                score, _ = self._minimax(board, -node_color, depth, not maximizing)
                return score, None
            return self._evaluate(board, node_color), None

        best_score = -INF if maximizing else INF
        best_move = None

        for move in moves:
            child = othello_rules.apply_move(board, move[0], move[1], node_color)
            score, _ = self._minimax(child, -node_color, depth - 1, not maximizing)

            # Strict comparison keeps the first move found on ties.
            if maximizing:
                if score > best_score:
                    best_score = score
                    best_move = move
            else:
                if score < best_score:
                    best_score = score
                    best_move = move

        return best_score, best_move

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, color, depth, pass_on_no_moves=False, leaf_for_mover=False, stats=None):
    """
    Public function to start a search. Instantiates and uses MinimaxSearcher.
    """
    searcher = MinimaxSearcher(
        color=color,
        depth=depth,
        pass_on_no_moves=pass_on_no_moves,
        leaf_for_mover=leaf_for_mover,
        stats=stats,
    )
    return searcher.choose_move(board)
