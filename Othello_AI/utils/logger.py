"""Lightweight logging utilities for matches and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def render_text(board, last_move, color, game_result):
    """Console renderer for Othellogame: prints the board after each turn."""
    print(board)
    if game_result is None:
        print(f"{'Black' if color == -1 else 'White'} to move (last: {last_move})")
