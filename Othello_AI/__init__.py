"""Othello_AI package exports."""

from .Board import Board, BLACK, WHITE, EMPTY
from .Othellogame import Othellogame
from .Player import Player, HumanPlayer
from .ComputerPlayer import ComputerPlayer
from .engine.othello_rules import (
    InvalidMoveError,
    apply_move,
    get_valid_moves,
    is_legal_move,
)
from .ai.move_selector import InvalidLevelError, choose_move

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "BLACK",
    "WHITE",
    "EMPTY",
    "Othellogame",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "InvalidMoveError",
    "InvalidLevelError",
    "is_legal_move",
    "apply_move",
    "get_valid_moves",
    "choose_move",
    "ai",
    "engine",
    "utils",
]
