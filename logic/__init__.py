"""
Logic module for TicTacToe.
Handles game state, rules, and outcome detection.
"""

from .game_state import (
    GameState,
    Mark,
    Board,
    new_game,
    reset,
    format_board,
    index_to_cell,
    cell_to_index,
)
from .move_validator import MoveValidator, ValidationResult, apply_move
from .win_checker import WinChecker, Outcome, GameStatus, WINNING_LINES, outcome, status_text
