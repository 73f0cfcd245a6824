"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies legal ones.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, CELL_COUNT
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Rules:
    1. Index must be a board cell (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    """
    
    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()
    
    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            index: Board index to mark (0-8).
        
        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass; True must not mean cell 1
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be an integer."
            )
        
        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{CELL_COUNT - 1}."
            )
        
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )
        
        if self.win_checker.outcome(game_state.board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )
        
        return ValidationResult(is_valid=True)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.
        
        Returns:
            List of board indices, empty once the game is over.
        """
        if self.win_checker.outcome(game_state.board).is_terminal:
            return []
        return game_state.get_empty_cells()


_validator = MoveValidator()


def apply_move(game_state: GameState, index: int) -> Optional[GameState]:
    """
    Mark a cell for the player whose turn it is.
    
    Args:
        game_state: Current game state. Never modified.
        index: Board index (0-8).
    
    Returns:
        The new GameState, or None if the move was rejected
        (bad index, occupied cell, or game already over).
    """
    if not _validator.validate_move(game_state, index).is_valid:
        return None
    return game_state.place(index)


# Quick test
if __name__ == "__main__":
    from .game_state import new_game
    
    print("Testing MoveValidator...")
    
    game = new_game()
    validator = MoveValidator()
    
    result = validator.validate_move(game, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")
    
    game = apply_move(game, 4)
    
    result = validator.validate_move(game, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")
    
    result = validator.validate_move(game, 12)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")
    
    print(f"Valid moves: {validator.get_valid_moves(game)}")
    
    print("\nMoveValidator test done!")
