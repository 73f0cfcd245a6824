"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, GameState, Mark, cell_to_index


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of looking at a board.
    
    winner is only set when status is WIN.
    """
    status: GameStatus
    winner: Optional[Mark] = None
    
    @property
    def is_terminal(self) -> bool:
        """True once the game is won or drawn."""
        return self.status != GameStatus.IN_PROGRESS


IN_PROGRESS = Outcome(GameStatus.IN_PROGRESS)
DRAW = Outcome(GameStatus.DRAW)


def _line(*cells: Tuple[int, int]) -> Tuple[int, int, int]:
    return tuple(cell_to_index(row, col) for row, col in cells)


# All possible winning lines as board indices.
# Checked in this order: rows, columns, diagonals.
WINNING_LINES = (
    # Rows
    _line((0, 0), (0, 1), (0, 2)),
    _line((1, 0), (1, 1), (1, 2)),
    _line((2, 0), (2, 1), (2, 2)),
    # Columns
    _line((0, 0), (1, 0), (2, 0)),
    _line((0, 1), (1, 1), (2, 1)),
    _line((0, 2), (1, 2), (2, 2)),
    # Diagonals
    _line((0, 0), (1, 1), (2, 2)),
    _line((0, 2), (1, 1), (2, 0)),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """
    
    WINNING_LINES = WINNING_LINES
    
    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.
        
        Args:
            board: The 9-cell board.
        
        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]
    
    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Mark]:
        """
        Check if a single line is complete.
        
        Returns:
            The Mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None
    
    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.
        
        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False
        return all(cell is not None for cell in board)
    
    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.
        
        Returns:
            The first completed line as 3 board indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
    
    def outcome(self, board: Board) -> Outcome:
        """Work out the game outcome for a board."""
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome(GameStatus.WIN, winner)
        if all(cell is not None for cell in board):
            return DRAW
        return IN_PROGRESS


_checker = WinChecker()


def outcome(board: Board) -> Outcome:
    """Work out the game outcome for a board."""
    return _checker.outcome(board)


def status_text(game_state: GameState, result: Outcome) -> str:
    """Status line shown to the players."""
    if result.status == GameStatus.WIN:
        return f"Winner: {result.winner.value}"
    if result.status == GameStatus.DRAW:
        return "Draw!"
    return f"Next player: {game_state.turn.value}"


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")
    
    X, O = Mark.X, Mark.O
    checker = WinChecker()
    
    # Test 1: Horizontal win
    board = (X, X, X,
             O, O, None,
             None, None, None)
    print(f"Test 1 (horizontal): {checker.outcome(board)}")
    
    # Test 2: Diagonal win
    board = (O, X, X,
             None, O, X,
             None, None, O)
    print(f"Test 2 (diagonal): {checker.outcome(board)}")
    
    # Test 3: Draw (full board, no winner)
    board = (X, O, X,
             X, O, O,
             O, X, X)
    print(f"Test 3 (draw): {checker.outcome(board)}")
    
    print("\nWinChecker test done!")
