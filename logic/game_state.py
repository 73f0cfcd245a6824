"""
Game state for TicTacToe.
Holds the board and whose turn it is. States are immutable;
moves build a new state instead of changing the old one.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Mark(Enum):
    """The two marks a cell can hold."""
    X = "X"
    O = "O"
    
    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


# Row-major: index = row * 3 + col
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# X always opens, including after a restart
STARTING_MARK = Mark.X

Board = Tuple[Optional[Mark], ...]

EMPTY_BOARD: Board = (None,) * CELL_COUNT


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a board index (0-8) to (row, col)."""
    return divmod(index, BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a board index (0-8)."""
    return row * BOARD_SIZE + col


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.
    
    Tracks:
    - The 9 cells of the board (None means empty)
    - Which mark moves next
    
    The outcome (win/draw) is not stored here; it is always
    recomputed from the board by the win checker.
    """
    
    board: Board = field(default=EMPTY_BOARD)
    turn: Mark = STARTING_MARK
    
    def __post_init__(self):
        if len(self.board) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(self.board)}")
    
    def cell(self, row: int, col: int) -> Optional[Mark]:
        """Get the mark at (row, col), or None if empty."""
        return self.board[cell_to_index(row, col)]
    
    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.
        
        Returns:
            List of board indices, in ascending order.
        """
        return [i for i, mark in enumerate(self.board) if mark is None]
    
    def count(self, mark: Mark) -> int:
        """How many cells hold the given mark."""
        return sum(1 for cell in self.board if cell == mark)
    
    def place(self, index: int) -> "GameState":
        """
        Build the state after the current player marks a cell.
        
        No rule checks happen here; use apply_move() for that.
        
        Args:
            index: Board index (0-8).
        
        Returns:
            A new GameState with the cell marked and the turn passed on.
        """
        board = list(self.board)
        board[index] = self.turn
        return GameState(board=tuple(board), turn=self.turn.opposite())


def new_game() -> GameState:
    """Start a game: empty board, X to move."""
    return GameState()


def reset() -> GameState:
    """Restart the game. Same as new_game()."""
    return new_game()


def format_board(board: Board) -> str:
    """
    Render a board as a text grid.
    
    Empty cells show their 1-9 position so console players
    know what to type.
    """
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = cell_to_index(row, col)
            mark = board[index]
            cells.append(mark.value if mark is not None else str(index + 1))
        lines.append(" " + " | ".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")
    return "\n".join(lines)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")
    
    game = new_game()
    for index in (4, 0, 8):
        print(f"\n{game.turn.value} moves to {index}")
        game = game.place(index)
        print(format_board(game.board))
    
    print(f"\nNext turn: {game.turn.value}")
    print("\nGame state test done!")
