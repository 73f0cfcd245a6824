"""
Tests for the TicTacToe rules: moves, turns, wins and draws.
Run with: pytest test_game_logic.py
"""

import pytest

from logic import (
    GameState,
    Mark,
    GameStatus,
    MoveValidator,
    WinChecker,
    WINNING_LINES,
    apply_move,
    new_game,
    outcome,
    reset,
    format_board,
    index_to_cell,
    cell_to_index,
    status_text,
)

X, O = Mark.X, Mark.O


def play(*indices):
    """Play a sequence of moves from a new game, failing on any rejection."""
    state = new_game()
    for index in indices:
        next_state = apply_move(state, index)
        assert next_state is not None, f"move {index} was rejected"
        state = next_state
    return state


def reachable_states():
    """Every state reachable from an empty board by legal moves."""
    seen = {}
    stack = [new_game()]
    while stack:
        state = stack.pop()
        if state in seen:
            continue
        seen[state] = True
        for index in range(9):
            next_state = apply_move(state, index)
            if next_state is not None:
                stack.append(next_state)
    return list(seen)


# ==================== NEW GAME / RESET ====================

def test_new_game_is_empty_with_x_to_move():
    state = new_game()
    assert state.board == (None,) * 9
    assert state.turn == X
    assert outcome(state.board).status == GameStatus.IN_PROGRESS


def test_reset_matches_new_game_after_any_game():
    finished = play(0, 4, 1, 5, 2)
    assert outcome(finished.board).is_terminal
    assert reset() == new_game()
    assert reset().turn == X


def test_board_must_have_nine_cells():
    with pytest.raises(ValueError):
        GameState(board=(None,) * 8)


# ==================== MOVES ====================

def test_move_places_current_mark_and_passes_turn():
    state = new_game()
    after = apply_move(state, 4)
    assert after.board[4] == X
    assert after.turn == O
    assert [i for i, c in enumerate(after.board) if c is not None] == [4]
    # Input state untouched
    assert state == new_game()


def test_same_cell_twice_is_rejected():
    state = apply_move(new_game(), 0)
    assert apply_move(state, 0) is None
    assert state.board[0] == X
    assert state.turn == O


@pytest.mark.parametrize("index", [-1, 9, 100, "4", 4.0, None, True])
def test_bad_index_is_rejected(index):
    state = play(4)
    assert apply_move(state, index) is None


def test_no_moves_after_a_win():
    state = play(0, 4, 1, 5, 2)
    for index in state.get_empty_cells():
        assert apply_move(state, index) is None


def test_turn_alternates():
    state = new_game()
    turns = []
    for index in (4, 0, 8, 2, 6):
        turns.append(state.turn)
        state = apply_move(state, index)
    assert turns == [X, O, X, O, X]


# ==================== OUTCOME ====================

def test_top_row_win():
    state = play(0, 4, 1, 5, 2)
    result = outcome(state.board)
    assert result.status == GameStatus.WIN
    assert result.winner == X
    assert WinChecker().get_winning_line(state.board) == (0, 1, 2)


def test_o_can_win():
    # O takes the middle column
    state = play(0, 1, 2, 4, 3, 7)
    result = outcome(state.board)
    assert result.status == GameStatus.WIN
    assert result.winner == O


def test_full_board_without_line_is_draw():
    state = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    result = outcome(state.board)
    assert result.status == GameStatus.DRAW
    assert result.winner is None
    assert result.is_terminal


def test_win_on_last_move_beats_draw():
    board = (X, O, X,
             O, O, X,
             X, X, X)
    assert outcome(board).winner == X
    assert not WinChecker().check_draw(board)


def test_every_line_is_detected():
    assert len(WINNING_LINES) == 8
    for line in WINNING_LINES:
        board = [None] * 9
        for index in line:
            board[index] = O
        assert outcome(tuple(board)).winner == O


def test_partial_board_is_in_progress():
    state = play(0, 4, 8)
    assert outcome(state.board).status == GameStatus.IN_PROGRESS
    assert WinChecker().get_winning_line(state.board) is None


def test_reachable_boards_are_consistent():
    states = reachable_states()
    # Known count of distinct positions (with side to move)
    assert len(states) == 5478
    for state in states:
        x_count = state.count(X)
        o_count = state.count(O)
        assert x_count - o_count in (0, 1)
        assert state.turn == (X if x_count == o_count else O)

        winners = {state.board[line[0]] for line in WINNING_LINES
                   if WinChecker()._check_line(state.board, line) is not None}
        assert len(winners) <= 1


# ==================== VALIDATOR ====================

def test_validator_explains_rejections():
    validator = MoveValidator()
    state = play(4)
    assert validator.validate_move(state, 0).is_valid
    assert "occupied" in validator.validate_move(state, 4).error_message
    assert "0-8" in validator.validate_move(state, 9).error_message

    won = play(0, 4, 1, 5, 2)
    assert validator.validate_move(won, 8).error_message == "Game is already over!"


def test_valid_moves_empty_once_game_over():
    validator = MoveValidator()
    assert validator.get_valid_moves(new_game()) == list(range(9))
    assert validator.get_valid_moves(play(0, 4, 1, 5, 2)) == []


# ==================== HELPERS ====================

def test_index_cell_conversion():
    for index in range(9):
        row, col = index_to_cell(index)
        assert cell_to_index(row, col) == index
    assert index_to_cell(5) == (1, 2)


def test_format_board_numbers_empty_cells():
    text = format_board(play(0, 4).board)
    assert text.splitlines()[0] == " X | 2 | 3"
    assert text.splitlines()[2] == " 4 | O | 6"


def test_status_text():
    assert status_text(new_game(), outcome(new_game().board)) == "Next player: X"
    won = play(0, 4, 1, 5, 2)
    assert status_text(won, outcome(won.board)) == "Winner: X"
    draw = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert status_text(draw, outcome(draw.board)) == "Draw!"
