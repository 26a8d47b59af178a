"""Tests for line detection after a move."""

import pytest

from tictactoe.board import Board, Sign
from tictactoe.errors import InvalidOperation
from tictactoe.win_detector import NO_WINNER, evaluate


def fill(board, sign, cells):
    for col, row in cells:
        board.set(col, row, sign)
    return board


def test_no_winner_on_partial_line():
    board = fill(Board(), Sign.X, [(0, 0), (1, 0)])
    assert evaluate(board, (1, 0)) == NO_WINNER
    assert not evaluate(board, (1, 0)).has_winner


def test_row_win():
    board = fill(Board(), Sign.O, [(0, 1), (1, 1), (2, 1)])
    outcome = evaluate(board, (2, 1))
    assert outcome.winner is Sign.O
    assert outcome.strike == ((0, 1), (1, 1), (2, 1))


def test_column_win():
    board = fill(Board(), Sign.X, [(1, 0), (1, 1), (1, 2)])
    outcome = evaluate(board, (1, 0))
    assert outcome.winner is Sign.X
    assert outcome.strike == ((1, 0), (1, 1), (1, 2))


def test_main_diagonal_win():
    board = fill(Board(), Sign.X, [(0, 0), (1, 1), (2, 2)])
    assert evaluate(board, (2, 2)).strike == ((0, 0), (1, 1), (2, 2))


def test_anti_diagonal_win():
    board = fill(Board(), Sign.O, [(2, 0), (1, 1), (0, 2)])
    outcome = evaluate(board, (0, 2))
    assert outcome.winner is Sign.O
    assert outcome.strike == ((2, 0), (1, 1), (0, 2))


def test_diagonal_only_checked_through_last_move():
    board = fill(Board(), Sign.X, [(0, 0), (1, 1), (2, 2), (1, 0)])
    assert evaluate(board, (1, 0)) == NO_WINNER


def test_row_beats_column():
    board = fill(Board(), Sign.X, [(0, 0), (1, 0), (2, 1), (2, 2), (2, 0)])
    outcome = evaluate(board, (2, 0))
    assert outcome.strike == ((0, 0), (1, 0), (2, 0))


def test_main_diagonal_beats_anti_diagonal():
    board = fill(Board(), Sign.O, [(0, 0), (2, 2), (2, 0), (0, 2), (1, 1)])
    assert evaluate(board, (1, 1)).strike == ((0, 0), (1, 1), (2, 2))


def test_other_sign_does_not_count():
    board = fill(Board(), Sign.X, [(0, 0), (1, 0)])
    board.set(2, 0, Sign.O)
    assert evaluate(board, (2, 0)) == NO_WINNER


def test_empty_last_move_fails():
    with pytest.raises(InvalidOperation):
        evaluate(Board(), (0, 0))


def test_lines_follow_dimension():
    # 4x4 is never played but the lines come from the dimension
    board = fill(Board(4), Sign.X, [(3, 0), (2, 1), (1, 2), (0, 3)])
    assert evaluate(board, (1, 2)).strike == ((3, 0), (2, 1), (1, 2), (0, 3))
    board = fill(Board(4), Sign.O, [(i, i) for i in range(3)])
    assert evaluate(board, (2, 2)) == NO_WINNER
