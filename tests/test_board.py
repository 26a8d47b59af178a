"""Tests for signs and the board grid."""

import pytest

from tictactoe.board import Board, Sign, next_sign
from tictactoe.errors import InvalidOperation, OutOfBounds


def test_flip_alternates_x_and_o():
    assert next_sign(Sign.X) is Sign.O
    assert next_sign(Sign.O) is Sign.X
    for sign in (Sign.X, Sign.O):
        assert sign.flip().flip() is sign


def test_flip_empty_fails():
    with pytest.raises(InvalidOperation):
        next_sign(Sign.EMPTY)
    with pytest.raises(InvalidOperation):
        Sign.EMPTY.flip()


def test_new_board_is_empty():
    board = Board()
    assert board.dimension == 3
    assert all(sign is Sign.EMPTY for _, sign in board)
    assert len(board.empty_cells()) == 9
    assert not board.is_full()


def test_get_and_set_use_col_row():
    board = Board()
    board.set(2, 0, Sign.X)
    assert board.get(2, 0) is Sign.X
    assert board.row(0) == [Sign.EMPTY, Sign.EMPTY, Sign.X]
    assert board.column(2) == [Sign.X, Sign.EMPTY, Sign.EMPTY]


@pytest.mark.parametrize("col,row", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_bounds(col, row):
    board = Board()
    with pytest.raises(OutOfBounds):
        board.get(col, row)
    with pytest.raises(OutOfBounds):
        board.set(col, row, Sign.X)


def test_row_and_column_bounds():
    board = Board()
    with pytest.raises(OutOfBounds):
        board.row(3)
    with pytest.raises(OutOfBounds):
        board.column(-1)


def test_rejects_non_sign_values():
    board = Board()
    with pytest.raises(TypeError):
        board.set(0, 0, 'X')
    with pytest.raises(ValueError):
        Board(0)


def test_is_full_matches_cells():
    board = Board()
    signs = [Sign.X, Sign.O]
    for i, (pos, _) in enumerate(list(board)):
        assert not board.is_full()
        board.set(*pos, signs[i % 2])
    assert board.is_full()
    assert all(board.get(c, r) is not Sign.EMPTY for c in range(3) for r in range(3))


def test_reset_clears_every_cell():
    board = Board(fill=Sign.O)
    assert board.is_full()
    board.reset()
    assert board.empty_cells() == [(c, r) for r in range(3) for c in range(3)]


def test_non_integer_coordinates_out_of_bounds():
    board = Board()
    assert not board.in_bounds(1.5, 0)
    assert not board.in_bounds(0, "1")
    with pytest.raises(OutOfBounds):
        board.get(1.0, 1)
