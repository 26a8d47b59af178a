from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Sign
from .errors import InvalidOperation

Cell = Tuple[int, int]  # (col, row)


@dataclass(frozen=True)
class WinOutcome:
    """
    result of checking the board after a move
    strike: cells of the completed line, first to last, empty without a winner
    """
    winner: Optional[Sign] = None
    strike: Tuple[Cell, ...] = ()

    @property
    def has_winner(self):
        return self.winner is not None


NO_WINNER = WinOutcome()


def candidate_lines(dimension, col, row):
    """
    lines through (col, row) in check order: row, column, diagonal, anti-diagonal
    """
    n = dimension
    lines = [
        tuple((c, row) for c in range(n)),
        tuple((col, r) for r in range(n)),
    ]
    if col == row:
        lines.append(tuple((i, i) for i in range(n)))
    if col + row == n - 1:
        lines.append(tuple((n - 1 - i, i) for i in range(n)))
    return lines


def evaluate(board, last_move):
    """
    did the move at last_move complete a line?
    first complete line in check order wins, so a move finishing
    its row and its column reports the row
    """
    col, row = last_move
    sign = board.get(col, row)
    if sign is Sign.EMPTY:
        raise InvalidOperation(f"cell ({col}, {row}) is empty, nothing was played there")

    for line in candidate_lines(board.dimension, col, row):
        if all(board.get(c, r) is sign for c, r in line):
            return WinOutcome(winner=sign, strike=line)
    return NO_WINNER
