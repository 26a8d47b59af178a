from enum import Enum

from .errors import OutOfBounds, InvalidOperation


class Sign(Enum):
    """
    what a cell holds: X, O, or nothing yet
    """
    X = 'X'
    O = 'O'
    EMPTY = ''

    def flip(self):
        # X <-> O, never mutates
        return next_sign(self)

    def is_x(self): return self is Sign.X
    def is_o(self): return self is Sign.O
    def is_empty(self): return self is Sign.EMPTY


def next_sign(sign):
    """
    the sign that moves after `sign`
    """
    if sign is Sign.X:
        return Sign.O
    if sign is Sign.O:
        return Sign.X
    raise InvalidOperation(f"cannot flip {sign!r}, only X and O alternate")


class Board:
    """
    square grid of signs, addressed by (col, row)
    """
    def __init__(self, dimension=3, fill=Sign.EMPTY):
        if dimension < 1:
            raise ValueError(f"board dimension must be positive, got {dimension}")
        self._check_sign(fill)
        self.dimension = dimension
        self._cells = [[fill for _ in range(dimension)]
                       for _ in range(dimension)]  # stored row-major

    @staticmethod
    def _check_sign(sign):
        # anything other than a Sign means corrupted state
        if not isinstance(sign, Sign):
            raise TypeError(f"board cells hold Sign values, got {sign!r}")

    def in_bounds(self, col, row):
        # only whole-number coordinates address a cell
        if not (isinstance(col, int) and isinstance(row, int)):
            return False
        return 0 <= col < self.dimension and 0 <= row < self.dimension

    def _require(self, col, row):
        if not self.in_bounds(col, row):
            raise OutOfBounds(col, row, self.dimension)

    def get(self, col, row):
        self._require(col, row)
        return self._cells[row][col]

    def set(self, col, row, sign):
        """
        overwrite a cell; occupancy is the caller's business
        """
        self._require(col, row)
        self._check_sign(sign)
        self._cells[row][col] = sign

    def row(self, r):
        self._require(0, r)
        return list(self._cells[r])

    def column(self, c):
        self._require(c, 0)
        return [cells[c] for cells in self._cells]

    def cells(self):
        """
        yield ((col, row), sign) row by row
        """
        for r, cells in enumerate(self._cells):
            for c, sign in enumerate(cells):
                yield (c, r), sign

    __iter__ = cells

    def empty_cells(self):
        return [pos for pos, sign in self.cells() if sign is Sign.EMPTY]

    def is_full(self):
        return all(sign is not Sign.EMPTY for _, sign in self.cells())

    def reset(self):
        for cells in self._cells:
            cells[:] = [Sign.EMPTY] * self.dimension

    def __repr__(self):
        rows = ['|'.join(s.value or '.' for s in cells) for cells in self._cells]
        return f"Board({self.dimension}, {' / '.join(rows)})"
