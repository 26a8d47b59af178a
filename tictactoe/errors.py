class GameError(Exception):
    """
    base for rejected moves; the caller recovers, the state is untouched
    """


class OutOfBounds(GameError, IndexError):
    """coordinate outside the board"""

    def __init__(self, col, row, dimension):
        super().__init__(f"cell ({col}, {row}) is outside a {dimension}x{dimension} board")
        self.col = col; self.row = row; self.dimension = dimension


class CellOccupied(GameError, ValueError):
    """move on a cell that already holds X or O"""

    def __init__(self, col, row, sign):
        super().__init__(f"cell ({col}, {row}) already holds {sign.value}")
        self.col = col; self.row = row; self.sign = sign


class InvalidOperation(GameError, ValueError):
    """sign flip on EMPTY, or evaluating an empty cell"""


class GameOver(GameError, RuntimeError):
    """move attempted after a win or a draw"""

    def __init__(self):
        super().__init__("game already finished, reset to play again")
