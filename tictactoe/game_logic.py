import logging
from enum import Enum

from .board import Board, Sign, next_sign
from .errors import CellOccupied, GameError, GameOver, OutOfBounds
from .win_detector import NO_WINNER, evaluate

logger = logging.getLogger(__name__)

# the "previous mover" after a reset; it flips to X for the first move
STARTING_SIGN = Sign.O


class Phase(Enum):
    ONGOING = 'ongoing'
    OVER = 'over'


class MoveResult(Enum):
    """
    what attempt_move did with a move
    """
    REJECTED = 'invalid'
    CONTINUE = 'continue'
    WIN = 'win'
    DRAW = 'draw'


class GameState:
    """
    tic-tac-toe rules and state
    the window feeds moves in and the board widget reads it back out
    """
    def __init__(self, dimension=3):
        """
        init board and counters
        """
        self.board = Board(dimension)
        self.phase = Phase.ONGOING
        self.outcome = None               # WinOutcome once the game is over
        self.move_count = 0
        self._last_mover = STARTING_SIGN

    # ---- queries ----

    @property
    def dimension(self):
        return self.board.dimension

    @property
    def turn(self):
        """sign that plays the next move"""
        return next_sign(self._last_mover)

    @property
    def last_mover(self):
        return self._last_mover

    def is_over(self): return self.phase is Phase.OVER
    def is_ongoing(self): return self.phase is Phase.ONGOING

    def is_won(self):
        return self.outcome is not None and self.outcome.has_winner

    def is_drawn(self):
        return self.is_over() and not self.is_won()

    @property
    def winner(self):
        return self.outcome.winner if self.is_won() else None

    @property
    def strike(self):
        return self.outcome.strike if self.is_won() else ()

    # ---- transitions ----

    def play(self, col, row):
        """
        place the next sign at (col, row), check result
        raises GameOver / OutOfBounds / CellOccupied and leaves the state alone
        """
        if self.is_over():
            raise GameOver()
        if not self.board.in_bounds(col, row):
            raise OutOfBounds(col, row, self.dimension)
        current = self.board.get(col, row)
        if current is not Sign.EMPTY:
            raise CellOccupied(col, row, current)

        sign = next_sign(self._last_mover)
        self.board.set(col, row, sign)
        self._last_mover = sign
        self.move_count += 1
        logger.debug("%s played (%d, %d)", sign.value, col, row)

        result = evaluate(self.board, (col, row))
        if result.has_winner:
            self.phase = Phase.OVER; self.outcome = result
            logger.info("%s won! Game Over!", sign.value)
            return MoveResult.WIN
        if self.board.is_full():
            self.phase = Phase.OVER; self.outcome = NO_WINNER
            logger.info("No more cells left! It's a draw!")
            return MoveResult.DRAW
        return MoveResult.CONTINUE

    def attempt_move(self, col, row):
        """
        same as play() but a bad move just comes back REJECTED
        """
        try:
            return self.play(col, row)
        except GameError as exc:
            logger.debug("move (%s, %s) rejected: %s", col, row, exc)
            return MoveResult.REJECTED

    def reset(self):
        """
        clear board and reset flags, X moves first again
        """
        self.board.reset()
        self.phase = Phase.ONGOING; self.outcome = None
        self.move_count = 0; self._last_mover = STARTING_SIGN
