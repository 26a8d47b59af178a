from dataclasses import dataclass
from enum import Enum

from PySide6.QtCore import Qt


class Command(Enum):
    RESET = 'reset'
    QUIT = 'quit'


@dataclass(frozen=True)
class CellRequest:
    col: int
    row: int


def _code(key):
    # Qt.Key members and the plain ints from QKeyEvent.key()
    return int(getattr(key, "value", key))


# numeric keypad layout, top row of the pad is row 0
KEYPAD_CELLS = {
    _code(Qt.Key_7): (0, 0), _code(Qt.Key_8): (1, 0), _code(Qt.Key_9): (2, 0),
    _code(Qt.Key_4): (0, 1), _code(Qt.Key_5): (1, 1), _code(Qt.Key_6): (2, 1),
    _code(Qt.Key_1): (0, 2), _code(Qt.Key_2): (1, 2), _code(Qt.Key_3): (2, 2),
}

COMMAND_KEYS = {
    _code(Qt.Key_Escape): Command.QUIT,
    _code(Qt.Key_Q): Command.QUIT,
    _code(Qt.Key_R): Command.RESET,
    _code(Qt.Key_F5): Command.RESET,
}


def translate_key(key, dimension=3):
    """
    map a Qt key code to a CellRequest, a Command, or None
    cell keys only exist for the 3x3 keypad layout
    """
    key = _code(key)
    if key in COMMAND_KEYS:
        return COMMAND_KEYS[key]
    if dimension == 3 and key in KEYPAD_CELLS:
        return CellRequest(*KEYPAD_CELLS[key])
    return None
