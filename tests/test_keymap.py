"""Tests for translating key presses into moves and commands."""

from PySide6.QtCore import Qt

from tictactoe.ui.keymap import CellRequest, Command, translate_key


def test_keypad_layout():
    assert translate_key(Qt.Key_7) == CellRequest(0, 0)
    assert translate_key(Qt.Key_9) == CellRequest(2, 0)
    assert translate_key(Qt.Key_5) == CellRequest(1, 1)
    assert translate_key(Qt.Key_1) == CellRequest(0, 2)
    assert translate_key(Qt.Key_3) == CellRequest(2, 2)


def test_accepts_plain_int_codes():
    # QKeyEvent.key() hands back ints, 0x38 is Key_8
    assert translate_key(0x38) == CellRequest(1, 0)


def test_commands():
    assert translate_key(Qt.Key_Escape) is Command.QUIT
    assert translate_key(Qt.Key_Q) is Command.QUIT
    assert translate_key(Qt.Key_R) is Command.RESET


def test_unmapped_keys_ignored():
    assert translate_key(Qt.Key_0) is None
    assert translate_key(Qt.Key_A) is None


def test_no_cell_keys_for_other_sizes():
    assert translate_key(Qt.Key_5, dimension=4) is None
    assert translate_key(Qt.Key_R, dimension=4) is Command.RESET
