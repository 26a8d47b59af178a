import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .config import RenderConfig
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(Qt.black)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Black window around the board, dark menus and status line.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Keypad tic-tac-toe")
    parser.add_argument("--fps", type=int, default=None,
                        help="repaint rate (default 8, env TICTACTOE_FPS)")
    parser.add_argument("--assets", default=None,
                        help="directory holding x.png and o.png (env TICTACTOE_ASSET_DIR)")
    parser.add_argument("--scale", type=int, default=None,
                        help="initial window size multiplier (env TICTACTOE_SCALE)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log every move")
    return parser.parse_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT)
    try:
        config = RenderConfig.from_env().with_overrides(
            target_frame_rate=args.fps, asset_dir=args.assets, scale=args.scale)
    except ValueError as exc:
        logging.getLogger(__name__).error("bad configuration: %s", exc)
        return 2

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(config)
    window.show()
    return app.exec()
