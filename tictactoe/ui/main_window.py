import logging

from ..game_logic import GameState, MoveResult
from ..ui.assets import load_markers
from ..ui.board_widget import BoardWidget
from ..ui.keymap import CellRequest, Command, translate_key

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: owns the game state and turns input into moves
    """
    def __init__(self, config):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.config = config
        self.game_state = GameState(config.board_dim)
        markers = load_markers(config.asset_dir)
        self.board_widget = BoardWidget(self.game_state, config, markers, parent=self)
        self._setup_ui()
        self._show_turn()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.config.title)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(4, 4, 4, 4)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.main_layout.addWidget(self.message_label)
        # keys go to the window, not the board widget
        self.setFocusPolicy(Qt.StrongFocus)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut(QKeySequence("Ctrl+N"))
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _update_message(self, text, is_error=False, is_success=False):
        # set message text + style
        style = ""
        if is_error:     style = "color: #da2a2a; font-weight: bold;"
        elif is_success: style = "color: #22aa22; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _show_turn(self):
        self._update_message(f"player {self.game_state.turn.value}'s turn")

    def keyPressEvent(self, event):
        """
        keypad digits play cells, R resets, Esc/Q quits
        """
        request = translate_key(event.key(), self.game_state.dimension)
        if request is None:
            super().keyPressEvent(event)
            return
        if request is Command.QUIT:
            self.close()
        elif request is Command.RESET:
            self.reset_game()
        elif isinstance(request, CellRequest):
            self.submit_move(request.col, request.row)
        event.accept()

    @Slot(int, int)
    def _on_cell_clicked(self, col, row):
        self.submit_move(col, row)

    def submit_move(self, col, row):
        """
        hand a move to the game state and report what happened
        """
        if self.game_state.is_over():
            self._update_message("game over, press R for a new game", is_error=True)
            return MoveResult.REJECTED
        mover = self.game_state.turn
        res = self.game_state.attempt_move(col, row)
        if res is MoveResult.REJECTED:
            self._update_message("cell taken", is_error=True)
        elif res is MoveResult.WIN:
            self._update_message(f"{mover.value} won! Game Over!", is_success=True)
        elif res is MoveResult.DRAW:
            self._update_message("No more cells left! It's a draw!", is_success=True)
        else:
            self._show_turn()
        self.board_widget.update()
        return res

    @Slot()
    def reset_game(self):
        self.game_state.reset()
        logger.info("new game")
        self._show_turn()
        self.board_widget.update()
