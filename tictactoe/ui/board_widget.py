from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF, QTimer
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import Sign

BACKGROUND_COLOR = QColor(Qt.black)
CELL_COLOR = QColor(Qt.white)
X_COLOR = QColor("#2a82da")
O_COLOR = QColor("#da2a2a")
STRIKE_COLOR = QColor("#22aa22")


class BoardWidget(QWidget):
    """
    draws the board from the game state every frame tick
    never touches the state, only reads it
    """
    cell_clicked = Signal(int, int)  # emits col, row on click

    def __init__(self, game_state, config, markers=None, parent=None):
        super().__init__(parent)
        self.game_state = game_state  # reference to game state
        self.config = config
        self.markers = markers or {}   # Sign -> QImage
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(config.width, config.height))
        # repaint at the target frame rate, the game needs very few
        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(max(1, 1000 // config.target_frame_rate))
        self.frame_timer.timeout.connect(self.update)
        self.frame_timer.start()

    def sizeHint(self):
        return QSize(self.config.width * self.config.scale,
                     self.config.height * self.config.scale)

    def heightForWidth(self, width):
        # keep the board's aspect
        return int(width * self.config.height / self.config.width)

    def hasHeightForWidth(self):
        return True

    def _transform(self):
        """
        scale + offset that fit the logical board centred in the widget
        """
        cfg = self.config
        scale = min(self.width() / cfg.width, self.height() / cfg.height)
        ox = (self.width() - cfg.width * scale) / 2
        oy = (self.height() - cfg.height * scale) / 2
        return scale, ox, oy

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and the strike line when someone won
        """
        cfg = self.config
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.setRenderHint(QPainter.SmoothPixmapTransform, True)
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            scale, ox, oy = self._transform()
            painter.translate(ox, oy)
            painter.scale(scale, scale)

            for (col, row), sign in self.game_state.board.cells():
                x, y = cfg.cell_origin(col, row)
                rect = QRectF(x, y, cfg.sprite_width, cfg.sprite_height)
                painter.fillRect(rect, CELL_COLOR)
                if sign is Sign.EMPTY:
                    continue
                image = self.markers.get(sign)
                if image is not None:
                    painter.drawImage(rect, image)
                else:
                    self._draw_mark(painter, sign, rect)

            strike = self.game_state.strike
            if strike:
                pen = QPen(STRIKE_COLOR, max(cfg.line_thickness, 2))
                pen.setCapStyle(Qt.RoundCap)
                painter.setPen(pen)
                start = QPointF(*cfg.cell_center(*strike[0]))
                end = QPointF(*cfg.cell_center(*strike[-1]))
                painter.drawLine(start, end)
        finally:
            painter.end()

    def _draw_mark(self, painter, sign, rect):
        # stand-in when no marker image was loaded
        c = rect.center()
        rad = min(rect.width(), rect.height()) / 2 * 0.7
        if sign is Sign.X:
            painter.setPen(QPen(X_COLOR, 3))
            painter.drawLine(QPointF(c.x()-rad, c.y()-rad), QPointF(c.x()+rad, c.y()+rad))
            painter.drawLine(QPointF(c.x()+rad, c.y()-rad), QPointF(c.x()-rad, c.y()+rad))
        else:
            painter.setPen(QPen(O_COLOR, 3))
            painter.drawEllipse(c, rad, rad)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map widget coords back to a board cell and emit
        """
        scale, ox, oy = self._transform()
        if scale <= 0:
            return
        x = (event.position().x() - ox) / scale
        y = (event.position().y() - oy) / scale
        cell = self.config.cell_at(x, y)
        if cell is not None:
            self.cell_clicked.emit(*cell)  # notify main window
