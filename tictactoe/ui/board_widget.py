from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QRectF, QVariantAnimation
from PySide6.QtGui import QPainter, QFont

from ..game_logic import BOARD_SIZE, CELL_COUNT
from .rounded_rect import paint_rounded_rect, with_alpha
from . import theme as th


def cell_rects(width, height, gap=th.CELL_GAP):
    """
    (x, y, w, h) of each cell, row-major, for a square grid centred
    in a width x height area
    """
    side = min(width, height)
    ox, oy = (width - side) / 2, (height - side) / 2
    cell = (side - gap * (BOARD_SIZE + 1)) / BOARD_SIZE
    if cell <= 0:
        return []
    rects = []
    for i in range(CELL_COUNT):
        r, c = divmod(i, BOARD_SIZE)
        rects.append((ox + gap + c * (cell + gap),
                      oy + gap + r * (cell + gap), cell, cell))
    return rects


def cell_index_at(width, height, x, y, gap=th.CELL_GAP):
    """
    index of the cell under (x, y), None for gaps and outside the grid
    """
    for i, (cx, cy, cw, ch) in enumerate(cell_rects(width, height, gap)):
        if cx <= x < cx + cw and cy <= y < cy + ch:
            return i
    return None


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index on click

    def __init__(self, game_logic, theme=th.LIGHT, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.theme = theme
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(3 * 64 + 4 * th.CELL_GAP, 3 * 64 + 4 * th.CELL_GAP))
        self._accept_clicks = True      # toggle click handling
        # fade-in of the last placed mark
        self._fade_index = None
        self._fade_opacity = 1.0
        self._fade = QVariantAnimation(self)
        self._fade.setDuration(th.MARK_FADE_MS)
        self._fade.setStartValue(0.3)
        self._fade.setEndValue(1.0)
        self._fade.valueChanged.connect(self._on_fade_step)
        self._fade.finished.connect(self._on_fade_done)

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def fade_in_cell(self, index):
        """
        start the fade-in for a freshly placed mark
        """
        self._fade.stop()
        self._fade_index = index
        self._fade_opacity = 0.3
        self._fade.start()

    def clear_fade(self):
        self._fade.stop()
        self._fade_index = None
        self._fade_opacity = 1.0
        self.update()

    def _on_fade_step(self, value):
        self._fade_opacity = float(value)
        self.update()

    def _on_fade_done(self):
        self._fade_index = None
        self._fade_opacity = 1.0
        self.update()

    def paintEvent(self, event):
        """
        draw rounded cells, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.setRenderHint(QPainter.TextAntialiasing, True)
            status = self.game_logic.get_status()
            line = status.winning_line or ()
            rects = cell_rects(self.width(), self.height())
            if not rects:
                return
            font = QFont("monospace")
            font.setStyleHint(QFont.Monospace)
            font.setBold(True)
            font.setPixelSize(max(1, int(rects[0][2] * 0.45)))
            painter.setFont(font)
            for i, (x, y, w, h) in enumerate(rects):
                rect = QRectF(x, y, w, h)
                paint_rounded_rect(painter, rect, self.theme.cell, th.CELL_RADIUS)
                if i in line:
                    # tint on top of the neutral cell
                    tint = with_alpha(self.theme.mark_color(status.winner),
                                      th.HIGHLIGHT_ALPHA)
                    paint_rounded_rect(painter, rect, tint, th.CELL_RADIUS,
                                       shadow=False)
                sym = self.game_logic.cell(*divmod(i, BOARD_SIZE))
                if sym is None:
                    continue
                color = self.theme.mark_color(sym)
                if i == self._fade_index:
                    color = with_alpha(color, self._fade_opacity)
                painter.setPen(color)
                painter.drawText(rect, Qt.AlignCenter, sym.value)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.game_over:
            return
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        index = cell_index_at(self.width(), self.height(), pos.x(), pos.y())
        # gaps, margins and taken cells are dead space
        if index is None or not self.game_logic.is_cell_empty(index):
            return
        self.cell_clicked.emit(index)  # notify main window
