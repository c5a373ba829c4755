import logging

from ..game_logic import GameLogic, MoveOutcome, Phase
from ..ui.board_widget import BoardWidget
from .rounded_rect import paint_rounded_rect, with_alpha
from . import theme as th

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QLabel, QMenuBar,
    QMenu, QSizePolicy, QGraphicsOpacityEffect
)
from PySide6.QtGui import QAction, QFont, QPainter
from PySide6.QtCore import Qt, Slot, QPropertyAnimation, QRectF

log = logging.getLogger(__name__)


class CardWidget(QWidget):
    """
    surface-colored rounded container for the board
    """
    def __init__(self, theme, parent=None):
        super().__init__(parent)
        self.theme = theme
        self.setAttribute(Qt.WA_TranslucentBackground, True)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            # leave room for the shadow below
            rect = QRectF(self.rect()).adjusted(2, 1, -2, -4)
            paint_rounded_rect(painter, rect, self.theme.surface, th.CARD_RADIUS)
        finally:
            painter.end()


class RoundedButton(QPushButton):
    """
    flat push button painted as a rounded rect in one fill color
    """
    def __init__(self, text, fill, radius=th.BUTTON_RADIUS, parent=None):
        super().__init__(text, parent)
        self.fill = fill
        self.radius = radius
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumHeight(48)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            fill = self.fill
            if not self.isEnabled():
                fill = with_alpha(fill, 0.5)
            elif self.isDown():
                fill = with_alpha(fill, 0.8)
            rect = QRectF(self.rect()).adjusted(1, 1, -1, -4)
            paint_rounded_rect(painter, rect, fill, self.radius)
            painter.setPen(Qt.white)
            painter.setFont(self.font())
            painter.drawText(rect, Qt.AlignCenter, self.text())
        finally:
            painter.end()


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, theme=th.LIGHT):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.theme = theme
        self.game_logic = GameLogic()
        self.board_widget = BoardWidget(self.game_logic, theme=theme, parent=self)
        self._setup_ui()
        self._render_status()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet(f"QMainWindow {{ background-color: {self.theme.background}; }}")
        self.resize(420, 640)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(16, 16, 16, 16)

        self._create_menu_bar()            # top menu

        self.title_label = QLabel("Tic Tac Toe")
        f = QFont(); f.setPointSize(28); f.setBold(True)
        self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(f"color: {self.theme.text}; padding: 8px;")
        self.main_layout.addWidget(self.title_label)
        self.main_layout.addSpacing(16)

        # board sits inside a rounded card
        self.board_card = CardWidget(self.theme)
        card_layout = QVBoxLayout(self.board_card)
        card_layout.setContentsMargins(12, 12, 12, 12)
        card_layout.addWidget(self.board_widget)
        self.main_layout.addWidget(self.board_card, 1)
        self.main_layout.addSpacing(16)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + button
        self.main_layout.addWidget(self.controls_bottom_widget)
        self._create_reset_fade()

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + new game button
        self.controls_bottom_widget = QWidget()
        vl = QVBoxLayout(self.controls_bottom_widget)
        vl.setContentsMargins(0, 0, 0, 0)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(18); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        vl.addWidget(self.message_label)
        vl.addSpacing(12)
        self.reset_button = RoundedButton("New Game", self.theme.primary)
        f = QFont(); f.setPointSize(16); f.setBold(True); self.reset_button.setFont(f)
        self.reset_button.clicked.connect(self.reset_game)
        vl.addWidget(self.reset_button)

    def _create_reset_fade(self):
        # whole screen fades back in on new game
        self._screen_opacity = QGraphicsOpacityEffect(self.central_widget)
        self._screen_opacity.setOpacity(1.0)
        self.central_widget.setGraphicsEffect(self._screen_opacity)
        self._reset_fade = QPropertyAnimation(self._screen_opacity, b"opacity", self)
        self._reset_fade.setDuration(th.RESET_FADE_MS)
        self._reset_fade.setStartValue(0.0)
        self._reset_fade.setEndValue(1.0)

    def _update_message(self, text, color):
        # set message text + color
        self.message_label.setStyleSheet(f"color: {color.name()};")
        self.message_label.setText(text)

    def _render_status(self):
        """
        redraw everything from the engine's reported status
        """
        status = self.game_logic.get_status()
        if status.phase is Phase.WON:
            self._update_message(f"Winner: {status.winner.value}",
                                 self.theme.mark_color(status.winner))
        elif status.phase is Phase.DRAW:
            self._update_message("Draw game", self.theme.color("error"))
        else:
            self._update_message(f"Current turn: {status.current_player.value}",
                                 self.theme.color("text"))
        self.board_widget.set_accept_clicks(not status.is_terminal)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.game_logic.make_move(index)
        if not res.outcome.accepted:
            # occupied cell or finished game: ignore the click
            log.debug("click on cell %d ignored (%s)", res.index, res.outcome.value)
            return
        self.board_widget.fade_in_cell(res.index)
        if res.outcome is MoveOutcome.WIN:
            log.info("game over, %s wins", res.status.winner.value)
        elif res.outcome is MoveOutcome.DRAW:
            log.info("game over, draw")
        self._render_status()

    @Slot()
    def reset_game(self):
        # fresh board, X to move
        self.game_logic.reset_game()
        log.info("new game")
        self.board_widget.clear_fade()
        self._render_status()
        self._reset_fade.stop()
        self._reset_fade.start()
