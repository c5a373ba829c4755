import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.ui import theme as th

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_palette(app: QApplication, theme: th.Theme):
    """
    Apply the theme's colors to the application palette.
    """
    palette = QPalette()
    background = theme.color("background")
    surface = theme.color("surface")
    text = theme.color("text")
    muted = QColor(text); muted.setAlpha(127)
    # Standard roles
    palette.setColor(QPalette.Window, background)
    palette.setColor(QPalette.WindowText, text)
    palette.setColor(QPalette.Base, surface)
    palette.setColor(QPalette.AlternateBase, background)
    palette.setColor(QPalette.ToolTipBase, surface)
    palette.setColor(QPalette.ToolTipText, text)
    palette.setColor(QPalette.Text, text)
    palette.setColor(QPalette.Button, theme.color("primary"))
    palette.setColor(QPalette.ButtonText, Qt.white)
    palette.setColor(QPalette.BrightText, theme.color("error"))
    palette.setColor(QPalette.Link, theme.color("primary"))
    palette.setColor(QPalette.Highlight, theme.color("primary"))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    palette.setColor(QPalette.PlaceholderText, muted)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, muted)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, muted)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, muted)
    app.setPalette(palette)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: WARNING)")
    parser.add_argument("--theme", default=th.LIGHT.name, choices=sorted(th.THEMES),
                        help="color theme (default: light)")
    # leave Qt's own options (e.g. -platform) to QApplication
    return parser.parse_known_args(argv)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run(argv=None):
    args, qt_args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    theme = th.THEMES[args.theme]

    app = QApplication([sys.argv[0]] + qt_args)
    app.setStyle('Fusion')
    apply_palette(app, theme)

    window = TicTacToeWindow(theme=theme)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
