from dataclasses import dataclass

from PySide6.QtGui import QColor

# -----------------------------------------------------------------------------
# OCEAN PROFESSIONAL COLORS
# -----------------------------------------------------------------------------

PRIMARY = "#2563EB"     # X marks, buttons, winner text
SECONDARY = "#F59E0B"   # O marks
ERROR = "#EF4444"       # draw text
BACKGROUND = "#f9fafb"
SURFACE = "#ffffff"
TEXT = "#111827"
CELL = "#e5e7eb"

# -----------------------------------------------------------------------------
# GEOMETRY (logical pixels)
# -----------------------------------------------------------------------------

CARD_RADIUS = 12
CELL_RADIUS = 10
BUTTON_RADIUS = 14
CELL_GAP = 6
HIGHLIGHT_ALPHA = 0.15
MARK_FADE_MS = 150
RESET_FADE_MS = 180


@dataclass(frozen=True)
class Theme:
    """
    named color set used by the window and board painting
    """
    name: str
    primary: str = PRIMARY
    secondary: str = SECONDARY
    error: str = ERROR
    background: str = BACKGROUND
    surface: str = SURFACE
    text: str = TEXT
    cell: str = CELL

    def color(self, role: str) -> QColor:
        return QColor(getattr(self, role))

    def mark_color(self, mark) -> QColor:
        # X gets primary, O gets secondary
        return self.color("primary" if mark == "X" else "secondary")


LIGHT = Theme("light")
DARK = Theme(
    "dark",
    background="#111827",
    surface="#1f2937",
    text="#f9fafb",
    cell="#374151",
)

THEMES = {t.name: t for t in (LIGHT, DARK)}
