"""
Rounded rectangle painting shared by the board cells, the board card and
the New Game button.

Qt has no drawable with a built-in shadow layer, so the shadow is faked by
stacking a few translucent rounded rects under the fill, offset downwards.
"""

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter

SHADOW_ALPHA = 40     # total alpha of the shadow, 0-255
SHADOW_OFFSET_Y = 2
SHADOW_SPREAD = 3     # stacked layers, 1px wider each


def with_alpha(color, factor: float) -> QColor:
    """
    Return a copy of ``color`` with its alpha multiplied by ``factor``.

    Args:
        color: QColor or anything QColor accepts (e.g. "#2563EB").
        factor: 0.0 (transparent) to 1.0 (unchanged).
    """
    c = QColor(color)
    c.setAlpha(int(c.alpha() * max(0.0, min(factor, 1.0))))
    return c


def paint_rounded_rect(painter: QPainter, rect: QRectF, fill, radius: float,
                       shadow: bool = True):
    """
    Fill ``rect`` as an anti-aliased rounded rectangle with an optional soft
    drop shadow. The painter's pen and brush are restored afterwards.
    """
    painter.save()
    try:
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        if shadow:
            layer_alpha = SHADOW_ALPHA // SHADOW_SPREAD
            for i in range(SHADOW_SPREAD, 0, -1):
                painter.setBrush(QColor(0, 0, 0, layer_alpha))
                r = QRectF(rect).adjusted(-i / 2, -i / 2 + SHADOW_OFFSET_Y,
                                          i / 2, i / 2 + SHADOW_OFFSET_Y)
                painter.drawRoundedRect(r, radius + i / 2, radius + i / 2)
        painter.setBrush(QColor(fill))
        painter.drawRoundedRect(QRectF(rect), radius, radius)
    finally:
        painter.restore()
