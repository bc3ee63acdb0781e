from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPen

from ganttlab.styles import Color, LineType, StyleDef

# Concrete stroke colors for the core's color tags. "blue" is the pale
# neutral used for idle VM time.
_STROKES: dict[Color, QColor] = {
    Color.RED: QColor("#ff0000"),
    Color.BLUE: QColor("#e5e5e5"),  # grey90
    Color.GREEN: QColor("#00c000"),
    Color.ORANGE: QColor("#ffa500"),
    Color.BROWN: QColor("#a52a2a"),
    Color.DARK_GREY: QColor("#1a1a1a"),  # grey10
}

_PEN_STYLES: dict[LineType, Qt.PenStyle] = {
    LineType.SOLID: Qt.PenStyle.SolidLine,
    LineType.DOTTED: Qt.PenStyle.DotLine,
}

FILL_OPACITY = 0.55
BORDER_COLOR = "#000000"


def stroke_color(color: Color) -> QColor:
    return QColor(_STROKES[color])


def fill_color(color: Color) -> QColor:
    c = stroke_color(color)
    c.setAlphaF(FILL_OPACITY)
    return c


def style_pen(style: StyleDef) -> QPen:
    """Black bar border carrying the style's dash pattern; color lives in the fill."""

    pen = QPen(QColor(BORDER_COLOR))
    pen.setStyle(_PEN_STYLES[style.line_type])
    pen.setWidthF(1.5 if style.line_type == LineType.DOTTED else 1.0)
    return pen
