"""
Adapts a QPainter to the drawing interface the scene renders into.
"""
from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen

from ..vector2 import Vector2

POINT_COLOR = QColor("#ff5555")
CURVE_COLOR = QColor(255, 255, 255)


class PainterSurface:
    """Draws discs and line segments with an already active QPainter."""

    def __init__(self, painter: QPainter, point_color: QColor = POINT_COLOR,
                 curve_color: QColor = CURVE_COLOR, line_width: float = 2):
        self.painter = painter
        self.point_color = point_color
        self.curve_pen = QPen(curve_color, line_width)

    def fill_circle(self, top_left: Vector2, radius: float) -> None:
        self.painter.setPen(Qt.PenStyle.NoPen)
        self.painter.setBrush(self.point_color)
        self.painter.drawEllipse(QRectF(top_left.x, top_left.y, radius * 2, radius * 2))

    def draw_line(self, start: Vector2, end: Vector2) -> None:
        self.painter.setPen(self.curve_pen)
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawLine(QLineF(QPointF(start.x, start.y), QPointF(end.x, end.y)))
