"""QPainter implementation of the renderer's DrawingSurface."""
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen


class PainterSurface:
    """Wraps an active QPainter whose transform maps surface units to the device."""

    TEXT_BOX = 400.0  # width of the box text is centred in

    def __init__(self, painter: QPainter, width: float, height: float) -> None:
        self.painter = painter
        self.width = width
        self.height = height
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

    def clear(self, color: str) -> None:
        self.painter.fillRect(QRectF(0.0, 0.0, self.width, self.height), QColor(color))

    def line(self, x1, y1, x2, y2, color, width, dashed=False) -> None:
        pen = QPen(QColor(color), width)
        if dashed:
            pen.setStyle(Qt.PenStyle.CustomDashLine)
            pen.setDashPattern([5.0 / max(width, 1e-6), 5.0 / max(width, 1e-6)])
        self.painter.setPen(pen)
        self.painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

    def circle(self, x, y, radius, fill, outline=None, outline_width=0.0, opacity=1.0) -> None:
        p = self.painter
        p.save()
        p.setOpacity(opacity)
        p.setBrush(QBrush(QColor(fill)))
        if outline and outline_width > 0:
            p.setPen(QPen(QColor(outline), outline_width))
        else:
            p.setPen(Qt.PenStyle.NoPen)
        p.drawEllipse(QPointF(x, y), radius, radius)
        p.restore()

    def text(self, x, y, text, color, size, bold=False) -> None:
        p = self.painter
        font = QFont("sans-serif")
        font.setPixelSize(max(1, int(round(size))))
        font.setBold(bold)
        p.setFont(font)
        p.setPen(QColor(color))
        box = QRectF(x - self.TEXT_BOX / 2.0, y - size, self.TEXT_BOX, 2.0 * size)
        p.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
