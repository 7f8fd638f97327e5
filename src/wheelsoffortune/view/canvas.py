"""
Canvas
Primitive drawing operations used by the artwork renderer, and their
QPainter implementation.
"""
from __future__ import annotations

import math
from typing import Optional, Protocol

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen

from wheelsoffortune.config import MAX_ALPHA
from wheelsoffortune.model.palettes import hex_to_rgb
from wheelsoffortune.utils import clamp

Rgba = tuple[int, int, int, int]


def rgba(color: str | tuple[int, int, int], alpha: float = MAX_ALPHA) -> Rgba:
    """Build an RGBA tuple from a hex string or RGB tuple and an alpha in [0, 255]."""
    r, g, b = hex_to_rgb(color) if isinstance(color, str) else color
    return r, g, b, int(round(clamp(alpha, 0.0, MAX_ALPHA)))


class Canvas(Protocol):
    """Drawing surface. Coordinates are in pixels, y pointing down."""
    def clear(self, color: Rgba) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def rotate(self, angle_rad: float) -> None: ...
    def circle(
        self, x: float, y: float, diameter: float,
        fill: Optional[Rgba] = None, stroke: Optional[Rgba] = None, stroke_width: float = 1.0
    ) -> None: ...
    def line(self, x1: float, y1: float, x2: float, y2: float, stroke: Rgba, width: float) -> None: ...
    def quad_curve(
        self, x0: float, y0: float, cx: float, cy: float, x1: float, y1: float,
        stroke: Rgba, width: float
    ) -> None: ...


class QPainterCanvas:
    """Adapter exposing the Canvas primitives on top of a QPainter."""

    def __init__(self, painter: QPainter) -> None:
        self._painter = painter
        self._painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)

    @staticmethod
    def _color(value: Rgba) -> QColor:
        r, g, b, a = value
        return QColor(r, g, b, a)

    def _pen(self, stroke: Optional[Rgba], width: float) -> QPen:
        if stroke is None:
            return QPen(Qt.PenStyle.NoPen)
        pen = QPen(self._color(stroke))
        pen.setWidthF(float(width))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        return pen

    def clear(self, color: Rgba) -> None:
        device = self._painter.device()
        self._painter.save()
        self._painter.resetTransform()
        self._painter.fillRect(0, 0, device.width(), device.height(), self._color(color))
        self._painter.restore()

    def save(self) -> None:
        self._painter.save()

    def restore(self) -> None:
        self._painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self._painter.translate(float(dx), float(dy))

    def rotate(self, angle_rad: float) -> None:
        # QPainter rotates in degrees
        self._painter.rotate(math.degrees(angle_rad))

    def circle(
        self, x: float, y: float, diameter: float,
        fill: Optional[Rgba] = None, stroke: Optional[Rgba] = None, stroke_width: float = 1.0
    ) -> None:
        radius = max(0.0, float(diameter)) / 2
        self._painter.setPen(self._pen(stroke, stroke_width))
        self._painter.setBrush(QBrush(self._color(fill)) if fill is not None else Qt.BrushStyle.NoBrush)
        self._painter.drawEllipse(QPointF(float(x), float(y)), radius, radius)

    def line(self, x1: float, y1: float, x2: float, y2: float, stroke: Rgba, width: float) -> None:
        self._painter.setPen(self._pen(stroke, width))
        self._painter.drawLine(QPointF(float(x1), float(y1)), QPointF(float(x2), float(y2)))

    def quad_curve(
        self, x0: float, y0: float, cx: float, cy: float, x1: float, y1: float,
        stroke: Rgba, width: float
    ) -> None:
        path = QPainterPath(QPointF(float(x0), float(y0)))
        path.quadTo(QPointF(float(cx), float(cy)), QPointF(float(x1), float(y1)))
        self._painter.setPen(self._pen(stroke, width))
        self._painter.setBrush(Qt.BrushStyle.NoBrush)
        self._painter.drawPath(path)
