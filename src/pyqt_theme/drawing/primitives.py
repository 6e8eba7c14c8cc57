"""
QPainter helpers shared by frame drawers.

Coordinates follow the frame convention: (x, y, w, h) is the full frame
rectangle and lines include both end points. All colors are RGB tuples.
"""

from typing import Optional, Sequence, Tuple

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QLinearGradient, QPainter, QPen

RGB = Tuple[int, int, int]


def _pen(color: RGB, width: float = 1.0) -> QPen:
    pen = QPen(QColor(*color))
    pen.setWidthF(width)
    return pen


def fill_rect(painter: QPainter, x: int, y: int, w: int, h: int, color: RGB) -> None:
    if w <= 0 or h <= 0:
        return
    painter.fillRect(x, y, w, h, QColor(*color))


def hline(painter: QPainter, x1: int, y: int, x2: int, color: RGB) -> None:
    painter.setPen(_pen(color))
    painter.drawLine(x1, y, x2, y)


def vline(painter: QPainter, x: int, y1: int, y2: int, color: RGB) -> None:
    painter.setPen(_pen(color))
    painter.drawLine(x, y1, x, y2)


def rect_outline(painter: QPainter, x: int, y: int, w: int, h: int, color: RGB) -> None:
    """One pixel outline lying inside the rectangle."""
    if w <= 0 or h <= 0:
        return
    painter.save()
    painter.setPen(_pen(color))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawRect(x, y, w - 1, h - 1)
    painter.restore()


def bevel(
    painter: QPainter,
    x: int,
    y: int,
    w: int,
    h: int,
    top_left: RGB,
    bottom_right: RGB,
) -> None:
    """One pixel 3D edge: top and left in one color, bottom and right in another."""
    if w <= 0 or h <= 0:
        return
    hline(painter, x, y, x + w - 1, top_left)
    vline(painter, x, y, y + h - 1, top_left)
    hline(painter, x, y + h - 1, x + w - 1, bottom_right)
    vline(painter, x + w - 1, y, y + h - 1, bottom_right)


def nested_bevels(
    painter: QPainter,
    x: int,
    y: int,
    w: int,
    h: int,
    rings: Sequence[Tuple[RGB, RGB]],
) -> None:
    """Draw concentric bevels from the outside in."""
    for top_left, bottom_right in rings:
        bevel(painter, x, y, w, h, top_left, bottom_right)
        x, y, w, h = x + 1, y + 1, w - 2, h - 2


def _gradient_brush(y: int, h: int, stops: Sequence[Tuple[float, RGB]]) -> QBrush:
    gradient = QLinearGradient(0, y, 0, y + h)
    for position, color in stops:
        gradient.setColorAt(position, QColor(*color))
    return QBrush(gradient)


def vertical_gradient(
    painter: QPainter,
    x: int,
    y: int,
    w: int,
    h: int,
    top: RGB,
    bottom: RGB,
    middle: Optional[RGB] = None,
) -> None:
    """Fill a rectangle with a top-to-bottom gradient."""
    if w <= 0 or h <= 0:
        return
    stops = [(0.0, top), (1.0, bottom)]
    if middle is not None:
        stops.insert(1, (0.5, middle))
    painter.fillRect(x, y, w, h, _gradient_brush(y, h, stops))


def rounded_box(
    painter: QPainter,
    x: int,
    y: int,
    w: int,
    h: int,
    radius: float,
    fill: Optional[RGB] = None,
    border: Optional[RGB] = None,
    gradient: Optional[Tuple[RGB, RGB]] = None,
) -> None:
    """
    Antialiased rounded rectangle.

    Args:
        radius: Corner radius in pixels, clamped to half the short side
        fill: Solid fill color, ignored when gradient is given
        border: One pixel outline color, or None for no outline
        gradient: (top, bottom) fill colors
    """
    if w <= 0 or h <= 0:
        return
    radius = max(0.0, min(radius, w / 2.0, h / 2.0))
    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    if gradient is not None:
        painter.setBrush(_gradient_brush(y, h, [(0.0, gradient[0]), (1.0, gradient[1])]))
    elif fill is not None:
        painter.setBrush(QColor(*fill))
    else:
        painter.setBrush(Qt.BrushStyle.NoBrush)
    if border is not None:
        painter.setPen(_pen(border))
    else:
        painter.setPen(Qt.PenStyle.NoPen)
    painter.drawRoundedRect(QRectF(x + 0.5, y + 0.5, w - 1, h - 1), radius, radius)
    painter.restore()


def oval_box(
    painter: QPainter,
    x: int,
    y: int,
    w: int,
    h: int,
    fill: Optional[RGB] = None,
    border: Optional[RGB] = None,
    gradient: Optional[Tuple[RGB, RGB]] = None,
) -> None:
    """Antialiased ellipse inscribed in the rectangle."""
    if w <= 0 or h <= 0:
        return
    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
    if gradient is not None:
        painter.setBrush(_gradient_brush(y, h, [(0.0, gradient[0]), (1.0, gradient[1])]))
    elif fill is not None:
        painter.setBrush(QColor(*fill))
    else:
        painter.setBrush(Qt.BrushStyle.NoBrush)
    if border is not None:
        painter.setPen(_pen(border))
    else:
        painter.setPen(Qt.PenStyle.NoPen)
    painter.drawEllipse(QRectF(x + 0.5, y + 0.5, w - 1, h - 1))
    painter.restore()
