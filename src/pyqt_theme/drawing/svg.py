"""
Scalable vector rendering of frame shapes.

Shapes are built as small SVG documents sized to the frame and rendered
with QSvgRenderer, so they stay crisp at any size or device pixel ratio.
"""

import logging
from typing import Optional, Tuple

from PyQt6.QtCore import QByteArray, QRectF
from PyQt6.QtGui import QPainter
from PyQt6.QtSvg import QSvgRenderer

from pyqt_theme.core.color_utils import to_hex

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


def _paint_attrs(
    fill: Optional[RGB],
    stroke: Optional[RGB],
    stroke_width: float,
    gradient: Optional[Tuple[RGB, RGB]],
) -> str:
    if gradient is not None:
        fill_attr = 'fill="url(#fill)"'
    elif fill is not None:
        fill_attr = f'fill="{to_hex(fill)}"'
    else:
        fill_attr = 'fill="none"'
    if stroke is None:
        return f'{fill_attr} stroke="none"'
    return f'{fill_attr} stroke="{to_hex(stroke)}" stroke-width="{stroke_width}"'


def _gradient_defs(gradient: Optional[Tuple[RGB, RGB]]) -> str:
    if gradient is None:
        return ""
    top, bottom = gradient
    return (
        '<defs><linearGradient id="fill" x1="0" y1="0" x2="0" y2="1">'
        f'<stop offset="0" stop-color="{to_hex(top)}"/>'
        f'<stop offset="1" stop-color="{to_hex(bottom)}"/>'
        '</linearGradient></defs>'
    )


def rounded_rect_svg(
    w: int,
    h: int,
    radius: float,
    fill: Optional[RGB] = None,
    stroke: Optional[RGB] = None,
    stroke_width: float = 1.0,
    gradient: Optional[Tuple[RGB, RGB]] = None,
) -> str:
    """SVG document holding one rounded rectangle that fills a w x h canvas."""
    inset = stroke_width / 2.0
    radius = max(0.0, min(radius, w / 2.0, h / 2.0))
    attrs = _paint_attrs(fill, stroke, stroke_width, gradient)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}">'
        f'{_gradient_defs(gradient)}'
        f'<rect x="{inset}" y="{inset}" width="{w - stroke_width}" height="{h - stroke_width}" '
        f'rx="{radius}" ry="{radius}" {attrs}/>'
        '</svg>'
    )


def oval_svg(
    w: int,
    h: int,
    fill: Optional[RGB] = None,
    stroke: Optional[RGB] = None,
    stroke_width: float = 1.0,
    gradient: Optional[Tuple[RGB, RGB]] = None,
) -> str:
    """SVG document holding one ellipse inscribed in a w x h canvas."""
    attrs = _paint_attrs(fill, stroke, stroke_width, gradient)
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" '
        f'viewBox="0 0 {w} {h}">'
        f'{_gradient_defs(gradient)}'
        f'<ellipse cx="{w / 2.0}" cy="{h / 2.0}" rx="{(w - stroke_width) / 2.0}" '
        f'ry="{(h - stroke_width) / 2.0}" {attrs}/>'
        '</svg>'
    )


def render_svg(painter: QPainter, svg: str, x: int, y: int, w: int, h: int) -> bool:
    """
    Render an SVG document into the given rectangle.

    Returns:
        bool: False if the document could not be parsed
    """
    if w <= 0 or h <= 0:
        return False
    renderer = QSvgRenderer(QByteArray(svg.encode("utf-8")))
    if not renderer.isValid():
        logger.warning(f"Invalid SVG document for frame {w}x{h}")
        return False
    renderer.render(painter, QRectF(x, y, w, h))
    return True
