"""
Painter primitives for frame drawers.

Raster helpers (lines, bevels, gradients) and SVG helpers for shapes that
must scale cleanly.
"""

from .primitives import (
    bevel,
    fill_rect,
    hline,
    nested_bevels,
    oval_box,
    rect_outline,
    rounded_box,
    vertical_gradient,
    vline,
)
from .svg import oval_svg, render_svg, rounded_rect_svg

__all__ = [
    "bevel",
    "fill_rect",
    "hline",
    "nested_bevels",
    "oval_box",
    "rect_outline",
    "rounded_box",
    "vertical_gradient",
    "vline",
    "oval_svg",
    "render_svg",
    "rounded_rect_svg",
]
