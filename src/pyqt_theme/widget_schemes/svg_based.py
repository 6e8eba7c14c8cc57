"""
SVG-based scheme.

Draws every frame as a small vector document rendered by QSvgRenderer, so
rounded and oval shapes stay smooth at any size and device pixel ratio.
Besides the standard frames this scheme also takes over the rounded and
oval frame types: ROUNDED_FRAME, ROUNDED_BOX, RFLAT_BOX, OVAL_BOX,
OVAL_FRAME and OFLAT_BOX.
"""

from pyqt_theme.core.color_utils import darker, lighter
from pyqt_theme.core.frame_types import FrameContext, FrameType, activated_color
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import oval_svg, render_svg, rounded_rect_svg

BOX_RADIUS = 4.0
ROUNDED_RADIUS_RATIO = 0.4


def _rounded(ctx: FrameContext, radius: float, fill=None, stroke=None, gradient=None) -> None:
    svg = rounded_rect_svg(ctx.w, ctx.h, radius, fill=fill, stroke=stroke, gradient=gradient)
    render_svg(ctx.painter, svg, ctx.x, ctx.y, ctx.w, ctx.h)


def _oval(ctx: FrameContext, fill=None, stroke=None, gradient=None) -> None:
    svg = oval_svg(ctx.w, ctx.h, fill=fill, stroke=stroke, gradient=gradient)
    render_svg(ctx.painter, svg, ctx.x, ctx.y, ctx.w, ctx.h)


def _up_box(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS,
             stroke=activated_color(ctx, darker(ctx.color, 0.65)),
             gradient=(activated_color(ctx, lighter(ctx.color, 0.8)), activated_color(ctx, ctx.color)))


def _down_box(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS,
             stroke=activated_color(ctx, darker(ctx.color, 0.55)),
             gradient=(activated_color(ctx, darker(ctx.color, 0.85)), activated_color(ctx, ctx.color)))


def _up_frame(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS, stroke=activated_color(ctx, darker(ctx.color, 0.65)))


def _down_frame(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS, stroke=activated_color(ctx, darker(ctx.color, 0.55)))


def _thin_up_box(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS / 2,
             fill=activated_color(ctx, ctx.color), stroke=activated_color(ctx, darker(ctx.color, 0.75)))


def _thin_down_box(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS / 2,
             fill=activated_color(ctx, darker(ctx.color, 0.93)), stroke=activated_color(ctx, darker(ctx.color, 0.65)))


def _thin_up_frame(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS / 2, stroke=activated_color(ctx, darker(ctx.color, 0.75)))


def _thin_down_frame(ctx: FrameContext) -> None:
    _rounded(ctx, BOX_RADIUS / 2, stroke=activated_color(ctx, darker(ctx.color, 0.65)))


def _round_up_box(ctx: FrameContext) -> None:
    _oval(ctx, stroke=activated_color(ctx, darker(ctx.color, 0.65)),
          gradient=(activated_color(ctx, lighter(ctx.color, 0.8)), activated_color(ctx, ctx.color)))


def _round_down_box(ctx: FrameContext) -> None:
    _oval(ctx, stroke=activated_color(ctx, darker(ctx.color, 0.55)),
          gradient=(activated_color(ctx, darker(ctx.color, 0.85)), activated_color(ctx, ctx.color)))


def _rounded_radius(ctx: FrameContext) -> float:
    return min(ctx.w, ctx.h) * ROUNDED_RADIUS_RATIO


def _rounded_frame(ctx: FrameContext) -> None:
    _rounded(ctx, _rounded_radius(ctx), stroke=activated_color(ctx, darker(ctx.color, 0.6)))


def _rounded_box(ctx: FrameContext) -> None:
    _rounded(ctx, _rounded_radius(ctx),
             fill=activated_color(ctx, ctx.color), stroke=activated_color(ctx, darker(ctx.color, 0.6)))


def _rflat_box(ctx: FrameContext) -> None:
    _rounded(ctx, _rounded_radius(ctx), fill=activated_color(ctx, ctx.color))


def _oval_box(ctx: FrameContext) -> None:
    _oval(ctx, fill=activated_color(ctx, ctx.color), stroke=activated_color(ctx, darker(ctx.color, 0.6)))


def _oval_frame(ctx: FrameContext) -> None:
    _oval(ctx, stroke=activated_color(ctx, darker(ctx.color, 0.6)))


def _oflat_box(ctx: FrameContext) -> None:
    _oval(ctx, fill=activated_color(ctx, ctx.color))


def use_svg_based_scheme(registry: StyleRegistry) -> None:
    registry.set_frame_type(FrameType.UP_BOX, _up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_BOX, _down_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.UP_FRAME, _up_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_FRAME, _down_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.THIN_UP_BOX, _thin_up_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_BOX, _thin_down_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_FRAME, _thin_up_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_FRAME, _thin_down_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.ROUND_UP_BOX, _round_up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUND_DOWN_BOX, _round_down_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUNDED_FRAME, _rounded_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUNDED_BOX, _rounded_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.RFLAT_BOX, _rflat_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.OVAL_BOX, _oval_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.OVAL_FRAME, _oval_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.OFLAT_BOX, _oflat_box, 2, 2, 4, 4)
