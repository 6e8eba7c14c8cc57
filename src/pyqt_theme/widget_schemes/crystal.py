"""
Crystal scheme: glassy boxes.

The upper half of a raised box is a bright sheen fading into the widget
color; the lower half stays at the widget color. Pressed boxes invert the
sheen.
"""

from pyqt_theme.core.color_utils import darker, lighter
from pyqt_theme.core.frame_types import FrameContext, FrameType, activated_color
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import fill_rect, oval_box, rect_outline, vertical_gradient


def _glass(ctx: FrameContext, top, bottom) -> None:
    half = ctx.h // 2
    vertical_gradient(ctx.painter, ctx.x, ctx.y, ctx.w, half,
                      activated_color(ctx, top), activated_color(ctx, ctx.color))
    vertical_gradient(ctx.painter, ctx.x, ctx.y + half, ctx.w, ctx.h - half,
                      activated_color(ctx, ctx.color), activated_color(ctx, bottom))


def _up_frame(ctx: FrameContext) -> None:
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.5)))
    rect_outline(ctx.painter, ctx.x + 1, ctx.y + 1, ctx.w - 2, ctx.h - 2,
                 activated_color(ctx, lighter(ctx.color, 0.5)))


def _up_box(ctx: FrameContext) -> None:
    _glass(ctx, lighter(ctx.color, 0.3), darker(ctx.color, 0.9))
    _up_frame(ctx)


def _down_frame(ctx: FrameContext) -> None:
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.4)))


def _down_box(ctx: FrameContext) -> None:
    _glass(ctx, darker(ctx.color, 0.75), lighter(ctx.color, 0.6))
    _down_frame(ctx)


def _thin_up_box(ctx: FrameContext) -> None:
    _glass(ctx, lighter(ctx.color, 0.5), ctx.color)
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.6)))


def _thin_down_box(ctx: FrameContext) -> None:
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.92)))
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.6)))


def _thin_frame(ctx: FrameContext) -> None:
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.6)))


def _round_up_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             border=activated_color(ctx, darker(ctx.color, 0.5)),
             gradient=(activated_color(ctx, lighter(ctx.color, 0.3)), activated_color(ctx, ctx.color)))


def _round_down_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             border=activated_color(ctx, darker(ctx.color, 0.4)),
             gradient=(activated_color(ctx, darker(ctx.color, 0.75)), activated_color(ctx, lighter(ctx.color, 0.6))))


def use_crystal_scheme(registry: StyleRegistry) -> None:
    registry.set_frame_type(FrameType.UP_BOX, _up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_BOX, _down_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.UP_FRAME, _up_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_FRAME, _down_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_BOX, _thin_up_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_BOX, _thin_down_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_FRAME, _thin_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_FRAME, _thin_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.ROUND_UP_BOX, _round_up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUND_DOWN_BOX, _round_down_box, 2, 2, 4, 4)
