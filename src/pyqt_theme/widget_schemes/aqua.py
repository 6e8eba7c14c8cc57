"""
Aqua scheme, after current macOS controls.

Generously rounded buttons with a faint top-lit gradient; pressed buttons
darken uniformly instead of inverting the gradient.
"""

from pyqt_theme.core.color_utils import darker, lighter
from pyqt_theme.core.frame_types import FrameContext, FrameType, activated_color
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import hline, oval_box, rounded_box

RADIUS = 5.0


def _up_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.75)),
                gradient=(activated_color(ctx, lighter(ctx.color, 0.9)), activated_color(ctx, ctx.color)))


def _down_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                fill=activated_color(ctx, darker(ctx.color, 0.85)),
                border=activated_color(ctx, darker(ctx.color, 0.65)))


def _up_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.75)))


def _down_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.65)))


def _thin_up_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                fill=activated_color(ctx, ctx.color),
                border=activated_color(ctx, darker(ctx.color, 0.8)))


def _thin_down_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                fill=activated_color(ctx, ctx.color),
                border=activated_color(ctx, darker(ctx.color, 0.7)))
    # inset shadow along the top edge
    if ctx.h > 3:
        hline(ctx.painter, ctx.x + 2, ctx.y + 1, ctx.x + ctx.w - 3,
              activated_color(ctx, darker(ctx.color, 0.9)))


def _thin_up_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                border=activated_color(ctx, darker(ctx.color, 0.8)))


def _thin_down_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                border=activated_color(ctx, darker(ctx.color, 0.7)))


def _round_up_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             border=activated_color(ctx, darker(ctx.color, 0.75)),
             gradient=(activated_color(ctx, lighter(ctx.color, 0.9)), activated_color(ctx, ctx.color)))


def _round_down_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             fill=activated_color(ctx, darker(ctx.color, 0.85)),
             border=activated_color(ctx, darker(ctx.color, 0.65)))


def use_aqua_scheme(registry: StyleRegistry) -> None:
    registry.set_frame_type(FrameType.UP_BOX, _up_box, 3, 2, 6, 4)
    registry.set_frame_type(FrameType.DOWN_BOX, _down_box, 3, 2, 6, 4)
    registry.set_frame_type(FrameType.UP_FRAME, _up_frame, 3, 2, 6, 4)
    registry.set_frame_type(FrameType.DOWN_FRAME, _down_frame, 3, 2, 6, 4)
    registry.set_frame_type(FrameType.THIN_UP_BOX, _thin_up_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_BOX, _thin_down_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_FRAME, _thin_up_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_FRAME, _thin_down_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.ROUND_UP_BOX, _round_up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUND_DOWN_BOX, _round_down_box, 2, 2, 4, 4)
