"""Fluent scheme, after Windows 10: square, flat, one pixel borders."""

from pyqt_theme.core.color_utils import darker, lighter
from pyqt_theme.core.frame_types import FrameContext, FrameType, activated_color
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import fill_rect, oval_box, rect_outline


def _up_box(ctx: FrameContext) -> None:
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.95)))
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.8)))


def _down_box(ctx: FrameContext) -> None:
    # Pressed buttons lose their border entirely
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.8)))


def _up_frame(ctx: FrameContext) -> None:
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.8)))


def _down_frame(ctx: FrameContext) -> None:
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.6)))


def _thin_up_box(ctx: FrameContext) -> None:
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, lighter(ctx.color, 0.9)))


def _thin_down_box(ctx: FrameContext) -> None:
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, ctx.color))
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.7)))


def _thin_frame(ctx: FrameContext) -> None:
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, darker(ctx.color, 0.85)))


def _round_up_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             fill=activated_color(ctx, ctx.color), border=activated_color(ctx, darker(ctx.color, 0.5)))


def _round_down_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             fill=activated_color(ctx, darker(ctx.color, 0.8)), border=activated_color(ctx, darker(ctx.color, 0.5)))


def use_fluent_scheme(registry: StyleRegistry) -> None:
    registry.set_frame_type(FrameType.UP_BOX, _up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_BOX, _down_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.UP_FRAME, _up_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.DOWN_FRAME, _down_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_BOX, _thin_up_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_BOX, _thin_down_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_FRAME, _thin_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_FRAME, _thin_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.ROUND_UP_BOX, _round_up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUND_DOWN_BOX, _round_down_box, 2, 2, 4, 4)
