"""Gleam scheme: soft vertical gradients with slightly rounded corners."""

from pyqt_theme.core.color_utils import darker, lighter
from pyqt_theme.core.frame_types import FrameContext, FrameType, activated_color
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import oval_box, rounded_box

RADIUS = 2.0


def _up_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.6)),
                gradient=(activated_color(ctx, lighter(ctx.color, 0.75)),
                          activated_color(ctx, darker(ctx.color, 0.92))))


def _down_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.5)),
                gradient=(activated_color(ctx, darker(ctx.color, 0.85)),
                          activated_color(ctx, lighter(ctx.color, 0.85))))


def _up_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.6)))


def _down_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS,
                border=activated_color(ctx, darker(ctx.color, 0.5)))


def _thin_up_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                border=activated_color(ctx, darker(ctx.color, 0.7)),
                gradient=(activated_color(ctx, lighter(ctx.color, 0.85)), activated_color(ctx, ctx.color)))


def _thin_down_box(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                border=activated_color(ctx, darker(ctx.color, 0.7)),
                gradient=(activated_color(ctx, darker(ctx.color, 0.9)), activated_color(ctx, ctx.color)))


def _thin_frame(ctx: FrameContext) -> None:
    rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, RADIUS / 2,
                border=activated_color(ctx, darker(ctx.color, 0.7)))


def _round_up_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             border=activated_color(ctx, darker(ctx.color, 0.6)),
             gradient=(activated_color(ctx, lighter(ctx.color, 0.75)),
                       activated_color(ctx, darker(ctx.color, 0.92))))


def _round_down_box(ctx: FrameContext) -> None:
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             border=activated_color(ctx, darker(ctx.color, 0.5)),
             gradient=(activated_color(ctx, darker(ctx.color, 0.85)),
                       activated_color(ctx, lighter(ctx.color, 0.85))))


def use_gleam_scheme(registry: StyleRegistry) -> None:
    registry.set_frame_type(FrameType.UP_BOX, _up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_BOX, _down_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.UP_FRAME, _up_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.DOWN_FRAME, _down_frame, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.THIN_UP_BOX, _thin_up_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_BOX, _thin_down_box, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_UP_FRAME, _thin_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.THIN_DOWN_FRAME, _thin_frame, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.ROUND_UP_BOX, _round_up_box, 2, 2, 4, 4)
    registry.set_frame_type(FrameType.ROUND_DOWN_BOX, _round_down_box, 2, 2, 4, 4)
