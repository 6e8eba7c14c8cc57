"""
Classic Mac OS X (Aqua) widget theme.

Pill-shaped, strongly rounded buttons with white-to-grey gradients and a
blue "gel" default button.
"""

from pyqt_theme.core.frame_types import FrameContext, FrameSpec
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import oval_box
from pyqt_theme.widget_themes import frames
from pyqt_theme.widget_themes.base import (
    FrameStyle,
    ThemeColors,
    activated_color,
    build_frame_table,
    register_frames,
)

AQUA_CLASSIC_COLORS = ThemeColors(
    background=(0xED, 0xED, 0xED),
    background2=(0xFF, 0xFF, 0xFF),
    foreground=(0x00, 0x00, 0x00),
    inactive=(0x8A, 0x8A, 0x8A),
    selection=(0x3D, 0x80, 0xDF),
    tooltip=(0xFF, 0xFF, 0xC7),
    tooltip_text=(0x00, 0x00, 0x00),
)

AQUA_CLASSIC_STYLE = FrameStyle(
    radius=6.0,
    light=(0xFF, 0xFF, 0xFF),
    dark2=(0xB4, 0xB4, 0xB4),
    dark=(0x80, 0x80, 0x80),
    border=(0x9A, 0x9A, 0x9A),
    up=((0xFF, 0xFF, 0xFF), (0xD8, 0xD8, 0xD8)),
    hover=((0xE6, 0xF0, 0xFA), (0xB3, 0xD4, 0xF5)),
    hover_border=(0x5A, 0x88, 0xC4),
    depressed=((0x95, 0xBF, 0xF0), (0x4A, 0x8C, 0xE0)),
    depressed_border=(0x3A, 0x6A, 0xB0),
    default=((0xA8, 0xCF, 0xF8), (0x4D, 0x9A, 0xF0)),
    default_border=(0x35, 0x6C, 0xB8),
    input_fill=(0xFF, 0xFF, 0xFF),
    input_border=(0x8E, 0x8E, 0x8E),
    highlight=(0xFF, 0xFF, 0xFF),
    tab_border=(0xA5, 0xA5, 0xA5),
)

_RADIO_GRADIENT = ((0xFF, 0xFF, 0xFF), (0xDC, 0xDC, 0xDC))


def _radio_round_down_box(ctx: FrameContext) -> None:
    top, bottom = _RADIO_GRADIENT
    oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
             border=activated_color(ctx, AQUA_CLASSIC_STYLE.input_border),
             gradient=(activated_color(ctx, top), activated_color(ctx, bottom)))


AQUA_CLASSIC_FRAMES = {
    **build_frame_table(AQUA_CLASSIC_STYLE),
    frames.OS_RADIO_ROUND_DOWN_BOX: FrameSpec(_radio_round_down_box, 3, 3, 6, 6),
}


def use_aqua_classic_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, AQUA_CLASSIC_FRAMES)


def use_aqua_classic_colors(registry: StyleRegistry) -> None:
    AQUA_CLASSIC_COLORS.apply(registry)


def use_aqua_classic_theme(registry: StyleRegistry) -> None:
    use_aqua_classic_scheme(registry)
    use_aqua_classic_colors(registry)
    registry.visible_focus = False
    registry.scrollbar_size = 15
