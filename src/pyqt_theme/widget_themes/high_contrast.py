"""
High contrast widget theme.

White outlines on black, yellow hover and cyan selection. Every text color
pair meets the WCAG AAA ratio of 7:1.
"""

from pyqt_theme.core.frame_types import FrameContext, FrameSpec
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import fill_rect, rect_outline
from pyqt_theme.widget_themes import frames
from pyqt_theme.widget_themes.base import (
    FrameStyle,
    ThemeColors,
    activated_color,
    build_frame_table,
    register_frames,
)

HIGH_CONTRAST_COLORS = ThemeColors(
    background=(0x00, 0x00, 0x00),
    background2=(0x00, 0x00, 0x00),
    foreground=(0xFF, 0xFF, 0xFF),
    inactive=(0x3F, 0xF2, 0x3F),
    selection=(0x1A, 0xEB, 0xFF),
    tooltip=(0x00, 0x00, 0x00),
    tooltip_text=(0xFF, 0xFF, 0x00),
)

_BLACK = (0x00, 0x00, 0x00)
_WHITE = (0xFF, 0xFF, 0xFF)
_YELLOW = (0xFF, 0xFF, 0x00)
_CYAN = (0x1A, 0xEB, 0xFF)

HIGH_CONTRAST_STYLE = FrameStyle(
    radius=0.0,
    light=_WHITE,
    light2=_WHITE,
    dark2=_WHITE,
    dark=_WHITE,
    border=_WHITE,
    up=(_BLACK, _BLACK),
    hover=(_BLACK, _BLACK),
    hover_border=_YELLOW,
    depressed=(_CYAN, _CYAN),
    depressed_border=_WHITE,
    default=(_BLACK, _BLACK),
    default_border=_YELLOW,
    input_fill=_BLACK,
    input_border=_WHITE,
    tab_border=_WHITE,
)


def _swatch_box(ctx: FrameContext) -> None:
    # Two pixel outline so color swatches stay distinct from each other
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, ctx.color))
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, _WHITE))
    rect_outline(ctx.painter, ctx.x + 1, ctx.y + 1, ctx.w - 2, ctx.h - 2, activated_color(ctx, _BLACK))


HIGH_CONTRAST_FRAMES = {
    **build_frame_table(HIGH_CONTRAST_STYLE),
    frames.OS_SWATCH_BOX: FrameSpec(_swatch_box, 2, 2, 4, 4),
}


def use_high_contrast_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, HIGH_CONTRAST_FRAMES)


def use_high_contrast_colors(registry: StyleRegistry) -> None:
    HIGH_CONTRAST_COLORS.apply(registry)


def use_high_contrast_theme(registry: StyleRegistry) -> None:
    use_high_contrast_scheme(registry)
    use_high_contrast_colors(registry)
    registry.visible_focus = True
    registry.scrollbar_size = 18
