"""Windows 8 (Metro) widget theme: square corners, near-flat fills."""

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

METRO_COLORS = ThemeColors(
    background=(0xF0, 0xF0, 0xF0),
    background2=(0xFF, 0xFF, 0xFF),
    foreground=(0x00, 0x00, 0x00),
    inactive=(0x83, 0x83, 0x83),
    selection=(0x33, 0x99, 0xFF),
    tooltip=(0xFF, 0xFF, 0xFF),
    tooltip_text=(0x00, 0x00, 0x00),
)

METRO_STYLE = FrameStyle(
    radius=0.0,
    light=(0xFF, 0xFF, 0xFF),
    dark2=(0xAC, 0xAC, 0xAC),
    dark=(0x70, 0x70, 0x70),
    border=(0xAC, 0xAC, 0xAC),
    up=((0xF0, 0xF0, 0xF0), (0xE5, 0xE5, 0xE5)),
    hover=((0xEC, 0xF4, 0xFC), (0xDC, 0xEC, 0xFC)),
    hover_border=(0x7E, 0xB4, 0xEA),
    depressed=((0xDA, 0xEC, 0xFC), (0xC4, 0xE0, 0xFC)),
    depressed_border=(0x56, 0x9D, 0xE5),
    default=((0xF0, 0xF0, 0xF0), (0xE5, 0xE5, 0xE5)),
    default_border=(0x33, 0x99, 0xFF),
    input_fill=(0xFF, 0xFF, 0xFF),
    input_border=(0xAB, 0xAD, 0xB3),
    tab_border=(0xD9, 0xD9, 0xD9),
)

_TOOLBAR_HOVER_FILL = (0xE5, 0xF3, 0xFB)
_TOOLBAR_HOVER_BORDER = (0x7A, 0xB1, 0xE8)


def _toolbar_button_hover_box(ctx: FrameContext) -> None:
    # Toolbar buttons are flat: a single tinted fill, no gradient
    fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, _TOOLBAR_HOVER_FILL))
    rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, _TOOLBAR_HOVER_BORDER))


METRO_FRAMES = {
    **build_frame_table(METRO_STYLE),
    frames.OS_TOOLBAR_BUTTON_HOVER_BOX: FrameSpec(_toolbar_button_hover_box, 1, 1, 2, 2),
}


def use_metro_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, METRO_FRAMES)


def use_metro_colors(registry: StyleRegistry) -> None:
    METRO_COLORS.apply(registry)


def use_metro_theme(registry: StyleRegistry) -> None:
    use_metro_scheme(registry)
    use_metro_colors(registry)
    registry.visible_focus = False
    registry.scrollbar_size = 17
