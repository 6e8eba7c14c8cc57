"""
Windows 2000 widget theme.

Classic bevelled parts on a pale blue face, with a royal blue selection.
"""

from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.widget_themes.base import FrameStyle, ThemeColors, build_frame_table, register_frames

BLUE_COLORS = ThemeColors(
    background=(0xD6, 0xDF, 0xF7),
    background2=(0xFF, 0xFF, 0xFF),
    foreground=(0x00, 0x00, 0x00),
    inactive=(0x7A, 0x96, 0xDF),
    selection=(0x31, 0x6A, 0xC5),
    tooltip=(0xFF, 0xFF, 0xE1),
    tooltip_text=(0x00, 0x00, 0x00),
)

BLUE_STYLE = FrameStyle(
    bevelled=True,
    light=(0xFF, 0xFF, 0xFF),
    light2=(0xE8, 0xEE, 0xFB),
    dark2=(0x7A, 0x96, 0xDF),
    dark=(0x00, 0x2D, 0x96),
    input_fill=(0xFF, 0xFF, 0xFF),
)

BLUE_FRAMES = build_frame_table(BLUE_STYLE)


def use_blue_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, BLUE_FRAMES)


def use_blue_colors(registry: StyleRegistry) -> None:
    BLUE_COLORS.apply(registry)


def use_blue_theme(registry: StyleRegistry) -> None:
    use_blue_scheme(registry)
    use_blue_colors(registry)
    registry.visible_focus = True
    registry.scrollbar_size = 16
