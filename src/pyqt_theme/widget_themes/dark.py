"""
Dark widget theme.

Charcoal surfaces with light text. Raised parts get a faint top highlight
instead of white bevels, which would glare on a dark background.
"""

from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.widget_themes.base import FrameStyle, ThemeColors, build_frame_table, register_frames

DARK_COLORS = ThemeColors(
    background=(0x32, 0x32, 0x32),
    background2=(0x26, 0x26, 0x26),
    foreground=(0xDD, 0xDD, 0xDD),
    inactive=(0x6E, 0x6E, 0x6E),
    selection=(0x34, 0x6E, 0xB8),
    tooltip=(0x3C, 0x3C, 0x3C),
    tooltip_text=(0xDD, 0xDD, 0xDD),
)

DARK_STYLE = FrameStyle(
    radius=2.0,
    light=(0x5A, 0x5A, 0x5A),
    light2=(0x46, 0x46, 0x46),
    dark2=(0x23, 0x23, 0x23),
    dark=(0x14, 0x14, 0x14),
    border=(0x1E, 0x1E, 0x1E),
    up=((0x4A, 0x4A, 0x4A), (0x3E, 0x3E, 0x3E)),
    hover=((0x55, 0x55, 0x55), (0x48, 0x48, 0x48)),
    hover_border=(0x1E, 0x1E, 0x1E),
    depressed=((0x2E, 0x2E, 0x2E), (0x36, 0x36, 0x36)),
    depressed_border=(0x1A, 0x1A, 0x1A),
    default=((0x4A, 0x4A, 0x4A), (0x3E, 0x3E, 0x3E)),
    default_border=(0x34, 0x6E, 0xB8),
    input_fill=(0x26, 0x26, 0x26),
    input_border=(0x1E, 0x1E, 0x1E),
    highlight=(0x5A, 0x5A, 0x5A),
    tab_border=(0x1E, 0x1E, 0x1E),
)

DARK_FRAMES = build_frame_table(DARK_STYLE)


def use_dark_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, DARK_FRAMES)


def use_dark_colors(registry: StyleRegistry) -> None:
    DARK_COLORS.apply(registry)


def use_dark_theme(registry: StyleRegistry) -> None:
    use_dark_scheme(registry)
    use_dark_colors(registry)
    registry.visible_focus = False
    registry.scrollbar_size = 15
