"""Xfce Greybird widget theme."""

from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.widget_themes.base import FrameStyle, ThemeColors, build_frame_table, register_frames

GREYBIRD_COLORS = ThemeColors(
    background=(0xCE, 0xCE, 0xCE),
    background2=(0xFC, 0xFC, 0xFC),
    foreground=(0x3C, 0x3C, 0x3C),
    inactive=(0x88, 0x88, 0x88),
    selection=(0x39, 0x8E, 0xE7),
    tooltip=(0x0A, 0x0A, 0x0A),
    tooltip_text=(0xFF, 0xFF, 0xFF),
)

GREYBIRD_STYLE = FrameStyle(
    radius=2.0,
    light=(0xE2, 0xE2, 0xE2),
    dark2=(0xA6, 0xA6, 0xA6),
    dark=(0x7E, 0x7E, 0x7E),
    border=(0xA6, 0xA6, 0xA6),
    up=((0xE6, 0xE6, 0xE6), (0xD6, 0xD6, 0xD6)),
    hover=((0xEC, 0xEC, 0xEC), (0xDE, 0xDE, 0xDE)),
    hover_border=(0xA6, 0xA6, 0xA6),
    depressed=((0xBC, 0xBC, 0xBC), (0xC6, 0xC6, 0xC6)),
    depressed_border=(0x8A, 0x8A, 0x8A),
    default=((0xE6, 0xE6, 0xE6), (0xD6, 0xD6, 0xD6)),
    default_border=(0x39, 0x8E, 0xE7),
    input_fill=(0xFC, 0xFC, 0xFC),
    input_border=(0x9A, 0x9A, 0x9A),
    highlight=(0xF2, 0xF2, 0xF2),
    tab_border=(0xA6, 0xA6, 0xA6),
)

GREYBIRD_FRAMES = build_frame_table(GREYBIRD_STYLE)


def use_greybird_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, GREYBIRD_FRAMES)


def use_greybird_colors(registry: StyleRegistry) -> None:
    GREYBIRD_COLORS.apply(registry)


def use_greybird_theme(registry: StyleRegistry) -> None:
    use_greybird_scheme(registry)
    use_greybird_colors(registry)
    registry.visible_focus = True
    registry.scrollbar_size = 15
