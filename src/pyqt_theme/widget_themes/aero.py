"""
Windows 7 (Aero) widget theme.

Glossy two-tone button gradients with a white inner highlight, light blue
hover and pressed states, and rounded corners.
"""

from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.widget_themes.base import FrameStyle, ThemeColors, build_frame_table, register_frames

AERO_COLORS = ThemeColors(
    background=(0xF0, 0xF0, 0xF0),
    background2=(0xFF, 0xFF, 0xFF),
    foreground=(0x00, 0x00, 0x00),
    inactive=(0x6D, 0x6D, 0x6D),
    selection=(0x33, 0x99, 0xFF),
    tooltip=(0xFF, 0xFF, 0xFF),
    tooltip_text=(0x57, 0x57, 0x57),
)

AERO_STYLE = FrameStyle(
    radius=3.0,
    light=(0xFF, 0xFF, 0xFF),
    dark2=(0xA0, 0xA0, 0xA0),
    dark=(0x70, 0x70, 0x70),
    border=(0x70, 0x70, 0x70),
    up=((0xF2, 0xF2, 0xF2), (0xCF, 0xCF, 0xCF)),
    hover=((0xEA, 0xF6, 0xFD), (0xA7, 0xD9, 0xF5)),
    hover_border=(0x3C, 0x7F, 0xB1),
    depressed=((0xE5, 0xF4, 0xFC), (0x68, 0xB3, 0xDB)),
    depressed_border=(0x2C, 0x62, 0x8B),
    default=((0xEA, 0xF6, 0xFD), (0xBE, 0xE6, 0xFD)),
    default_border=(0x33, 0x99, 0xFF),
    input_fill=(0xFF, 0xFF, 0xFF),
    input_border=(0xAB, 0xAD, 0xB3),
    highlight=(0xFF, 0xFF, 0xFF),
    tab_border=(0x89, 0x8C, 0x95),
)

AERO_FRAMES = build_frame_table(AERO_STYLE)


def use_aero_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, AERO_FRAMES)


def use_aero_colors(registry: StyleRegistry) -> None:
    AERO_COLORS.apply(registry)


def use_aero_theme(registry: StyleRegistry) -> None:
    use_aero_scheme(registry)
    use_aero_colors(registry)
    registry.visible_focus = True
    registry.scrollbar_size = 17
