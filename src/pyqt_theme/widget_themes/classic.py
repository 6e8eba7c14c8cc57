"""Windows classic widget theme: grey 3D bevels, navy selection."""

from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.widget_themes.base import FrameStyle, ThemeColors, build_frame_table, register_frames

CLASSIC_COLORS = ThemeColors(
    background=(0xD4, 0xD0, 0xC8),
    background2=(0xFF, 0xFF, 0xFF),
    foreground=(0x00, 0x00, 0x00),
    inactive=(0x80, 0x80, 0x80),
    selection=(0x0A, 0x24, 0x6A),
    tooltip=(0xFF, 0xFF, 0xE1),
    tooltip_text=(0x00, 0x00, 0x00),
)

CLASSIC_STYLE = FrameStyle(
    bevelled=True,
    light=(0xFF, 0xFF, 0xFF),
    light2=(0xD4, 0xD0, 0xC8),
    dark2=(0x80, 0x80, 0x80),
    dark=(0x40, 0x40, 0x40),
    input_fill=(0xFF, 0xFF, 0xFF),
)

CLASSIC_FRAMES = build_frame_table(CLASSIC_STYLE)


def use_classic_scheme(registry: StyleRegistry) -> None:
    register_frames(registry, CLASSIC_FRAMES)


def use_classic_colors(registry: StyleRegistry) -> None:
    CLASSIC_COLORS.apply(registry)


def use_classic_theme(registry: StyleRegistry) -> None:
    use_classic_scheme(registry)
    use_classic_colors(registry)
    registry.visible_focus = True
    registry.scrollbar_size = 16
