"""
Core theming state.

Palette layout, color arithmetic, frame types and the style registry that
themes and schemes write into. No widget code lives here.
"""

from .color_theme import ColorMap, ColorTheme, cmap
from .enum_dispatch import EnumDispatcher
from .frame_types import (
    STANDARD_FRAMES,
    FrameContext,
    FrameDrawer,
    FrameSpec,
    FrameType,
    activated_color,
)
from .style_registry import StyleRegistry, get_style_registry, reset_style_registry

__all__ = [
    "ColorMap",
    "ColorTheme",
    "cmap",
    "EnumDispatcher",
    "STANDARD_FRAMES",
    "FrameContext",
    "FrameDrawer",
    "FrameSpec",
    "FrameType",
    "activated_color",
    "StyleRegistry",
    "get_style_registry",
    "reset_style_registry",
]
