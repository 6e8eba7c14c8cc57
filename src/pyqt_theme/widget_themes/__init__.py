"""
Widget themes.

A theme restyles widget frames and installs the colors that go with them.
Frame aliases (OS_*) name the frame types a theme draws as widget parts.
"""

from .frames import (
    OS_BUTTON_UP_BOX,
    OS_CHECK_DOWN_BOX,
    OS_BUTTON_UP_FRAME,
    OS_CHECK_DOWN_FRAME,
    OS_PANEL_THIN_UP_BOX,
    OS_SPACER_THIN_DOWN_BOX,
    OS_PANEL_THIN_UP_FRAME,
    OS_SPACER_THIN_DOWN_FRAME,
    OS_RADIO_ROUND_DOWN_BOX,
    OS_HOVERED_UP_BOX,
    OS_DEPRESSED_DOWN_BOX,
    OS_HOVERED_UP_FRAME,
    OS_DEPRESSED_DOWN_FRAME,
    OS_INPUT_THIN_DOWN_BOX,
    OS_INPUT_THIN_DOWN_FRAME,
    OS_MINI_BUTTON_UP_BOX,
    OS_MINI_DEPRESSED_DOWN_BOX,
    OS_MINI_BUTTON_UP_FRAME,
    OS_MINI_DEPRESSED_DOWN_FRAME,
    OS_DEFAULT_BUTTON_UP_BOX,
    OS_DEFAULT_HOVERED_UP_BOX,
    OS_DEFAULT_DEPRESSED_DOWN_BOX,
    OS_TOOLBAR_BUTTON_HOVER_BOX,
    OS_TABS_BOX,
    OS_SWATCH_BOX,
    OS_SWATCH_FRAME,
    OS_BG_BOX,
)
from .base import FrameStyle, ThemeColors, activated_color
from .widget_theme import ThemeType, WidgetTheme

__all__ = [
    "FrameStyle",
    "ThemeColors",
    "activated_color",
    "ThemeType",
    "WidgetTheme",
    "OS_BUTTON_UP_BOX",
    "OS_CHECK_DOWN_BOX",
    "OS_BUTTON_UP_FRAME",
    "OS_CHECK_DOWN_FRAME",
    "OS_PANEL_THIN_UP_BOX",
    "OS_SPACER_THIN_DOWN_BOX",
    "OS_PANEL_THIN_UP_FRAME",
    "OS_SPACER_THIN_DOWN_FRAME",
    "OS_RADIO_ROUND_DOWN_BOX",
    "OS_HOVERED_UP_BOX",
    "OS_DEPRESSED_DOWN_BOX",
    "OS_HOVERED_UP_FRAME",
    "OS_DEPRESSED_DOWN_FRAME",
    "OS_INPUT_THIN_DOWN_BOX",
    "OS_INPUT_THIN_DOWN_FRAME",
    "OS_MINI_BUTTON_UP_BOX",
    "OS_MINI_DEPRESSED_DOWN_BOX",
    "OS_MINI_BUTTON_UP_FRAME",
    "OS_MINI_DEPRESSED_DOWN_FRAME",
    "OS_DEFAULT_BUTTON_UP_BOX",
    "OS_DEFAULT_HOVERED_UP_BOX",
    "OS_DEFAULT_DEPRESSED_DOWN_BOX",
    "OS_TOOLBAR_BUTTON_HOVER_BOX",
    "OS_TABS_BOX",
    "OS_SWATCH_BOX",
    "OS_SWATCH_FRAME",
    "OS_BG_BOX",
]
