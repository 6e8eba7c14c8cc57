"""
pyqt-theme: color themes, widget themes and widget schemes for PyQt6.

Theming is expressed against an explicit StyleRegistry holding the styling
state a widget toolkit draws with, then pushed into a running QApplication by
the Qt binding.

Architecture:
- Core: indexed palette, frame types, style registry, color themes
- Color themes: bundled palette tables (black, dark, gray, shake, tan)
- Widget themes: frame drawers plus a matching palette (Classic, Aero, ...)
- Widget schemes: frame drawers only (Aqua, Clean, Crystal, ...)
- Qt: QPalette mapping and a QProxyStyle routing primitives to frame drawers

Typical use:
    registry = get_style_registry()
    install_theme_host(app, registry)
    WidgetScheme.new(SchemeType.CLEAN).apply()
    WidgetTheme.new(ThemeType.DARK).apply()
"""

__version__ = "0.1.0"

from pyqt_theme.exceptions import InvalidColorError, ThemeError, UnknownThemeError
from pyqt_theme.core import (
    ColorMap,
    ColorTheme,
    FrameContext,
    FrameSpec,
    FrameType,
    StyleRegistry,
    cmap,
    get_style_registry,
    reset_style_registry,
)
from pyqt_theme.color_themes import COLOR_THEMES, get_color_theme
from pyqt_theme.widget_themes import ThemeType, WidgetTheme
from pyqt_theme.widget_schemes import SchemeType, WidgetScheme
from pyqt_theme.config import ThemeConfig
from pyqt_theme.qt import FrameProxyStyle, PaletteManager, ThemeHost, install_theme_host

__all__ = [
    "__version__",
    # Errors
    "ThemeError",
    "InvalidColorError",
    "UnknownThemeError",
    # Core
    "ColorMap",
    "ColorTheme",
    "cmap",
    "FrameContext",
    "FrameSpec",
    "FrameType",
    "StyleRegistry",
    "get_style_registry",
    "reset_style_registry",
    # Color themes
    "COLOR_THEMES",
    "get_color_theme",
    # Widget themes and schemes
    "ThemeType",
    "WidgetTheme",
    "SchemeType",
    "WidgetScheme",
    # Config
    "ThemeConfig",
    # Qt binding
    "PaletteManager",
    "FrameProxyStyle",
    "ThemeHost",
    "install_theme_host",
]
