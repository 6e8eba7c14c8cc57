"""
Widget themes: frame drawing plus a matching color palette.

Each ThemeType maps to exactly one use_<name>_theme() procedure. Applying a
WidgetTheme runs that procedure against a style registry and requests a
redraw.
"""

import logging
from enum import Enum
from typing import Optional

from pyqt_theme.core.enum_dispatch import EnumDispatcher
from pyqt_theme.core.style_registry import StyleRegistry, get_style_registry
from pyqt_theme.exceptions import UnknownThemeError
from pyqt_theme.widget_themes import (
    aero,
    aqua_classic,
    blue,
    classic,
    dark,
    greybird,
    high_contrast,
    metro,
)

logger = logging.getLogger(__name__)


class ThemeType(Enum):
    """Lists supported themes."""
    CLASSIC = "classic"  # Windows classic
    AERO = "aero"  # Windows 7
    METRO = "metro"  # Windows 8
    AQUA_CLASSIC = "aqua_classic"  # Classic MacOS
    GREYBIRD = "greybird"  # Xfce
    BLUE = "blue"  # Windows 2000
    DARK = "dark"
    HIGH_CONTRAST = "high_contrast"

    @classmethod
    def from_name(cls, name: str) -> "ThemeType":
        """
        Resolve "AquaClassic", "aqua-classic" or "AQUA_CLASSIC".

        Raises:
            UnknownThemeError: If no theme has that name
        """
        key = name.strip().replace("-", "_").replace(" ", "_").lower()
        for member in cls:
            if key in (member.value, member.value.replace("_", "")):
                return member
        raise UnknownThemeError(
            f"Unknown widget theme {name!r}. Available: {[m.value for m in cls]}"
        )


_THEME_DISPATCHER: EnumDispatcher[ThemeType] = EnumDispatcher(ThemeType, {
    ThemeType.CLASSIC: classic.use_classic_theme,
    ThemeType.AERO: aero.use_aero_theme,
    ThemeType.METRO: metro.use_metro_theme,
    ThemeType.AQUA_CLASSIC: aqua_classic.use_aqua_classic_theme,
    ThemeType.GREYBIRD: greybird.use_greybird_theme,
    ThemeType.BLUE: blue.use_blue_theme,
    ThemeType.DARK: dark.use_dark_theme,
    ThemeType.HIGH_CONTRAST: high_contrast.use_high_contrast_theme,
})


class WidgetTheme:
    """A widget theme is a scheme + a set of default colors."""

    __slots__ = ("_theme",)

    def __init__(self, theme: ThemeType):
        self._theme = ThemeType(theme)

    @classmethod
    def new(cls, theme: ThemeType) -> "WidgetTheme":
        return cls(theme)

    @property
    def theme(self) -> ThemeType:
        return self._theme

    def __eq__(self, other) -> bool:
        if not isinstance(other, WidgetTheme):
            return NotImplemented
        return self._theme is other._theme

    def __hash__(self) -> int:
        return hash(self._theme)

    def __repr__(self) -> str:
        return f"WidgetTheme({self._theme.name})"

    def apply(self, registry: Optional[StyleRegistry] = None) -> None:
        """
        Register the theme's frame drawers and colors, then request a redraw.

        Args:
            registry: Target registry (the process-wide one if None)
        """
        registry = registry or get_style_registry()
        _THEME_DISPATCHER.dispatch(self._theme, registry)
        registry.redraw()
        logger.info(f"Applied widget theme {self._theme.name}")
