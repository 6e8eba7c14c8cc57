"""
Widget schemes: frame drawing only.

A scheme changes how widget frames are drawn and never touches palette
colors, so it combines with any color theme. Applying a widget theme after
a scheme replaces the scheme's drawers.
"""

import logging
from enum import Enum
from typing import Optional

from pyqt_theme.core.enum_dispatch import EnumDispatcher
from pyqt_theme.core.style_registry import StyleRegistry, get_style_registry
from pyqt_theme.exceptions import UnknownThemeError
from pyqt_theme.widget_schemes import aqua, clean, crystal, fluent, gleam, svg_based

logger = logging.getLogger(__name__)


class SchemeType(Enum):
    """Lists supported schemes."""
    AQUA = "aqua"  # modern Aqua
    CLEAN = "clean"
    CRYSTAL = "crystal"
    FLUENT = "fluent"  # Windows 10
    GLEAM = "gleam"
    SVG_BASED = "svg_based"  # vector-drawn rounded and oval frames

    @classmethod
    def from_name(cls, name: str) -> "SchemeType":
        """
        Resolve "SvgBased", "svg-based" or "SVG_BASED".

        Raises:
            UnknownThemeError: If no scheme has that name
        """
        key = name.strip().replace("-", "_").replace(" ", "_").lower()
        for member in cls:
            if key in (member.value, member.value.replace("_", "")):
                return member
        raise UnknownThemeError(
            f"Unknown widget scheme {name!r}. Available: {[m.value for m in cls]}"
        )


_SCHEME_DISPATCHER: EnumDispatcher[SchemeType] = EnumDispatcher(SchemeType, {
    SchemeType.AQUA: aqua.use_aqua_scheme,
    SchemeType.CLEAN: clean.use_clean_scheme,
    SchemeType.CRYSTAL: crystal.use_crystal_scheme,
    SchemeType.FLUENT: fluent.use_fluent_scheme,
    SchemeType.GLEAM: gleam.use_gleam_scheme,
    SchemeType.SVG_BASED: svg_based.use_svg_based_scheme,
})


class WidgetScheme:
    """A widget scheme sets the style of drawing a widget without interfering with coloring."""

    __slots__ = ("_scheme",)

    def __init__(self, scheme: SchemeType):
        self._scheme = SchemeType(scheme)

    @classmethod
    def new(cls, scheme: SchemeType) -> "WidgetScheme":
        return cls(scheme)

    @property
    def scheme(self) -> SchemeType:
        return self._scheme

    def __eq__(self, other) -> bool:
        if not isinstance(other, WidgetScheme):
            return NotImplemented
        return self._scheme is other._scheme

    def __hash__(self) -> int:
        return hash(self._scheme)

    def __repr__(self) -> str:
        return f"WidgetScheme({self._scheme.name})"

    def apply(self, registry: Optional[StyleRegistry] = None) -> None:
        """
        Register the scheme's frame drawers, then request a redraw.

        Args:
            registry: Target registry (the process-wide one if None)
        """
        registry = registry or get_style_registry()
        _SCHEME_DISPATCHER.dispatch(self._scheme, registry)
        registry.redraw()
        logger.info(f"Applied widget scheme {self._scheme.name}")
