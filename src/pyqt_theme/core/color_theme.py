"""
Color maps and color themes.

A ColorTheme is an ordered list of palette slot overrides. Applying it
writes each override into the style registry in order, then requests a
single redraw.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from pyqt_theme.core.color_utils import validate_rgb
from pyqt_theme.core.palette import PALETTE_SIZE
from pyqt_theme.core.style_registry import StyleRegistry, get_style_registry
from pyqt_theme.exceptions import InvalidColorError, ThemeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorMap:
    """One palette override: slot index plus its new RGB value."""
    index: int
    r: int
    g: int
    b: int

    def __post_init__(self):
        if not isinstance(self.index, int) or isinstance(self.index, bool) or not 0 <= self.index < PALETTE_SIZE:
            raise InvalidColorError(f"Palette index out of range 0-255: {self.index!r}")
        validate_rgb(self.r, self.g, self.b)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


def cmap(index: int, r: int, g: int, b: int) -> ColorMap:
    """Shorthand used by the bundled color tables."""
    return ColorMap(index, r, g, b)


class ColorTheme:
    """A theme is just an ordered sequence of color maps."""

    def __init__(self, maps: Iterable[ColorMap] = ()):
        self._maps: Tuple[ColorMap, ...] = tuple(maps)

    @classmethod
    def new(cls, maps: Iterable[ColorMap]) -> "ColorTheme":
        """Load from a color map."""
        return cls(maps)

    @classmethod
    def from_colormap(cls, maps: Iterable[ColorMap]) -> "ColorTheme":
        """Load from a color map."""
        return cls(maps)

    @property
    def maps(self) -> Tuple[ColorMap, ...]:
        return self._maps

    def __iter__(self):
        return iter(self._maps)

    def __len__(self) -> int:
        return len(self._maps)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColorTheme):
            return NotImplemented
        return self._maps == other._maps

    def __repr__(self) -> str:
        return f"ColorTheme({len(self._maps)} maps)"

    def apply(self, registry: Optional[StyleRegistry] = None) -> None:
        """
        Write every color map into the registry, then request one redraw.

        Later maps for the same index overwrite earlier ones.

        Args:
            registry: Target registry (the process-wide one if None)
        """
        registry = registry or get_style_registry()
        for elem in self._maps:
            registry.set_color(elem.index, elem.r, elem.g, elem.b)
        registry.redraw()
        logger.debug(f"Applied color theme with {len(self._maps)} maps")

    # ========== SERIALIZATION ==========

    def to_dict(self) -> dict:
        return {"colors": [asdict(elem) for elem in self._maps]}

    @classmethod
    def from_dict(cls, data: dict) -> "ColorTheme":
        """
        Build a theme from {"colors": [{"index": .., "r": .., "g": .., "b": ..}, ...]}.

        Entries may also be given as [index, r, g, b] lists.

        Raises:
            ThemeError: If the data does not have that structure
            InvalidColorError: If an index or channel is out of range
        """
        if not isinstance(data, dict):
            raise ThemeError(f"Color theme data must be a mapping, got {type(data).__name__}")
        maps: List[ColorMap] = []
        try:
            for entry in data.get("colors", []):
                if isinstance(entry, dict):
                    maps.append(ColorMap(entry["index"], entry["r"], entry["g"], entry["b"]))
                else:
                    maps.append(ColorMap(*entry))
        except (KeyError, TypeError) as e:
            raise ThemeError(f"Malformed color map entry: {e!r}") from e
        return cls(maps)

    @classmethod
    def load_from_json(cls, config_path: Union[str, Path]) -> "ColorTheme":
        """
        Load a color theme from a JSON configuration file.

        Raises:
            ThemeError: If the file cannot be read, parsed or has the wrong structure
        """
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ThemeError(f"Failed to load color theme from {config_path}: {e}") from e
        theme = cls.from_dict(data)
        logger.info(f"Color theme loaded from {config_path}")
        return theme

    def save_to_json(self, config_path: Union[str, Path]) -> bool:
        """
        Save color theme to JSON configuration file.

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            with open(config_path, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Color theme saved to {config_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save color theme to {config_path}: {e}")
            return False
