"""
Named colors.

HTML/CSS color names as RGB tuples, usable anywhere a theme or drawer
expects a color.
"""

from typing import Dict, Tuple

from pyqt_theme.exceptions import UnknownThemeError

RGB = Tuple[int, int, int]

ALICE_BLUE: RGB = (240, 248, 255)
ANTIQUE_WHITE: RGB = (250, 235, 215)
AQUA: RGB = (0, 255, 255)
AQUAMARINE: RGB = (127, 255, 212)
AZURE: RGB = (240, 255, 255)
BEIGE: RGB = (245, 245, 220)
BLACK: RGB = (0, 0, 0)
BLUE: RGB = (0, 0, 255)
BLUE_VIOLET: RGB = (138, 43, 226)
BROWN: RGB = (165, 42, 42)
BURLY_WOOD: RGB = (222, 184, 135)
CADET_BLUE: RGB = (95, 158, 160)
CHOCOLATE: RGB = (210, 105, 30)
CORAL: RGB = (255, 127, 80)
CORNFLOWER_BLUE: RGB = (100, 149, 237)
CRIMSON: RGB = (220, 20, 60)
DARK_BLUE: RGB = (0, 0, 139)
DARK_CYAN: RGB = (0, 139, 139)
DARK_GRAY: RGB = (169, 169, 169)
DARK_GREEN: RGB = (0, 100, 0)
DARK_ORANGE: RGB = (255, 140, 0)
DARK_RED: RGB = (139, 0, 0)
DARK_SLATE_GRAY: RGB = (47, 79, 79)
DEEP_PINK: RGB = (255, 20, 147)
DEEP_SKY_BLUE: RGB = (0, 191, 255)
DIM_GRAY: RGB = (105, 105, 105)
DODGER_BLUE: RGB = (30, 144, 255)
FIREBRICK: RGB = (178, 34, 34)
FOREST_GREEN: RGB = (34, 139, 34)
GAINSBORO: RGB = (220, 220, 220)
GOLD: RGB = (255, 215, 0)
GOLDENROD: RGB = (218, 165, 32)
GRAY: RGB = (128, 128, 128)
GREEN: RGB = (0, 128, 0)
HONEYDEW: RGB = (240, 255, 240)
HOT_PINK: RGB = (255, 105, 180)
INDIGO: RGB = (75, 0, 130)
IVORY: RGB = (255, 255, 240)
KHAKI: RGB = (240, 230, 140)
LAVENDER: RGB = (230, 230, 250)
LIGHT_BLUE: RGB = (173, 216, 230)
LIGHT_GRAY: RGB = (211, 211, 211)
LIGHT_STEEL_BLUE: RGB = (176, 196, 222)
LIME: RGB = (0, 255, 0)
LINEN: RGB = (250, 240, 230)
MAGENTA: RGB = (255, 0, 255)
MAROON: RGB = (128, 0, 0)
MIDNIGHT_BLUE: RGB = (25, 25, 112)
NAVY: RGB = (0, 0, 128)
OLIVE: RGB = (128, 128, 0)
ORANGE: RGB = (255, 165, 0)
ORCHID: RGB = (218, 112, 214)
PLUM: RGB = (221, 160, 221)
PURPLE: RGB = (128, 0, 128)
RED: RGB = (255, 0, 0)
ROYAL_BLUE: RGB = (65, 105, 225)
SALMON: RGB = (250, 128, 114)
SEA_GREEN: RGB = (46, 139, 87)
SILVER: RGB = (192, 192, 192)
SKY_BLUE: RGB = (135, 206, 235)
SLATE_GRAY: RGB = (112, 128, 144)
SNOW: RGB = (255, 250, 250)
STEEL_BLUE: RGB = (70, 130, 180)
TAN: RGB = (210, 180, 140)
TEAL: RGB = (0, 128, 128)
TOMATO: RGB = (255, 99, 71)
TURQUOISE: RGB = (64, 224, 208)
VIOLET: RGB = (238, 130, 238)
WHEAT: RGB = (245, 222, 179)
WHITE: RGB = (255, 255, 255)
WHITE_SMOKE: RGB = (245, 245, 245)
YELLOW: RGB = (255, 255, 0)
YELLOW_GREEN: RGB = (154, 205, 50)

HTML_COLORS: Dict[str, RGB] = {
    name.replace("_", "").lower(): value
    for name, value in globals().items()
    if name.isupper() and isinstance(value, tuple)
}


def named_color(name: str) -> RGB:
    """
    Resolve an HTML color name ("AliceBlue", "alice blue", "ALICE_BLUE").

    Raises:
        UnknownThemeError: If the name is not a known HTML color
    """
    key = name.replace("_", "").replace(" ", "").lower()
    try:
        return HTML_COLORS[key]
    except KeyError:
        raise UnknownThemeError(f"Unknown color name {name!r}") from None
