"""
Bundled color themes.

Each table overrides the sixteen base slots and the gray ramp (32..55),
which is enough to recolor every stock widget. Pass one to
ColorTheme.new() and apply() it, or build your own list of ColorMap.
"""

from typing import Dict, Tuple

from pyqt_theme.core.color_theme import ColorMap, ColorTheme, cmap
from pyqt_theme.exceptions import UnknownThemeError

BLACK_THEME: Tuple[ColorMap, ...] = (
    cmap(0, 230, 230, 230),
    cmap(1, 255, 90, 90),
    cmap(2, 90, 230, 90),
    cmap(3, 240, 220, 80),
    cmap(4, 90, 140, 255),
    cmap(5, 230, 100, 230),
    cmap(6, 90, 220, 230),
    cmap(7, 14, 14, 14),
    cmap(8, 110, 110, 110),
    cmap(9, 170, 80, 80),
    cmap(10, 80, 150, 80),
    cmap(11, 150, 140, 60),
    cmap(12, 80, 100, 170),
    cmap(13, 150, 70, 150),
    cmap(14, 70, 140, 150),
    cmap(15, 0, 110, 200),
    cmap(32, 0, 0, 0),
    cmap(33, 2, 2, 2),
    cmap(34, 4, 4, 4),
    cmap(35, 5, 5, 5),
    cmap(36, 7, 7, 7),
    cmap(37, 9, 9, 9),
    cmap(38, 11, 11, 11),
    cmap(39, 12, 12, 12),
    cmap(40, 14, 14, 14),
    cmap(41, 16, 16, 16),
    cmap(42, 18, 18, 18),
    cmap(43, 19, 19, 19),
    cmap(44, 21, 21, 21),
    cmap(45, 23, 23, 23),
    cmap(46, 25, 25, 25),
    cmap(47, 26, 26, 26),
    cmap(48, 28, 28, 28),
    cmap(49, 30, 30, 30),
    cmap(50, 40, 40, 40),
    cmap(51, 50, 50, 50),
    cmap(52, 60, 60, 60),
    cmap(53, 70, 70, 70),
    cmap(54, 80, 80, 80),
    cmap(55, 90, 90, 90),
)

DARK_THEME: Tuple[ColorMap, ...] = (
    cmap(0, 220, 220, 220),
    cmap(1, 240, 100, 100),
    cmap(2, 100, 210, 110),
    cmap(3, 230, 210, 100),
    cmap(4, 100, 150, 240),
    cmap(5, 210, 110, 210),
    cmap(6, 100, 200, 210),
    cmap(7, 32, 32, 32),
    cmap(8, 120, 120, 120),
    cmap(9, 180, 90, 90),
    cmap(10, 90, 160, 90),
    cmap(11, 160, 150, 70),
    cmap(12, 90, 110, 180),
    cmap(13, 160, 80, 160),
    cmap(14, 80, 150, 160),
    cmap(15, 40, 100, 170),
    cmap(32, 8, 8, 8),
    cmap(33, 10, 10, 10),
    cmap(34, 13, 13, 13),
    cmap(35, 15, 15, 15),
    cmap(36, 18, 18, 18),
    cmap(37, 20, 20, 20),
    cmap(38, 23, 23, 23),
    cmap(39, 25, 25, 25),
    cmap(40, 28, 28, 28),
    cmap(41, 30, 30, 30),
    cmap(42, 33, 33, 33),
    cmap(43, 35, 35, 35),
    cmap(44, 38, 38, 38),
    cmap(45, 40, 40, 40),
    cmap(46, 43, 43, 43),
    cmap(47, 45, 45, 45),
    cmap(48, 48, 48, 48),
    cmap(49, 50, 50, 50),
    cmap(50, 62, 62, 62),
    cmap(51, 73, 73, 73),
    cmap(52, 85, 85, 85),
    cmap(53, 97, 97, 97),
    cmap(54, 108, 108, 108),
    cmap(55, 120, 120, 120),
)

GRAY_THEME: Tuple[ColorMap, ...] = (
    cmap(0, 0, 0, 0),
    cmap(1, 200, 0, 0),
    cmap(2, 0, 150, 0),
    cmap(3, 200, 180, 0),
    cmap(4, 0, 0, 200),
    cmap(5, 180, 0, 180),
    cmap(6, 0, 160, 160),
    cmap(7, 220, 220, 220),
    cmap(8, 95, 95, 95),
    cmap(9, 180, 100, 100),
    cmap(10, 100, 170, 100),
    cmap(11, 130, 130, 60),
    cmap(12, 100, 100, 180),
    cmap(13, 130, 60, 130),
    cmap(14, 60, 130, 130),
    cmap(15, 60, 80, 140),
    cmap(32, 30, 30, 30),
    cmap(33, 38, 38, 38),
    cmap(34, 45, 45, 45),
    cmap(35, 53, 53, 53),
    cmap(36, 61, 61, 61),
    cmap(37, 68, 68, 68),
    cmap(38, 76, 76, 76),
    cmap(39, 84, 84, 84),
    cmap(40, 91, 91, 91),
    cmap(41, 99, 99, 99),
    cmap(42, 106, 106, 106),
    cmap(43, 114, 114, 114),
    cmap(44, 122, 122, 122),
    cmap(45, 129, 129, 129),
    cmap(46, 137, 137, 137),
    cmap(47, 145, 145, 145),
    cmap(48, 152, 152, 152),
    cmap(49, 160, 160, 160),
    cmap(50, 173, 173, 173),
    cmap(51, 185, 185, 185),
    cmap(52, 198, 198, 198),
    cmap(53, 210, 210, 210),
    cmap(54, 223, 223, 223),
    cmap(55, 235, 235, 235),
)

SHAKE_THEME: Tuple[ColorMap, ...] = (
    cmap(0, 20, 40, 30),
    cmap(1, 200, 40, 60),
    cmap(2, 30, 140, 80),
    cmap(3, 190, 170, 40),
    cmap(4, 40, 80, 170),
    cmap(5, 160, 50, 140),
    cmap(6, 30, 140, 150),
    cmap(7, 246, 252, 249),
    cmap(8, 110, 130, 120),
    cmap(9, 190, 120, 120),
    cmap(10, 110, 180, 140),
    cmap(11, 150, 150, 70),
    cmap(12, 110, 130, 190),
    cmap(13, 150, 80, 140),
    cmap(14, 70, 150, 150),
    cmap(15, 40, 140, 110),
    cmap(32, 40, 52, 46),
    cmap(33, 49, 62, 56),
    cmap(34, 59, 72, 65),
    cmap(35, 68, 82, 75),
    cmap(36, 78, 92, 85),
    cmap(37, 87, 102, 94),
    cmap(38, 96, 112, 104),
    cmap(39, 106, 122, 114),
    cmap(40, 115, 132, 123),
    cmap(41, 125, 142, 133),
    cmap(42, 134, 152, 142),
    cmap(43, 144, 162, 152),
    cmap(44, 153, 172, 162),
    cmap(45, 162, 182, 171),
    cmap(46, 172, 192, 181),
    cmap(47, 181, 202, 191),
    cmap(48, 191, 212, 200),
    cmap(49, 200, 222, 210),
    cmap(50, 208, 227, 216),
    cmap(51, 215, 232, 223),
    cmap(52, 223, 237, 229),
    cmap(53, 231, 241, 235),
    cmap(54, 238, 246, 242),
    cmap(55, 246, 251, 248),
)

TAN_THEME: Tuple[ColorMap, ...] = (
    cmap(0, 40, 28, 16),
    cmap(1, 180, 40, 30),
    cmap(2, 60, 130, 50),
    cmap(3, 200, 160, 40),
    cmap(4, 50, 70, 160),
    cmap(5, 150, 60, 120),
    cmap(6, 50, 130, 130),
    cmap(7, 250, 244, 232),
    cmap(8, 130, 115, 95),
    cmap(9, 190, 120, 100),
    cmap(10, 120, 160, 100),
    cmap(11, 150, 130, 60),
    cmap(12, 110, 110, 170),
    cmap(13, 140, 80, 110),
    cmap(14, 80, 140, 130),
    cmap(15, 150, 100, 50),
    cmap(32, 52, 42, 28),
    cmap(33, 61, 51, 36),
    cmap(34, 71, 59, 44),
    cmap(35, 80, 68, 51),
    cmap(36, 89, 77, 59),
    cmap(37, 98, 86, 67),
    cmap(38, 108, 94, 75),
    cmap(39, 117, 103, 82),
    cmap(40, 126, 112, 90),
    cmap(41, 136, 120, 98),
    cmap(42, 145, 129, 106),
    cmap(43, 154, 138, 113),
    cmap(44, 164, 146, 121),
    cmap(45, 173, 155, 129),
    cmap(46, 182, 164, 137),
    cmap(47, 191, 173, 144),
    cmap(48, 201, 181, 152),
    cmap(49, 210, 190, 160),
    cmap(50, 217, 199, 171),
    cmap(51, 223, 207, 183),
    cmap(52, 230, 216, 194),
    cmap(53, 237, 225, 205),
    cmap(54, 243, 233, 217),
    cmap(55, 250, 242, 228),
)

COLOR_THEMES: Dict[str, Tuple[ColorMap, ...]] = {
    "black": BLACK_THEME,
    "dark": DARK_THEME,
    "gray": GRAY_THEME,
    "shake": SHAKE_THEME,
    "tan": TAN_THEME,
}


def get_color_theme(name: str) -> ColorTheme:
    """
    Look up a bundled color theme by name ("black", "dark", "gray", ...).

    Raises:
        UnknownThemeError: If no bundled theme has that name
    """
    key = name.strip().lower().replace("_theme", "")
    try:
        return ColorTheme.new(COLOR_THEMES[key])
    except KeyError:
        raise UnknownThemeError(
            f"Unknown color theme {name!r}. Available: {sorted(COLOR_THEMES)}"
        ) from None
