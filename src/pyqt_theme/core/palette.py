"""
Indexed palette layout.

The palette is a fixed table of 256 RGB slots. Widgets refer to colors by
slot index, so reassigning a slot recolors every widget that uses it.
Slots 32..55 form a gray ramp whose 18th entry is the window background,
and slots 56..255 hold an RGB color cube.
"""

import math
from typing import List, Tuple

RGB = Tuple[int, int, int]

PALETTE_SIZE = 256

FOREGROUND = 0
BACKGROUND2 = 7
INACTIVE = 8
SELECTION = 15

GRAY_RAMP = 32
NUM_GRAY = 24
DARK3 = 39
DARK2 = 45
DARK1 = 47
BACKGROUND = 49
LIGHT1 = 50
LIGHT2 = 52
LIGHT3 = 54

COLOR_CUBE = 56
NUM_RED = 5
NUM_GREEN = 8
NUM_BLUE = 5

DEFAULT_BACKGROUND: RGB = (192, 192, 192)

# Base colors for slots 0..15
BASE_COLORS: Tuple[RGB, ...] = (
    (0, 0, 0),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
    (85, 85, 85),
    (198, 113, 113),
    (113, 198, 113),
    (142, 142, 56),
    (113, 113, 198),
    (142, 56, 142),
    (56, 142, 142),
    (0, 0, 128),
)


def gray_ramp(r: int, g: int, b: int) -> List[RGB]:
    """
    Compute the 24-entry gray ramp for a window background.

    Each channel follows its own gamma curve chosen so that the entry at
    BACKGROUND equals the requested color while the ends of the ramp stay
    at black and white.

    Args:
        r, g, b: Background color channels

    Returns:
        List of NUM_GRAY RGB tuples for slots GRAY_RAMP..GRAY_RAMP+23
    """
    anchor = (BACKGROUND - GRAY_RAMP) / (NUM_GRAY - 1.0)

    def exponent(channel: int) -> float:
        # log(0) and log(1) are unusable as curve exponents
        channel = min(max(channel, 1), 254)
        return math.log(channel / 255.0) / math.log(anchor)

    powers = [exponent(c) for c in (r, g, b)]
    ramp = []
    for i in range(NUM_GRAY):
        gray = i / (NUM_GRAY - 1.0)
        ramp.append(tuple(int(gray ** p * 255 + 0.5) for p in powers))
    return ramp


def color_cube_index(r_level: int, g_level: int, b_level: int) -> int:
    """Return the palette slot of a color cube entry given channel levels."""
    return COLOR_CUBE + (b_level * NUM_RED + r_level) * NUM_GREEN + g_level


def default_colormap() -> List[RGB]:
    """Build the stock 256-entry palette."""
    colors: List[RGB] = list(BASE_COLORS)

    # Slots 16..31 are a neutral ramp
    for i in range(16):
        v = round(255 * i / 15)
        colors.append((v, v, v))

    colors.extend(gray_ramp(*DEFAULT_BACKGROUND))

    cube: List[RGB] = [(0, 0, 0)] * (PALETTE_SIZE - COLOR_CUBE)
    for b in range(NUM_BLUE):
        for r in range(NUM_RED):
            for g in range(NUM_GREEN):
                cube[color_cube_index(r, g, b) - COLOR_CUBE] = (
                    round(r * 255 / (NUM_RED - 1)),
                    round(g * 255 / (NUM_GREEN - 1)),
                    round(b * 255 / (NUM_BLUE - 1)),
                )
    colors.extend(cube)
    return colors
