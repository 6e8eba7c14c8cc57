"""
Color arithmetic on plain RGB tuples.

Palette slots and drawer colors are (r, g, b) tuples of 8-bit channels;
these helpers blend, lighten and contrast them, and convert to Qt colors
at the drawing boundary.
"""

import logging
from typing import Tuple

from PyQt6.QtGui import QColor
from wcag_contrast_ratio.contrast import rgb as wcag_rgb

from pyqt_theme.exceptions import InvalidColorError

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

INACTIVE_WEIGHT = 0.33


def _clamp(value: float) -> int:
    return max(0, min(255, int(value + 0.5)))


def color_average(c1: RGB, c2: RGB, weight: float) -> RGB:
    """
    Blend two colors channel by channel.

    Args:
        c1: First color
        c2: Second color
        weight: Share of c1 in the result (0.0 - 1.0)

    Returns:
        RGB: c1 * weight + c2 * (1 - weight)
    """
    return tuple(_clamp(a * weight + b * (1.0 - weight)) for a, b in zip(c1, c2))


def inactive(color: RGB, background: RGB) -> RGB:
    """Return the washed-out variant used for disabled widgets."""
    return color_average(color, background, INACTIVE_WEIGHT)


def lighter(color: RGB, amount: float = 0.67) -> RGB:
    """Blend color toward white; amount is the share of the original color."""
    return color_average(color, WHITE, amount)


def darker(color: RGB, amount: float = 0.67) -> RGB:
    """Blend color toward black; amount is the share of the original color."""
    return color_average(color, BLACK, amount)


def contrast_ratio(fg: RGB, bg: RGB) -> float:
    """WCAG contrast ratio between two colors."""
    return wcag_rgb(tuple(c / 255.0 for c in fg), tuple(c / 255.0 for c in bg))


def contrast(fg: RGB, bg: RGB, min_ratio: float = 4.5) -> RGB:
    """
    Pick a readable foreground for a background.

    Returns fg unchanged when it meets min_ratio against bg, otherwise black
    or white, whichever contrasts more with bg.
    """
    if contrast_ratio(fg, bg) >= min_ratio:
        return fg
    if contrast_ratio(BLACK, bg) >= contrast_ratio(WHITE, bg):
        return BLACK
    return WHITE


def validate_rgb(r: int, g: int, b: int) -> RGB:
    """Check that every channel fits in 8 bits."""
    for channel in (r, g, b):
        if not isinstance(channel, int) or not 0 <= channel <= 255:
            raise InvalidColorError(f"Color channel out of range 0-255: {channel!r}")
    return (r, g, b)


def to_hex(color: RGB) -> str:
    """Convert RGB tuple to hex color string (e.g., "#ff0000")."""
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def from_hex(value: str) -> RGB:
    """Parse "#rrggbb", "rrggbb" or "#rgb"."""
    text = value.strip().lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise InvalidColorError(f"Not a hex color: {value!r}")
    try:
        return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))
    except ValueError as e:
        raise InvalidColorError(f"Not a hex color: {value!r}") from e


def to_qcolor(color: RGB) -> QColor:
    """Convert RGB tuple to QColor object."""
    return QColor(*color)
