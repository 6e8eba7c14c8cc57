"""
Frame and box type identifiers.

Every widget border or fill is drawn by the routine registered for its
frame type. Themes and schemes replace those routines by registering a
FrameDrawer for a FrameType in the StyleRegistry.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Tuple

from PyQt6.QtGui import QPainter

if TYPE_CHECKING:
    from pyqt_theme.core.style_registry import StyleRegistry


class FrameType(IntEnum):
    """Stock box and frame types."""

    NO_BOX = 0
    FLAT_BOX = 1
    UP_BOX = 2
    DOWN_BOX = 3
    UP_FRAME = 4
    DOWN_FRAME = 5
    THIN_UP_BOX = 6
    THIN_DOWN_BOX = 7
    THIN_UP_FRAME = 8
    THIN_DOWN_FRAME = 9
    ENGRAVED_BOX = 10
    EMBOSSED_BOX = 11
    ENGRAVED_FRAME = 12
    EMBOSSED_FRAME = 13
    BORDER_BOX = 14
    SHADOW_BOX = 15
    BORDER_FRAME = 16
    SHADOW_FRAME = 17
    ROUNDED_BOX = 18
    RSHADOW_BOX = 19
    ROUNDED_FRAME = 20
    RFLAT_BOX = 21
    ROUND_UP_BOX = 22
    ROUND_DOWN_BOX = 23
    DIAMOND_UP_BOX = 24
    DIAMOND_DOWN_BOX = 25
    OVAL_BOX = 26
    OSHADOW_BOX = 27
    OVAL_FRAME = 28
    OFLAT_BOX = 29
    PLASTIC_UP_BOX = 30
    PLASTIC_DOWN_BOX = 31
    PLASTIC_UP_FRAME = 32
    PLASTIC_DOWN_FRAME = 33
    PLASTIC_THIN_UP_BOX = 34
    PLASTIC_THIN_DOWN_BOX = 35
    PLASTIC_ROUND_UP_BOX = 36
    PLASTIC_ROUND_DOWN_BOX = 37
    GTK_UP_BOX = 38
    GTK_DOWN_BOX = 39
    GTK_UP_FRAME = 40
    GTK_DOWN_FRAME = 41
    GTK_THIN_UP_BOX = 42
    GTK_THIN_DOWN_BOX = 43
    GTK_THIN_UP_FRAME = 44
    GTK_THIN_DOWN_FRAME = 45
    GTK_ROUND_UP_BOX = 46
    GTK_ROUND_DOWN_BOX = 47
    GLEAM_UP_BOX = 48
    GLEAM_DOWN_BOX = 49
    GLEAM_UP_FRAME = 50
    GLEAM_DOWN_FRAME = 51
    GLEAM_THIN_UP_BOX = 52
    GLEAM_THIN_DOWN_BOX = 53
    GLEAM_ROUND_UP_BOX = 54
    GLEAM_ROUND_DOWN_BOX = 55
    FREE_BOXTYPE = 56


# Registered by every widget theme and every widget scheme
STANDARD_FRAMES: Tuple[FrameType, ...] = (
    FrameType.UP_BOX,
    FrameType.DOWN_BOX,
    FrameType.UP_FRAME,
    FrameType.DOWN_FRAME,
    FrameType.THIN_UP_BOX,
    FrameType.THIN_DOWN_BOX,
    FrameType.THIN_UP_FRAME,
    FrameType.THIN_DOWN_FRAME,
    FrameType.ROUND_UP_BOX,
    FrameType.ROUND_DOWN_BOX,
)


@dataclass(frozen=True)
class FrameContext:
    """
    Everything a frame drawer needs for one draw call.

    Attributes:
        painter: Active painter on the target device
        x, y, w, h: Frame rectangle in device pixels
        color: Fill color requested by the widget
        active: False when the widget being drawn is disabled
        registry: Registry the drawer was looked up in
    """
    painter: QPainter
    x: int
    y: int
    w: int
    h: int
    color: Tuple[int, int, int]
    active: bool
    registry: "StyleRegistry"


FrameDrawer = Callable[[FrameContext], None]


@dataclass(frozen=True)
class FrameSpec:
    """A registered drawer and the insets of the area it leaves for content."""
    drawer: FrameDrawer
    dx: int = 0
    dy: int = 0
    dw: int = 0
    dh: int = 0


def activated_color(ctx: FrameContext, color: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Return color for enabled widgets, its inactive variant otherwise."""
    if ctx.active:
        return color
    return ctx.registry.inactive(color)
