"""
Style registry: the styling state every theme writes into.

Holds the indexed palette, the frame-type drawing table and a handful of
global look-and-feel settings. Themes, schemes and color themes mutate a
registry in place; the Qt binding reads it back when a redraw is requested.
The last write to a slot or frame type wins.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from PyQt6.QtGui import QPainter

from pyqt_theme.core import palette
from pyqt_theme.core.color_utils import RGB, inactive, validate_rgb
from pyqt_theme.core.frame_types import FrameContext, FrameDrawer, FrameSpec, FrameType
from pyqt_theme.exceptions import InvalidColorError

logger = logging.getLogger(__name__)

DEFAULT_TOOLTIP_COLOR: RGB = (255, 255, 224)
DEFAULT_TOOLTIP_TEXT_COLOR: RGB = (0, 0, 0)
DEFAULT_SCROLLBAR_SIZE = 16


class StyleRegistry:
    """
    Mutable styling state shared by all widgets of an application.

    The registry is plain data plus redraw notification; it does not paint
    anything itself. Register a redraw callback to push changes into a
    toolkit (see pyqt_theme.qt.ThemeHost).
    """

    def __init__(self):
        self._colors: List[RGB] = palette.default_colormap()
        self._frames: Dict[FrameType, FrameSpec] = {}
        self._redraw_callbacks: List[Callable[["StyleRegistry"], None]] = []
        self.redraw_count = 0
        self.tooltip_color: RGB = DEFAULT_TOOLTIP_COLOR
        self.tooltip_text_color: RGB = DEFAULT_TOOLTIP_TEXT_COLOR
        self.visible_focus = True
        self.scrollbar_size = DEFAULT_SCROLLBAR_SIZE

    # ========== PALETTE ==========

    def set_color(self, index: int, r: int, g: int, b: int) -> None:
        """
        Assign an RGB value to a palette slot.

        Raises:
            InvalidColorError: If index is outside 0-255 or a channel is not 8-bit
        """
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < palette.PALETTE_SIZE:
            raise InvalidColorError(f"Palette index out of range 0-255: {index!r}")
        self._colors[index] = validate_rgb(r, g, b)

    def get_color(self, index: int) -> RGB:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < palette.PALETTE_SIZE:
            raise InvalidColorError(f"Palette index out of range 0-255: {index!r}")
        return self._colors[index]

    def foreground(self, r: int, g: int, b: int) -> None:
        self.set_color(palette.FOREGROUND, r, g, b)

    def background(self, r: int, g: int, b: int) -> None:
        """Set the window background, rebuilding the whole gray ramp around it."""
        validate_rgb(r, g, b)
        for offset, color in enumerate(palette.gray_ramp(r, g, b)):
            self._colors[palette.GRAY_RAMP + offset] = color
        # The ramp reproduces the background within rounding; store it exactly
        self._colors[palette.BACKGROUND] = (r, g, b)

    def background2(self, r: int, g: int, b: int) -> None:
        """Set the background of text fields and browsers."""
        self.set_color(palette.BACKGROUND2, r, g, b)

    def set_selection_color(self, r: int, g: int, b: int) -> None:
        self.set_color(palette.SELECTION, r, g, b)

    def set_inactive_color(self, r: int, g: int, b: int) -> None:
        self.set_color(palette.INACTIVE, r, g, b)

    def set_tooltip_colors(self, background: RGB, text: RGB) -> None:
        self.tooltip_color = validate_rgb(*background)
        self.tooltip_text_color = validate_rgb(*text)

    def inactive(self, color: RGB) -> RGB:
        """Disabled-widget variant of color against the current background."""
        return inactive(color, self._colors[palette.BACKGROUND])

    @property
    def colors(self) -> Tuple[RGB, ...]:
        return tuple(self._colors)

    # ========== FRAME TYPES ==========

    def set_frame_type(
        self,
        frame: FrameType,
        drawer: FrameDrawer,
        dx: int = 0,
        dy: int = 0,
        dw: int = 0,
        dh: int = 0,
    ) -> None:
        """
        Replace the drawing routine of a frame type.

        Args:
            frame: Frame type to override
            drawer: Callable receiving a FrameContext
            dx, dy, dw, dh: Insets of the content area inside the frame
        """
        self._frames[FrameType(frame)] = FrameSpec(drawer, dx, dy, dw, dh)

    def frame_spec(self, frame: FrameType) -> Optional[FrameSpec]:
        return self._frames.get(FrameType(frame))

    def frame_drawer(self, frame: FrameType) -> Optional[FrameDrawer]:
        spec = self.frame_spec(frame)
        return spec.drawer if spec is not None else None

    def registered_frames(self) -> Tuple[FrameType, ...]:
        return tuple(sorted(self._frames))

    def draw_frame(
        self,
        painter: QPainter,
        frame: FrameType,
        x: int,
        y: int,
        w: int,
        h: int,
        color: RGB,
        active: bool = True,
    ) -> bool:
        """
        Draw a frame with its registered drawer.

        Returns:
            bool: False if no drawer is registered, so the caller can fall
            back to the toolkit's built-in routine
        """
        spec = self.frame_spec(frame)
        if spec is None:
            return False
        spec.drawer(FrameContext(painter, x, y, w, h, color, active, self))
        return True

    # ========== REDRAW ==========

    def register_redraw_callback(self, callback: Callable[["StyleRegistry"], None]) -> None:
        """
        Register a callback to be called when a redraw is requested.

        Args:
            callback: Function to call with this registry
        """
        self._redraw_callbacks.append(callback)

    def unregister_redraw_callback(self, callback: Callable[["StyleRegistry"], None]) -> None:
        if callback in self._redraw_callbacks:
            self._redraw_callbacks.remove(callback)

    def redraw(self) -> None:
        """Request that every widget be repainted with the current state."""
        self.redraw_count += 1
        for callback in list(self._redraw_callbacks):
            try:
                callback(self)
            except Exception as e:
                logger.warning(f"Redraw callback failed: {e}")

    # ========== STATE ==========

    def snapshot(self) -> dict:
        """Comparable copy of the observable styling state."""
        return {
            "colors": self.colors,
            "frames": dict(self._frames),
            "tooltip_color": self.tooltip_color,
            "tooltip_text_color": self.tooltip_text_color,
            "visible_focus": self.visible_focus,
            "scrollbar_size": self.scrollbar_size,
        }

    def reset(self) -> None:
        """Restore stock colors and drop every registered frame drawer."""
        self._colors = palette.default_colormap()
        self._frames.clear()
        self.tooltip_color = DEFAULT_TOOLTIP_COLOR
        self.tooltip_text_color = DEFAULT_TOOLTIP_TEXT_COLOR
        self.visible_focus = True
        self.scrollbar_size = DEFAULT_SCROLLBAR_SIZE
        logger.debug("Style registry reset to stock state")


_registry: Optional[StyleRegistry] = None


def get_style_registry() -> StyleRegistry:
    """Return the process-wide registry used when apply() gets no registry."""
    global _registry
    if _registry is None:
        _registry = StyleRegistry()
    return _registry


def reset_style_registry() -> None:
    """Discard the process-wide registry; the next lookup creates a fresh one."""
    global _registry
    _registry = None
