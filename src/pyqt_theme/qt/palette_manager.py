"""
QPalette Manager for the style registry.

Translates the registry's indexed palette into Qt's role-based QPalette and
applies it application-wide.
"""

import logging
from typing import Optional

from PyQt6.QtGui import QPalette
from PyQt6.QtWidgets import QApplication

from pyqt_theme.core import palette as slots
from pyqt_theme.core.color_utils import WHITE, contrast, to_hex, to_qcolor
from pyqt_theme.core.style_registry import StyleRegistry

logger = logging.getLogger(__name__)


class PaletteManager:
    """
    Manages QPalette integration with a StyleRegistry.

    Provides methods to build a QPalette from the registry's palette slots
    and to apply or restore it on the running application.
    """

    def __init__(self, registry: StyleRegistry):
        """
        Initialize the palette manager with a registry.

        Args:
            registry: StyleRegistry whose slots feed the palette
        """
        self.registry = registry
        self._original_palette = None

    def create_palette(self) -> QPalette:
        """
        Create a QPalette from the registry's current colors.

        Returns:
            QPalette: Configured palette
        """
        palette = QPalette()
        reg = self.registry
        background = reg.get_color(slots.BACKGROUND)
        background2 = reg.get_color(slots.BACKGROUND2)
        foreground = reg.get_color(slots.FOREGROUND)
        selection = reg.get_color(slots.SELECTION)
        inactive = reg.get_color(slots.INACTIVE)

        # Window colors
        palette.setColor(QPalette.ColorRole.Window, to_qcolor(background))
        palette.setColor(QPalette.ColorRole.WindowText, to_qcolor(foreground))

        # Base colors (input fields, etc.)
        palette.setColor(QPalette.ColorRole.Base, to_qcolor(background2))
        palette.setColor(QPalette.ColorRole.AlternateBase, to_qcolor(reg.get_color(slots.LIGHT1)))
        palette.setColor(QPalette.ColorRole.Text, to_qcolor(contrast(foreground, background2)))
        palette.setColor(QPalette.ColorRole.PlaceholderText, to_qcolor(inactive))

        # Button colors
        palette.setColor(QPalette.ColorRole.Button, to_qcolor(background))
        palette.setColor(QPalette.ColorRole.ButtonText, to_qcolor(foreground))

        # Selection colors
        palette.setColor(QPalette.ColorRole.Highlight, to_qcolor(selection))
        palette.setColor(QPalette.ColorRole.HighlightedText, to_qcolor(contrast(WHITE, selection)))

        # Disabled colors
        for role in (QPalette.ColorRole.WindowText, QPalette.ColorRole.Text, QPalette.ColorRole.ButtonText):
            palette.setColor(QPalette.ColorGroup.Disabled, role, to_qcolor(inactive))

        # Tooltips
        palette.setColor(QPalette.ColorRole.ToolTipBase, to_qcolor(reg.tooltip_color))
        palette.setColor(QPalette.ColorRole.ToolTipText, to_qcolor(reg.tooltip_text_color))

        # 3D edge colors come from the gray ramp
        palette.setColor(QPalette.ColorRole.Light, to_qcolor(reg.get_color(slots.LIGHT3)))
        palette.setColor(QPalette.ColorRole.Midlight, to_qcolor(reg.get_color(slots.LIGHT1)))
        palette.setColor(QPalette.ColorRole.Mid, to_qcolor(reg.get_color(slots.DARK2)))
        palette.setColor(QPalette.ColorRole.Dark, to_qcolor(reg.get_color(slots.DARK3)))
        palette.setColor(QPalette.ColorRole.Shadow, to_qcolor(reg.get_color(slots.GRAY_RAMP)))

        return palette

    def apply_palette_to_application(self, app: Optional[QApplication] = None) -> bool:
        """
        Apply the registry palette to the entire application.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)

        Returns:
            bool: False if there is no application to apply to
        """
        if app is None:
            app = QApplication.instance()

        if app is None:
            logger.warning("No QApplication instance found, cannot apply palette")
            return False

        # Store original palette for restoration
        if self._original_palette is None:
            self._original_palette = app.palette()

        app.setPalette(self.create_palette())
        logger.debug("Applied registry palette to application")
        return True

    def restore_original_palette(self, app: Optional[QApplication] = None) -> None:
        """
        Restore the original application palette.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)
        """
        if app is None:
            app = QApplication.instance()

        if app is None or self._original_palette is None:
            logger.warning("Cannot restore original palette")
            return

        app.setPalette(self._original_palette)
        self._original_palette = None
        logger.debug("Restored original application palette")

    def get_palette_info(self) -> dict:
        """
        Get information about the current palette configuration.

        Returns:
            dict: Hex colors of the main palette roles
        """
        reg = self.registry
        return {
            "window_bg": to_hex(reg.get_color(slots.BACKGROUND)),
            "window_text": to_hex(reg.get_color(slots.FOREGROUND)),
            "base_bg": to_hex(reg.get_color(slots.BACKGROUND2)),
            "selection_bg": to_hex(reg.get_color(slots.SELECTION)),
            "disabled_text": to_hex(reg.get_color(slots.INACTIVE)),
            "tooltip_bg": to_hex(reg.tooltip_color),
            "tooltip_text": to_hex(reg.tooltip_text_color),
        }
