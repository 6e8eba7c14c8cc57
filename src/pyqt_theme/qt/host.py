"""
Binding between a StyleRegistry and a running QApplication.

The host installs a FrameProxyStyle and the registry palette, then listens
for redraw requests so that every theme applied afterwards shows up
immediately.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QApplication

from pyqt_theme.core.style_registry import StyleRegistry, get_style_registry
from pyqt_theme.qt.palette_manager import PaletteManager
from pyqt_theme.qt.proxy_style import FrameProxyStyle

logger = logging.getLogger(__name__)


class ThemeHost:
    """
    Keeps a QApplication in sync with a StyleRegistry.

    Applying color themes, widget themes or widget schemes to the registry
    triggers a redraw request; the host answers it by re-applying the
    palette and repainting all widgets.
    """

    def __init__(self, registry: Optional[StyleRegistry] = None, base_style: Optional[str] = "Fusion"):
        self.registry = registry or get_style_registry()
        self.palette_manager = PaletteManager(self.registry)
        self.base_style = base_style
        self.style: Optional[FrameProxyStyle] = None
        self._app: Optional[QApplication] = None
        self._original_style_name: Optional[str] = None

    @property
    def installed(self) -> bool:
        return self._app is not None

    def install(self, app: Optional[QApplication] = None) -> bool:
        """
        Install style and palette on the application and start listening.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)

        Returns:
            bool: False if there is no application to install on
        """
        if app is None:
            app = QApplication.instance()
        if app is None:
            logger.warning("No QApplication instance found, theme host not installed")
            return False
        if self._app is not None:
            return True

        self._app = app
        self._original_style_name = app.style().name()
        # QApplication takes ownership of the style and deletes it on replacement
        self.style = FrameProxyStyle(self.registry, self.base_style)
        app.setStyle(self.style)
        self.palette_manager.apply_palette_to_application(app)
        self.registry.register_redraw_callback(self._on_redraw)
        logger.info("Theme host installed")
        return True

    def uninstall(self) -> None:
        """Stop listening and restore the application's original style and palette."""
        if self._app is None:
            return
        self.registry.unregister_redraw_callback(self._on_redraw)
        if self._original_style_name:
            self._app.setStyle(self._original_style_name)
        self.palette_manager.restore_original_palette(self._app)
        self._app = None
        self.style = None
        logger.info("Theme host uninstalled")

    def _on_redraw(self, registry: StyleRegistry) -> None:
        self.palette_manager.apply_palette_to_application(self._app)
        for widget in self._app.allWidgets():
            widget.update()


def install_theme_host(
    app: Optional[QApplication] = None,
    registry: Optional[StyleRegistry] = None,
) -> ThemeHost:
    """Create a ThemeHost for the registry and install it on the application."""
    host = ThemeHost(registry)
    host.install(app)
    return host
