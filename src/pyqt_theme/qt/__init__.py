"""
Qt binding.

Pushes a StyleRegistry into a running QApplication: the palette through
QPalette, frame drawers through a QProxyStyle.
"""

from .palette_manager import PaletteManager
from .proxy_style import FrameProxyStyle, candidate_frames
from .host import ThemeHost, install_theme_host

__all__ = [
    "PaletteManager",
    "FrameProxyStyle",
    "candidate_frames",
    "ThemeHost",
    "install_theme_host",
]
