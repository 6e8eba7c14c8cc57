"""pytest configuration and fixtures for pyqt-theme tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtGui import QColor, QImage
from PyQt6.QtWidgets import QApplication

from pyqt_theme.core import StyleRegistry, reset_style_registry


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def registry():
    """Fresh style registry in stock state."""
    return StyleRegistry()


@pytest.fixture(autouse=True)
def _fresh_default_registry():
    reset_style_registry()
    yield
    reset_style_registry()


@pytest.fixture
def canvas(qapp):
    """40x40 white image to paint frames onto."""
    image = QImage(40, 40, QImage.Format.Format_RGB32)
    image.fill(QColor(255, 255, 255))
    return image
