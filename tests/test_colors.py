"""Tests for named HTML colors."""

import pytest

from pyqt_theme import colors
from pyqt_theme.exceptions import UnknownThemeError


def test_constants():
    assert colors.RED == (255, 0, 0)
    assert colors.ALICE_BLUE == (240, 248, 255)


@pytest.mark.parametrize("name", ["AliceBlue", "alice blue", "ALICE_BLUE", "aliceblue"])
def test_named_color_is_forgiving(name):
    assert colors.named_color(name) == colors.ALICE_BLUE


def test_html_colors_are_valid_rgb():
    assert "darkslategray" in colors.HTML_COLORS
    for value in colors.HTML_COLORS.values():
        assert len(value) == 3
        assert all(0 <= channel <= 255 for channel in value)


def test_unknown_color():
    with pytest.raises(UnknownThemeError):
        colors.named_color("octarine")
