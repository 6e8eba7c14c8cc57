"""Tests for the indexed palette layout and color arithmetic."""

import pytest

from pyqt_theme.core import palette
from pyqt_theme.core.color_utils import (
    BLACK,
    WHITE,
    color_average,
    contrast,
    contrast_ratio,
    darker,
    from_hex,
    inactive,
    lighter,
    to_hex,
    to_qcolor,
    validate_rgb,
)
from pyqt_theme.exceptions import InvalidColorError


def test_default_colormap_layout():
    colors = palette.default_colormap()
    assert len(colors) == palette.PALETTE_SIZE
    assert colors[palette.FOREGROUND] == (0, 0, 0)
    assert colors[palette.BACKGROUND2] == (255, 255, 255)
    assert colors[palette.SELECTION] == (0, 0, 128)
    assert colors[palette.BACKGROUND] == palette.DEFAULT_BACKGROUND
    assert colors[palette.COLOR_CUBE] == (0, 0, 0)
    assert colors[-1] == (255, 255, 255)


def test_color_cube_index_corners():
    assert palette.color_cube_index(0, 0, 0) == palette.COLOR_CUBE
    assert palette.color_cube_index(4, 7, 4) == palette.PALETTE_SIZE - 1


@pytest.mark.parametrize("background", [(192, 192, 192), (50, 50, 50), (212, 208, 200), (0, 0, 0)])
def test_gray_ramp_hits_background(background):
    ramp = palette.gray_ramp(*background)
    assert len(ramp) == palette.NUM_GRAY
    assert ramp[0] == (0, 0, 0)
    assert ramp[-1] == (255, 255, 255)
    anchor = ramp[palette.BACKGROUND - palette.GRAY_RAMP]
    for got, want in zip(anchor, background):
        assert abs(got - max(1, min(254, want))) <= 1


def test_gray_ramp_is_monotonic():
    ramp = palette.gray_ramp(120, 140, 160)
    for channel in range(3):
        values = [c[channel] for c in ramp]
        assert values == sorted(values)


def test_color_average_and_inactive():
    assert color_average((200, 100, 0), (0, 100, 200), 0.5) == (100, 100, 100)
    assert color_average((10, 20, 30), (250, 250, 250), 1.0) == (10, 20, 30)
    assert inactive((0, 0, 0), (255, 255, 255)) == color_average((0, 0, 0), (255, 255, 255), 0.33)


def test_lighter_and_darker():
    assert lighter((0, 0, 0), 0.5) == (128, 128, 128)
    assert darker((255, 255, 255), 0.5) == (128, 128, 128)
    assert lighter(WHITE) == WHITE
    assert darker(BLACK) == BLACK


def test_contrast_keeps_readable_foreground():
    assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0)
    assert contrast((0, 0, 0), (255, 255, 255)) == (0, 0, 0)


def test_contrast_replaces_unreadable_foreground():
    assert contrast((200, 200, 200), (255, 255, 255)) == BLACK
    assert contrast((60, 60, 60), (20, 20, 20)) == WHITE


def test_hex_conversion():
    assert to_hex((255, 0, 16)) == "#ff0010"
    assert from_hex("#ff0010") == (255, 0, 16)
    assert from_hex("abc") == (0xAA, 0xBB, 0xCC)
    with pytest.raises(InvalidColorError):
        from_hex("#12")
    with pytest.raises(InvalidColorError):
        from_hex("#zzzzzz")


def test_validate_rgb_rejects_out_of_range():
    assert validate_rgb(1, 2, 3) == (1, 2, 3)
    with pytest.raises(InvalidColorError):
        validate_rgb(256, 0, 0)
    with pytest.raises(InvalidColorError):
        validate_rgb(0, -1, 0)
    # InvalidColorError is also a ValueError
    with pytest.raises(ValueError):
        validate_rgb(0, 0, 1000)


def test_to_qcolor():
    color = to_qcolor((1, 2, 3))
    assert (color.red(), color.green(), color.blue()) == (1, 2, 3)
