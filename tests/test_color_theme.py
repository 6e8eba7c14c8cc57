"""Tests for color maps, color themes and the bundled tables."""

import json

import pytest

from pyqt_theme.color_themes import (
    BLACK_THEME,
    COLOR_THEMES,
    DARK_THEME,
    GRAY_THEME,
    SHAKE_THEME,
    TAN_THEME,
    get_color_theme,
)
from pyqt_theme.core import ColorMap, ColorTheme, cmap, palette
from pyqt_theme.exceptions import InvalidColorError, ThemeError, UnknownThemeError


def test_color_map_validates():
    assert cmap(5, 1, 2, 3) == ColorMap(5, 1, 2, 3)
    assert cmap(5, 1, 2, 3).rgb == (1, 2, 3)
    with pytest.raises(InvalidColorError):
        ColorMap(256, 0, 0, 0)
    with pytest.raises(InvalidColorError):
        ColorMap(0, 0, 0, 256)
    with pytest.raises(InvalidColorError):
        ColorMap(True, 0, 0, 0)


def test_theme_is_faithful_ordered_copy():
    maps = [cmap(3, 1, 1, 1), cmap(1, 2, 2, 2), cmap(3, 9, 9, 9)]
    theme = ColorTheme.new(maps)
    maps.append(cmap(4, 0, 0, 0))

    assert theme.maps == (cmap(3, 1, 1, 1), cmap(1, 2, 2, 2), cmap(3, 9, 9, 9))
    assert list(theme) == list(theme.maps)
    assert len(theme) == 3
    assert ColorTheme.from_colormap(theme.maps) == theme


def test_empty_theme_still_redraws(registry):
    before = registry.colors
    ColorTheme.new([]).apply(registry)
    assert registry.colors == before
    assert registry.redraw_count == 1


def test_apply_writes_slots_and_leaves_others(registry):
    before = registry.colors
    ColorTheme.new([cmap(0, 10, 20, 30), cmap(200, 40, 50, 60)]).apply(registry)

    assert registry.get_color(0) == (10, 20, 30)
    assert registry.get_color(200) == (40, 50, 60)
    for index in range(palette.PALETTE_SIZE):
        if index not in (0, 200):
            assert registry.get_color(index) == before[index]
    assert registry.redraw_count == 1


def test_later_map_for_same_slot_wins(registry):
    ColorTheme.new([cmap(9, 1, 1, 1), cmap(9, 2, 2, 2)]).apply(registry)
    assert registry.get_color(9) == (2, 2, 2)


def test_apply_is_idempotent(registry):
    theme = ColorTheme.new(TAN_THEME)
    theme.apply(registry)
    once = registry.snapshot()
    theme.apply(registry)
    assert registry.snapshot() == once


def test_apply_uses_default_registry():
    from pyqt_theme.core import get_style_registry

    ColorTheme.new([cmap(1, 7, 7, 7)]).apply()
    assert get_style_registry().get_color(1) == (7, 7, 7)


def test_json_roundtrip(tmp_path):
    path = tmp_path / "theme.json"
    theme = ColorTheme.new(SHAKE_THEME)
    assert theme.save_to_json(path)
    assert ColorTheme.load_from_json(path) == theme


def test_from_dict_accepts_lists():
    theme = ColorTheme.from_dict({"colors": [[1, 2, 3, 4], {"index": 5, "r": 6, "g": 7, "b": 8}]})
    assert theme.maps == (cmap(1, 2, 3, 4), cmap(5, 6, 7, 8))


def test_load_from_json_errors(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")
    with pytest.raises(ThemeError):
        ColorTheme.load_from_json(broken)
    with pytest.raises(ThemeError):
        ColorTheme.load_from_json(tmp_path / "missing.json")

    # Valid JSON with the wrong structure
    for name, content in [
        ("list.json", "[1, 2]"),
        ("missing_key.json", '{"colors": [{"r": 1}]}'),
        ("short_entry.json", '{"colors": [[1, 2]]}'),
        ("scalar_entry.json", '{"colors": [7]}'),
    ]:
        path = tmp_path / name
        path.write_text(content)
        with pytest.raises(ThemeError):
            ColorTheme.load_from_json(path)


def test_load_from_json_keeps_color_errors(tmp_path):
    path = tmp_path / "range.json"
    path.write_text('{"colors": [[300, 0, 0, 0]]}')
    with pytest.raises(InvalidColorError):
        ColorTheme.load_from_json(path)


def test_save_to_json_reports_failure(tmp_path):
    assert not ColorTheme.new(GRAY_THEME).save_to_json(tmp_path / "no" / "such" / "dir.json")


@pytest.mark.parametrize("table,background", [
    (BLACK_THEME, (30, 30, 30)),
    (DARK_THEME, (50, 50, 50)),
    (GRAY_THEME, (160, 160, 160)),
    (SHAKE_THEME, (200, 222, 210)),
    (TAN_THEME, (210, 190, 160)),
])
def test_bundled_tables(registry, table, background):
    indices = [m.index for m in table]
    assert indices == list(range(16)) + list(range(palette.GRAY_RAMP, palette.GRAY_RAMP + palette.NUM_GRAY))

    ColorTheme.new(table).apply(registry)
    assert registry.get_color(palette.BACKGROUND) == background
    # Color cube is not part of any bundled table
    assert registry.get_color(palette.COLOR_CUBE + 10) == palette.default_colormap()[palette.COLOR_CUBE + 10]


def test_get_color_theme():
    assert set(COLOR_THEMES) == {"black", "dark", "gray", "shake", "tan"}
    assert get_color_theme("dark") == ColorTheme.new(DARK_THEME)
    assert get_color_theme("TAN_THEME") == ColorTheme.new(TAN_THEME)
    with pytest.raises(UnknownThemeError):
        get_color_theme("purple")
    # UnknownThemeError is also a KeyError
    with pytest.raises(KeyError):
        get_color_theme("purple")


def test_second_theme_overwrites_first(registry):
    ColorTheme.new([cmap(1, 0, 0, 0)]).apply(registry)
    assert registry.get_color(1) == (0, 0, 0)
    ColorTheme.new([cmap(1, 255, 255, 255)]).apply(registry)
    assert registry.get_color(1) == (255, 255, 255)
    assert registry.redraw_count == 2
