"""Tests for widget themes and widget schemes."""

import pytest

from pyqt_theme.core import STANDARD_FRAMES, FrameType, StyleRegistry, get_style_registry, palette
from pyqt_theme.exceptions import UnknownThemeError
from pyqt_theme.widget_schemes import SchemeType, WidgetScheme
from pyqt_theme.widget_themes import ThemeType, WidgetTheme, frames
from pyqt_theme.widget_themes.dark import DARK_COLORS, DARK_FRAMES
from pyqt_theme.widget_themes.high_contrast import HIGH_CONTRAST_COLORS
from pyqt_theme.core.color_utils import contrast_ratio

OS_FRAMES = [value for name, value in vars(frames).items() if name.startswith("OS_")]


@pytest.mark.parametrize("theme_type", list(ThemeType))
def test_every_theme_registers_its_frames(registry, theme_type):
    WidgetTheme.new(theme_type).apply(registry)

    for frame in STANDARD_FRAMES:
        assert registry.frame_drawer(frame) is not None, frame
    for frame in OS_FRAMES:
        assert registry.frame_drawer(frame) is not None, frame
    assert registry.redraw_count == 1


@pytest.mark.parametrize("theme_type", list(ThemeType))
def test_theme_apply_is_idempotent(registry, theme_type):
    theme = WidgetTheme.new(theme_type)
    theme.apply(registry)
    once = registry.snapshot()
    theme.apply(registry)
    assert registry.snapshot() == once
    assert registry.redraw_count == 2


def test_dark_theme_sets_colors(registry):
    WidgetTheme.new(ThemeType.DARK).apply(registry)

    assert registry.get_color(palette.BACKGROUND) == DARK_COLORS.background
    assert registry.get_color(palette.BACKGROUND2) == DARK_COLORS.background2
    assert registry.get_color(palette.FOREGROUND) == DARK_COLORS.foreground
    assert registry.get_color(palette.INACTIVE) == DARK_COLORS.inactive
    assert registry.get_color(palette.SELECTION) == DARK_COLORS.selection
    assert registry.tooltip_color == DARK_COLORS.tooltip
    assert registry.tooltip_text_color == DARK_COLORS.tooltip_text


def test_high_contrast_meets_aaa_contrast():
    assert contrast_ratio(HIGH_CONTRAST_COLORS.foreground, HIGH_CONTRAST_COLORS.background) >= 7.0
    assert contrast_ratio(HIGH_CONTRAST_COLORS.tooltip_text, HIGH_CONTRAST_COLORS.tooltip) >= 7.0


def test_last_theme_wins(registry):
    WidgetTheme.new(ThemeType.CLASSIC).apply(registry)
    WidgetTheme.new(ThemeType.DARK).apply(registry)

    fresh = StyleRegistry()
    WidgetTheme.new(ThemeType.DARK).apply(fresh)

    assert registry.colors == fresh.colors
    for frame, spec in DARK_FRAMES.items():
        assert registry.frame_spec(frame) == spec


def test_theme_defaults_to_process_registry():
    WidgetTheme.new(ThemeType.METRO).apply()
    assert get_style_registry().frame_drawer(FrameType.UP_BOX) is not None


def test_theme_value_semantics():
    assert WidgetTheme.new(ThemeType.AERO) == WidgetTheme(ThemeType.AERO)
    assert WidgetTheme.new(ThemeType.AERO) != WidgetTheme.new(ThemeType.BLUE)
    assert len({WidgetTheme(ThemeType.BLUE), WidgetTheme(ThemeType.BLUE)}) == 1
    assert WidgetTheme(ThemeType.BLUE).theme is ThemeType.BLUE


@pytest.mark.parametrize("name,expected", [
    ("classic", ThemeType.CLASSIC),
    ("AquaClassic", ThemeType.AQUA_CLASSIC),
    ("aqua-classic", ThemeType.AQUA_CLASSIC),
    ("HIGH_CONTRAST", ThemeType.HIGH_CONTRAST),
])
def test_theme_type_from_name(name, expected):
    assert ThemeType.from_name(name) is expected


def test_theme_type_from_unknown_name():
    with pytest.raises(UnknownThemeError):
        ThemeType.from_name("motif")


@pytest.mark.parametrize("scheme_type", list(SchemeType))
def test_every_scheme_registers_standard_frames_only(registry, scheme_type):
    before = registry.snapshot()
    WidgetScheme.new(scheme_type).apply(registry)

    for frame in STANDARD_FRAMES:
        assert registry.frame_drawer(frame) is not None, frame
    assert registry.colors == before["colors"]
    assert registry.tooltip_color == before["tooltip_color"]
    assert registry.redraw_count == 1


@pytest.mark.parametrize("scheme_type", list(SchemeType))
def test_scheme_apply_is_idempotent(registry, scheme_type):
    scheme = WidgetScheme.new(scheme_type)
    scheme.apply(registry)
    once = registry.snapshot()
    scheme.apply(registry)
    assert registry.snapshot() == once


def test_svg_scheme_registers_rounded_and_oval_frames(registry):
    WidgetScheme.new(SchemeType.SVG_BASED).apply(registry)
    for frame in (
        FrameType.ROUNDED_FRAME,
        FrameType.ROUNDED_BOX,
        FrameType.RFLAT_BOX,
        FrameType.OVAL_BOX,
        FrameType.OVAL_FRAME,
        FrameType.OFLAT_BOX,
    ):
        assert registry.frame_drawer(frame) is not None, frame


def test_scheme_type_from_name():
    assert SchemeType.from_name("SvgBased") is SchemeType.SVG_BASED
    assert SchemeType.from_name("gleam") is SchemeType.GLEAM
    with pytest.raises(UnknownThemeError):
        SchemeType.from_name("plastic")


def test_clean_scheme_then_dark_theme(registry):
    WidgetScheme.new(SchemeType.CLEAN).apply(registry)
    clean_up_box = registry.frame_drawer(FrameType.UP_BOX)
    WidgetTheme.new(ThemeType.DARK).apply(registry)

    assert registry.frame_drawer(FrameType.UP_BOX) is not clean_up_box
    for frame in STANDARD_FRAMES:
        assert registry.frame_spec(frame) == DARK_FRAMES[frame]
    assert registry.get_color(palette.BACKGROUND) == DARK_COLORS.background
    assert registry.get_color(palette.FOREGROUND) == DARK_COLORS.foreground


def test_dark_theme_then_clean_scheme_keeps_dark_colors(registry):
    WidgetTheme.new(ThemeType.DARK).apply(registry)
    colors = registry.colors
    WidgetScheme.new(SchemeType.CLEAN).apply(registry)
    assert registry.colors == colors
    assert registry.frame_spec(FrameType.UP_BOX) != DARK_FRAMES[FrameType.UP_BOX]
