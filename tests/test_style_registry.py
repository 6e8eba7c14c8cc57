"""Tests for StyleRegistry."""

import pytest
from PyQt6.QtGui import QPainter

from pyqt_theme.core import FrameType, StyleRegistry, get_style_registry, reset_style_registry
from pyqt_theme.core import palette
from pyqt_theme.exceptions import InvalidColorError


def test_starts_with_stock_palette(registry):
    assert registry.colors == tuple(palette.default_colormap())
    assert registry.registered_frames() == ()
    assert registry.redraw_count == 0


def test_set_and_get_color(registry):
    registry.set_color(100, 1, 2, 3)
    assert registry.get_color(100) == (1, 2, 3)
    registry.set_color(100, 4, 5, 6)
    assert registry.get_color(100) == (4, 5, 6)


@pytest.mark.parametrize("index", [-1, 256, 1000, True, 1.0])
def test_rejects_out_of_range_index(registry, index):
    with pytest.raises(InvalidColorError):
        registry.set_color(index, 0, 0, 0)
    with pytest.raises(InvalidColorError):
        registry.get_color(index)


def test_rejects_out_of_range_channel(registry):
    before = registry.colors
    with pytest.raises(InvalidColorError):
        registry.set_color(3, 0, 300, 0)
    assert registry.colors == before


def test_background_rewrites_gray_ramp(registry):
    registry.background(50, 60, 70)
    assert registry.get_color(palette.BACKGROUND) == (50, 60, 70)
    ramp = palette.gray_ramp(50, 60, 70)
    assert registry.get_color(palette.GRAY_RAMP) == ramp[0]
    assert registry.get_color(palette.DARK3) == ramp[palette.DARK3 - palette.GRAY_RAMP]
    assert registry.get_color(palette.LIGHT3) == ramp[palette.LIGHT3 - palette.GRAY_RAMP]


def test_named_color_setters(registry):
    registry.foreground(1, 1, 1)
    registry.background2(2, 2, 2)
    registry.set_selection_color(3, 3, 3)
    registry.set_inactive_color(4, 4, 4)
    registry.set_tooltip_colors((5, 5, 5), (6, 6, 6))
    assert registry.get_color(palette.FOREGROUND) == (1, 1, 1)
    assert registry.get_color(palette.BACKGROUND2) == (2, 2, 2)
    assert registry.get_color(palette.SELECTION) == (3, 3, 3)
    assert registry.get_color(palette.INACTIVE) == (4, 4, 4)
    assert registry.tooltip_color == (5, 5, 5)
    assert registry.tooltip_text_color == (6, 6, 6)


def test_inactive_uses_current_background(registry):
    registry.background(255, 255, 255)
    assert registry.inactive((0, 0, 0)) == (171, 171, 171)


def test_set_frame_type_last_writer_wins(registry):
    def first(ctx):
        pass

    def second(ctx):
        pass

    registry.set_frame_type(FrameType.UP_BOX, first, 1, 1, 2, 2)
    registry.set_frame_type(FrameType.UP_BOX, second)
    spec = registry.frame_spec(FrameType.UP_BOX)
    assert spec.drawer is second
    assert (spec.dx, spec.dy, spec.dw, spec.dh) == (0, 0, 0, 0)
    assert registry.frame_drawer(FrameType.UP_BOX) is second
    assert registry.frame_drawer(FrameType.DOWN_BOX) is None


def test_draw_frame_passes_context(registry, canvas):
    seen = []
    registry.set_frame_type(FrameType.DOWN_BOX, seen.append)

    painter = QPainter(canvas)
    try:
        assert registry.draw_frame(painter, FrameType.DOWN_BOX, 1, 2, 3, 4, (9, 9, 9), active=False)
        assert not registry.draw_frame(painter, FrameType.UP_BOX, 0, 0, 5, 5, (9, 9, 9))
    finally:
        painter.end()

    (ctx,) = seen
    assert (ctx.x, ctx.y, ctx.w, ctx.h) == (1, 2, 3, 4)
    assert ctx.color == (9, 9, 9)
    assert ctx.active is False
    assert ctx.registry is registry


def test_redraw_notifies_callbacks(registry):
    calls = []
    registry.register_redraw_callback(calls.append)
    registry.redraw()
    assert registry.redraw_count == 1
    assert calls == [registry]

    registry.unregister_redraw_callback(calls.append)
    registry.redraw()
    assert registry.redraw_count == 2
    assert len(calls) == 1


def test_failing_redraw_callback_does_not_stop_others(registry, caplog):
    calls = []

    def broken(reg):
        raise RuntimeError("boom")

    registry.register_redraw_callback(broken)
    registry.register_redraw_callback(calls.append)
    registry.redraw()

    assert calls == [registry]
    assert "boom" in caplog.text


def test_snapshot_and_reset(registry):
    stock = registry.snapshot()
    registry.set_color(20, 1, 2, 3)
    registry.set_frame_type(FrameType.UP_BOX, lambda ctx: None)
    registry.visible_focus = False
    assert registry.snapshot() != stock

    registry.reset()
    assert registry.snapshot() == stock


def test_default_registry_is_shared():
    first = get_style_registry()
    assert get_style_registry() is first
    reset_style_registry()
    assert get_style_registry() is not first
    assert isinstance(get_style_registry(), StyleRegistry)
