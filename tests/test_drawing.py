"""Tests for painter primitives and frame drawers painting onto an image."""

import pytest
from PyQt6.QtGui import QPainter

from pyqt_theme.core import FrameType
from pyqt_theme.drawing import (
    bevel,
    fill_rect,
    oval_svg,
    rect_outline,
    render_svg,
    rounded_rect_svg,
    vertical_gradient,
)
from pyqt_theme.widget_schemes import SchemeType, WidgetScheme
from pyqt_theme.widget_themes import ThemeType, WidgetTheme


def pixel(image, x, y):
    color = image.pixelColor(x, y)
    return (color.red(), color.green(), color.blue())


def paint(image, fn, *args, **kwargs):
    painter = QPainter(image)
    try:
        return fn(painter, *args, **kwargs)
    finally:
        painter.end()


def test_fill_rect(canvas):
    paint(canvas, fill_rect, 5, 5, 10, 10, (10, 20, 30))
    assert pixel(canvas, 5, 5) == (10, 20, 30)
    assert pixel(canvas, 14, 14) == (10, 20, 30)
    assert pixel(canvas, 15, 15) == (255, 255, 255)


def test_rect_outline_stays_inside(canvas):
    paint(canvas, rect_outline, 0, 0, 10, 10, (0, 0, 0))
    assert pixel(canvas, 0, 0) == (0, 0, 0)
    assert pixel(canvas, 9, 9) == (0, 0, 0)
    assert pixel(canvas, 5, 5) == (255, 255, 255)
    assert pixel(canvas, 10, 10) == (255, 255, 255)


def test_bevel_colors_edges(canvas):
    paint(canvas, bevel, 2, 2, 10, 10, (255, 0, 0), (0, 0, 255))
    assert pixel(canvas, 5, 2) == (255, 0, 0)
    assert pixel(canvas, 2, 5) == (255, 0, 0)
    assert pixel(canvas, 5, 11) == (0, 0, 255)
    assert pixel(canvas, 11, 5) == (0, 0, 255)


def test_vertical_gradient_runs_top_to_bottom(canvas):
    paint(canvas, vertical_gradient, 0, 0, 40, 40, (0, 0, 0), (200, 200, 200))
    top = pixel(canvas, 20, 0)
    bottom = pixel(canvas, 20, 39)
    assert top[0] < 20
    assert bottom[0] > 180


def test_svg_documents_render(canvas):
    svg = rounded_rect_svg(20, 10, 3, fill=(255, 0, 0), stroke=(0, 0, 0), gradient=None)
    assert 'fill="#ff0000"' in svg
    assert paint(canvas, render_svg, svg, 0, 0, 20, 10)
    assert pixel(canvas, 10, 5) == (255, 0, 0)

    oval = oval_svg(20, 20, gradient=((255, 255, 255), (0, 0, 0)))
    assert "linearGradient" in oval
    assert 'fill="url(#fill)"' in oval


def test_render_svg_rejects_invalid_document(canvas):
    assert not paint(canvas, render_svg, "<svg", 0, 0, 10, 10)
    assert not paint(canvas, render_svg, rounded_rect_svg(10, 10, 2), 0, 0, 0, 10)


def test_drawer_uses_inactive_color_when_disabled(registry, canvas):
    WidgetScheme.new(SchemeType.CLEAN).apply(registry)
    color = (200, 40, 40)

    painter = QPainter(canvas)
    try:
        registry.draw_frame(painter, FrameType.UP_BOX, 0, 0, 20, 20, color, active=True)
        registry.draw_frame(painter, FrameType.UP_BOX, 20, 20, 20, 20, color, active=False)
    finally:
        painter.end()

    assert pixel(canvas, 10, 10) == color
    assert pixel(canvas, 30, 30) == registry.inactive(color)


@pytest.mark.parametrize("theme_type", list(ThemeType))
def test_every_theme_paints_its_frames(registry, canvas, theme_type):
    WidgetTheme.new(theme_type).apply(registry)
    painter = QPainter(canvas)
    try:
        for frame in registry.registered_frames():
            canvas_color = (180, 180, 180)
            assert registry.draw_frame(painter, frame, 4, 4, 30, 24, canvas_color)
            assert registry.draw_frame(painter, frame, 4, 4, 30, 24, canvas_color, active=False)
    finally:
        painter.end()


@pytest.mark.parametrize("scheme_type", list(SchemeType))
def test_every_scheme_paints_its_frames(registry, canvas, scheme_type):
    WidgetScheme.new(scheme_type).apply(registry)
    painter = QPainter(canvas)
    try:
        for frame in registry.registered_frames():
            assert registry.draw_frame(painter, frame, 4, 4, 30, 24, (120, 140, 200))
    finally:
        painter.end()
    assert pixel(canvas, 19, 16) != (255, 255, 255)
