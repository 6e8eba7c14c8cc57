"""Tests for the Qt binding: palette, proxy style and theme host."""

from PyQt6.QtCore import QRect
from PyQt6.QtGui import QColor, QPainter, QPalette
from PyQt6.QtWidgets import QStyle, QStyleOption

from pyqt_theme.core import FrameType, palette
from pyqt_theme.core.color_utils import to_hex
from pyqt_theme.qt import FrameProxyStyle, PaletteManager, ThemeHost, candidate_frames, install_theme_host
from pyqt_theme.widget_themes import ThemeType, WidgetTheme, frames
from pyqt_theme.widget_themes.dark import DARK_COLORS

PE = QStyle.PrimitiveElement
State = QStyle.StateFlag


def rgb(color: QColor):
    return (color.red(), color.green(), color.blue())


def make_option(state, button=(100, 120, 140), base=(250, 250, 250)):
    option = QStyleOption()
    option.rect = QRect(2, 2, 30, 20)
    option.state = state
    pal = QPalette()
    pal.setColor(QPalette.ColorRole.Button, QColor(*button))
    pal.setColor(QPalette.ColorRole.Base, QColor(*base))
    option.palette = pal
    return option


def test_palette_roles_follow_registry(qapp, registry):
    WidgetTheme.new(ThemeType.DARK).apply(registry)
    pal = PaletteManager(registry).create_palette()

    assert rgb(pal.color(QPalette.ColorRole.Window)) == DARK_COLORS.background
    assert rgb(pal.color(QPalette.ColorRole.Button)) == DARK_COLORS.background
    assert rgb(pal.color(QPalette.ColorRole.WindowText)) == DARK_COLORS.foreground
    assert rgb(pal.color(QPalette.ColorRole.Base)) == DARK_COLORS.background2
    assert rgb(pal.color(QPalette.ColorRole.Highlight)) == DARK_COLORS.selection
    assert rgb(pal.color(QPalette.ColorRole.ToolTipBase)) == DARK_COLORS.tooltip
    assert rgb(pal.color(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text)) == DARK_COLORS.inactive
    assert rgb(pal.color(QPalette.ColorRole.Dark)) == registry.get_color(palette.DARK3)


def test_palette_info(registry):
    info = PaletteManager(registry).get_palette_info()
    assert info["window_bg"] == to_hex(palette.DEFAULT_BACKGROUND)
    assert info["base_bg"] == "#ffffff"
    assert info["tooltip_bg"] == to_hex(registry.tooltip_color)


def test_apply_and_restore_palette(qapp, registry):
    original = rgb(qapp.palette().color(QPalette.ColorRole.Window))
    registry.background(10, 20, 30)
    manager = PaletteManager(registry)

    assert manager.apply_palette_to_application(qapp)
    assert rgb(qapp.palette().color(QPalette.ColorRole.Window)) == (10, 20, 30)

    manager.restore_original_palette(qapp)
    assert rgb(qapp.palette().color(QPalette.ColorRole.Window)) == original


def test_candidate_frames_by_state():
    enabled = State.State_Enabled
    assert candidate_frames(PE.PE_PanelButtonCommand, enabled) == (FrameType.UP_BOX,)
    assert candidate_frames(PE.PE_PanelButtonCommand, enabled | State.State_Sunken)[0] == frames.OS_DEPRESSED_DOWN_BOX
    assert candidate_frames(PE.PE_PanelButtonCommand, enabled | State.State_MouseOver)[0] == frames.OS_HOVERED_UP_BOX
    # Hover is ignored on disabled buttons
    assert candidate_frames(PE.PE_PanelButtonCommand, State.State_MouseOver) == (FrameType.UP_BOX,)
    assert candidate_frames(PE.PE_PanelButtonTool, enabled) == ()
    assert candidate_frames(PE.PE_FrameLineEdit, enabled) == (frames.OS_INPUT_THIN_DOWN_FRAME, FrameType.DOWN_FRAME)
    assert candidate_frames(PE.PE_Frame, State.State_Sunken) == (FrameType.THIN_DOWN_FRAME,)
    assert candidate_frames(PE.PE_IndicatorArrowDown, enabled) == ()


def test_resolve_frame_prefers_registered_candidate(qapp, registry):
    style = FrameProxyStyle(registry)
    state = State.State_Enabled | State.State_Sunken
    assert style.resolve_frame(PE.PE_PanelButtonCommand, state) is None

    registry.set_frame_type(FrameType.DOWN_BOX, lambda ctx: None)
    assert style.resolve_frame(PE.PE_PanelButtonCommand, state) == FrameType.DOWN_BOX

    registry.set_frame_type(frames.OS_DEPRESSED_DOWN_BOX, lambda ctx: None)
    assert style.resolve_frame(PE.PE_PanelButtonCommand, state) == frames.OS_DEPRESSED_DOWN_BOX


def test_draw_primitive_routes_to_registry(qapp, registry, canvas):
    seen = []
    registry.set_frame_type(FrameType.UP_BOX, seen.append)
    registry.set_frame_type(frames.OS_INPUT_THIN_DOWN_BOX, seen.append)
    style = FrameProxyStyle(registry)

    painter = QPainter(canvas)
    try:
        style.drawPrimitive(PE.PE_PanelButtonCommand, make_option(State.State_Enabled), painter)
        style.drawPrimitive(PE.PE_PanelButtonCommand, make_option(State.State_None), painter)
        style.drawPrimitive(PE.PE_PanelLineEdit, make_option(State.State_Enabled), painter)
    finally:
        painter.end()

    enabled, disabled, line_edit = seen
    assert (enabled.x, enabled.y, enabled.w, enabled.h) == (2, 2, 30, 20)
    assert enabled.color == (100, 120, 140)
    assert enabled.active is True
    assert disabled.active is False
    assert line_edit.color == (250, 250, 250)


def test_focus_rect_hidden_without_visible_focus(qapp, registry, canvas):
    registry.visible_focus = False
    style = FrameProxyStyle(registry)
    before = canvas.pixelColor(2, 2)

    painter = QPainter(canvas)
    try:
        style.drawPrimitive(PE.PE_FrameFocusRect, make_option(State.State_Enabled | State.State_HasFocus), painter)
    finally:
        painter.end()
    assert canvas.pixelColor(2, 2) == before


def test_scrollbar_extent_from_registry(qapp, registry):
    registry.scrollbar_size = 21
    style = FrameProxyStyle(registry)
    assert style.pixelMetric(QStyle.PixelMetric.PM_ScrollBarExtent) == 21


def test_theme_host_follows_redraws(qapp, registry):
    host = install_theme_host(qapp, registry)
    try:
        assert host.installed
        assert isinstance(qapp.style(), FrameProxyStyle)

        WidgetTheme.new(ThemeType.DARK).apply(registry)
        assert rgb(qapp.palette().color(QPalette.ColorRole.Window)) == DARK_COLORS.background
    finally:
        host.uninstall()

    assert not host.installed
    assert not isinstance(qapp.style(), FrameProxyStyle)
    count = registry.redraw_count
    registry.redraw()
    assert registry.redraw_count == count + 1


def test_theme_host_install_is_idempotent(qapp, registry):
    host = ThemeHost(registry)
    try:
        assert host.install(qapp)
        assert host.install(qapp)
        registry.redraw()
    finally:
        host.uninstall()
