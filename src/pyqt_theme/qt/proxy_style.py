"""
QProxyStyle that draws Qt primitives with registered frame drawers.

Each Qt primitive element is mapped, by widget state, to an ordered list of
candidate frame types. The first candidate with a registered drawer paints
the primitive; when none is registered the base style draws it as usual.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QPainter, QPalette, QPen
from PyQt6.QtWidgets import QProxyStyle, QStyle, QStyleFactory, QStyleOption

from pyqt_theme.core.frame_types import FrameType
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.widget_themes import frames

logger = logging.getLogger(__name__)

PE = QStyle.PrimitiveElement
State = QStyle.StateFlag

# (pressed, hovered, normal) candidates per primitive
_STATEFUL_PRIMITIVES: Dict[PE, Tuple[Sequence[FrameType], Sequence[FrameType], Sequence[FrameType]]] = {
    PE.PE_PanelButtonCommand: (
        (frames.OS_DEPRESSED_DOWN_BOX, FrameType.DOWN_BOX),
        (frames.OS_HOVERED_UP_BOX, FrameType.UP_BOX),
        (FrameType.UP_BOX,),
    ),
    PE.PE_PanelButtonTool: (
        (frames.OS_DEPRESSED_DOWN_BOX, FrameType.THIN_DOWN_BOX),
        (frames.OS_TOOLBAR_BUTTON_HOVER_BOX, FrameType.THIN_UP_BOX),
        (),
    ),
    PE.PE_PanelButtonBevel: (
        (FrameType.DOWN_BOX,),
        (frames.OS_HOVERED_UP_BOX, FrameType.UP_BOX),
        (FrameType.UP_BOX,),
    ),
}

# Primitives whose frame does not depend on press/hover state
_STATIC_PRIMITIVES: Dict[PE, Sequence[FrameType]] = {
    PE.PE_PanelLineEdit: (frames.OS_INPUT_THIN_DOWN_BOX, FrameType.DOWN_BOX),
    PE.PE_FrameLineEdit: (frames.OS_INPUT_THIN_DOWN_FRAME, FrameType.DOWN_FRAME),
    PE.PE_FrameGroupBox: (FrameType.ENGRAVED_FRAME, FrameType.THIN_DOWN_FRAME),
    PE.PE_FrameTabWidget: (frames.OS_TABS_BOX, FrameType.THIN_UP_BOX),
    PE.PE_PanelMenu: (FrameType.THIN_UP_BOX,),
    PE.PE_FrameMenu: (FrameType.THIN_UP_FRAME,),
    PE.PE_IndicatorCheckBox: (frames.OS_CHECK_DOWN_BOX, FrameType.DOWN_BOX),
    PE.PE_IndicatorRadioButton: (frames.OS_RADIO_ROUND_DOWN_BOX, FrameType.ROUND_DOWN_BOX),
}

# Primitives filled with the Base role (text fields, indicators) instead of Button
_BASE_FILLED = {
    PE.PE_PanelLineEdit,
    PE.PE_FrameLineEdit,
    PE.PE_IndicatorCheckBox,
    PE.PE_IndicatorRadioButton,
}


def candidate_frames(element: PE, state: State) -> Sequence[FrameType]:
    """
    Frame types that may draw a primitive in a given state, best first.

    Args:
        element: Qt primitive element
        state: Style option state flags

    Returns:
        Candidate frame types, empty if the primitive is not themed
    """
    if element in _STATEFUL_PRIMITIVES:
        pressed, hovered, normal = _STATEFUL_PRIMITIVES[element]
        if state & (State.State_Sunken | State.State_On):
            return pressed
        if state & State.State_MouseOver and state & State.State_Enabled:
            return hovered
        return normal
    if element == PE.PE_Frame:
        if state & State.State_Raised:
            return (FrameType.THIN_UP_FRAME,)
        if state & State.State_Sunken:
            return (FrameType.THIN_DOWN_FRAME,)
        return ()
    return _STATIC_PRIMITIVES.get(element, ())


class FrameProxyStyle(QProxyStyle):
    """
    Proxy style routing primitive drawing to a StyleRegistry.

    Also honors the registry's scrollbar size and focus-rectangle settings.
    """

    def __init__(self, registry: StyleRegistry, base_style: Optional[str] = "Fusion"):
        """
        Initialize the proxy style.

        Args:
            registry: Registry to look drawers up in
            base_style: Name of the QStyle drawing everything not themed
                        (None for the application default)
        """
        base = QStyleFactory.create(base_style) if base_style else None
        if base is not None:
            super().__init__(base)
        else:
            super().__init__()
        self.registry = registry

    def resolve_frame(self, element: PE, state: State) -> Optional[FrameType]:
        """First candidate frame type with a registered drawer, or None."""
        for frame in candidate_frames(element, state):
            if self.registry.frame_spec(frame) is not None:
                return frame
        return None

    def drawPrimitive(self, element, option: QStyleOption, painter: QPainter, widget=None):
        if element == PE.PE_FrameFocusRect and not self.registry.visible_focus:
            return

        frame = self.resolve_frame(element, option.state)
        if frame is None:
            super().drawPrimitive(element, option, painter, widget)
            return

        role = QPalette.ColorRole.Base if element in _BASE_FILLED else QPalette.ColorRole.Button
        color = option.palette.color(role).getRgb()[:3]
        active = bool(option.state & State.State_Enabled)
        rect = option.rect

        painter.save()
        try:
            self.registry.draw_frame(
                painter, frame, rect.x(), rect.y(), rect.width(), rect.height(), color, active
            )
        finally:
            painter.restore()

        if option.state & State.State_On:
            if element == PE.PE_IndicatorCheckBox:
                self._draw_check_mark(option, painter)
            elif element == PE.PE_IndicatorRadioButton:
                self._draw_radio_dot(option, painter)

    def pixelMetric(self, metric, option=None, widget=None):
        if metric == QStyle.PixelMetric.PM_ScrollBarExtent:
            return self.registry.scrollbar_size
        return super().pixelMetric(metric, option, widget)

    def _mark_color(self, option: QStyleOption):
        group = QPalette.ColorGroup.Normal if option.state & State.State_Enabled else QPalette.ColorGroup.Disabled
        return option.palette.color(group, QPalette.ColorRole.Text)

    def _draw_check_mark(self, option: QStyleOption, painter: QPainter) -> None:
        r = option.rect.adjusted(3, 3, -3, -3)
        pen = QPen(self._mark_color(option))
        pen.setWidthF(max(1.5, r.width() / 6.0))
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(pen)
        painter.drawLine(QPointF(r.left(), r.center().y()), QPointF(r.left() + r.width() * 0.4, r.bottom()))
        painter.drawLine(QPointF(r.left() + r.width() * 0.4, r.bottom()), QPointF(r.right(), r.top()))
        painter.restore()

    def _draw_radio_dot(self, option: QStyleOption, painter: QPainter) -> None:
        r = option.rect
        size = max(2, min(r.width(), r.height()) // 3)
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._mark_color(option))
        painter.drawEllipse(r.center(), size // 2 + 1, size // 2 + 1)
        painter.restore()
