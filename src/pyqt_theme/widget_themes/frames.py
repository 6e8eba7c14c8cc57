"""
Semantic aliases for the frame types widget themes draw.

Widget themes repurpose the plastic, gtk and gleam box types as OS-style
widget parts. Use these names when assigning frames to widgets, e.g. a
default push button gets OS_DEFAULT_BUTTON_UP_BOX.
"""

from pyqt_theme.core.frame_types import FrameType

OS_BUTTON_UP_BOX = FrameType.GTK_UP_BOX
OS_CHECK_DOWN_BOX = FrameType.GTK_DOWN_BOX
OS_BUTTON_UP_FRAME = FrameType.GTK_UP_FRAME
OS_CHECK_DOWN_FRAME = FrameType.GTK_DOWN_FRAME
OS_PANEL_THIN_UP_BOX = FrameType.GTK_THIN_UP_BOX
OS_SPACER_THIN_DOWN_BOX = FrameType.GTK_THIN_DOWN_BOX
OS_PANEL_THIN_UP_FRAME = FrameType.GTK_THIN_UP_FRAME
OS_SPACER_THIN_DOWN_FRAME = FrameType.GTK_THIN_DOWN_FRAME
OS_RADIO_ROUND_DOWN_BOX = FrameType.GTK_ROUND_DOWN_BOX
OS_HOVERED_UP_BOX = FrameType.PLASTIC_UP_BOX
OS_DEPRESSED_DOWN_BOX = FrameType.PLASTIC_DOWN_BOX
OS_HOVERED_UP_FRAME = FrameType.PLASTIC_UP_FRAME
OS_DEPRESSED_DOWN_FRAME = FrameType.PLASTIC_DOWN_FRAME
OS_INPUT_THIN_DOWN_BOX = FrameType.PLASTIC_THIN_DOWN_BOX
OS_INPUT_THIN_DOWN_FRAME = FrameType.PLASTIC_ROUND_DOWN_BOX
OS_MINI_BUTTON_UP_BOX = FrameType.GLEAM_UP_BOX
OS_MINI_DEPRESSED_DOWN_BOX = FrameType.GLEAM_DOWN_BOX
OS_MINI_BUTTON_UP_FRAME = FrameType.GLEAM_UP_FRAME
OS_MINI_DEPRESSED_DOWN_FRAME = FrameType.GLEAM_DOWN_FRAME
OS_DEFAULT_BUTTON_UP_BOX = FrameType.GLEAM_THIN_UP_BOX
OS_DEFAULT_HOVERED_UP_BOX = FrameType.GLEAM_THIN_DOWN_BOX
OS_DEFAULT_DEPRESSED_DOWN_BOX = FrameType.GLEAM_ROUND_UP_BOX
OS_TOOLBAR_BUTTON_HOVER_BOX = FrameType.GLEAM_ROUND_DOWN_BOX
OS_TABS_BOX = FrameType.EMBOSSED_BOX
OS_SWATCH_BOX = FrameType.ENGRAVED_BOX
OS_SWATCH_FRAME = FrameType.ENGRAVED_FRAME
OS_BG_BOX = FrameType.FREE_BOXTYPE
