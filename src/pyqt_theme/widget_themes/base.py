"""
Shared frame construction for widget themes.

A widget theme is described by two records: ThemeColors, the palette it
installs, and FrameStyle, the colors and shape of its widget parts.
build_frame_table() turns a FrameStyle into drawers for every frame type a
theme overrides. Tables are built once per theme at import time so that
re-applying a theme registers the very same drawers.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pyqt_theme.core.color_utils import lighter
from pyqt_theme.core.frame_types import (
    FrameContext,
    FrameDrawer,
    FrameSpec,
    FrameType,
    activated_color,
)
from pyqt_theme.core.style_registry import StyleRegistry
from pyqt_theme.drawing import (
    bevel,
    fill_rect,
    hline,
    nested_bevels,
    oval_box,
    rect_outline,
    rounded_box,
    vertical_gradient,
)
from pyqt_theme.widget_themes import frames

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
Gradient = Tuple[RGB, RGB]


def _activated_gradient(ctx: FrameContext, gradient: Gradient) -> Gradient:
    return (activated_color(ctx, gradient[0]), activated_color(ctx, gradient[1]))


@dataclass(frozen=True)
class ThemeColors:
    """Global colors a widget theme installs."""
    background: RGB
    background2: RGB
    foreground: RGB
    inactive: RGB
    selection: RGB
    tooltip: RGB
    tooltip_text: RGB

    def apply(self, registry: StyleRegistry) -> None:
        registry.background(*self.background)
        registry.background2(*self.background2)
        registry.foreground(*self.foreground)
        registry.set_inactive_color(*self.inactive)
        registry.set_selection_color(*self.selection)
        registry.set_tooltip_colors(self.tooltip, self.tooltip_text)


@dataclass(frozen=True)
class FrameStyle:
    """
    Colors and geometry of a theme's widget parts.

    Bevelled styles draw classic two-ring 3D edges around the widget color;
    the others draw rounded, gradient-filled parts with a one pixel border.

    Attributes:
        bevelled: Classic 3D edges instead of gradients
        radius: Corner radius of buttons and panels
        light, light2, dark2, dark: Outer/inner bevel colors
        border: Normal button border
        up: Normal button gradient (top, bottom)
        hover, hover_border: Hovered button
        depressed, depressed_border: Pressed button
        default, default_border: Default push button
        input_fill, input_border: Text fields, check boxes and radio buttons
        highlight: Inner top line of raised parts, or None
        tab_border: Outline of tab panes
    """
    bevelled: bool = False
    radius: float = 0.0
    light: RGB = (255, 255, 255)
    light2: RGB = (227, 227, 227)
    dark2: RGB = (160, 160, 160)
    dark: RGB = (105, 105, 105)
    border: RGB = (112, 112, 112)
    up: Gradient = ((240, 240, 240), (220, 220, 220))
    hover: Gradient = ((236, 244, 252), (220, 236, 252))
    hover_border: RGB = (126, 180, 234)
    depressed: Gradient = ((218, 236, 252), (196, 224, 252))
    depressed_border: RGB = (86, 157, 229)
    default: Gradient = ((240, 240, 240), (220, 220, 220))
    default_border: RGB = (51, 153, 255)
    input_fill: RGB = (255, 255, 255)
    input_border: RGB = (171, 173, 179)
    highlight: Optional[RGB] = None
    tab_border: RGB = (137, 140, 149)


# ========== DRAWER FACTORIES ==========


def _raised_box(style: FrameStyle, gradient: Gradient, border: RGB) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        p = ctx.painter
        if style.bevelled:
            fill_rect(p, ctx.x + 2, ctx.y + 2, ctx.w - 4, ctx.h - 4, activated_color(ctx, ctx.color))
            nested_bevels(p, ctx.x, ctx.y, ctx.w, ctx.h, [
                (activated_color(ctx, style.light2), activated_color(ctx, style.dark)),
                (activated_color(ctx, style.light), activated_color(ctx, style.dark2)),
            ])
            return
        rounded_box(p, ctx.x, ctx.y, ctx.w, ctx.h, style.radius,
                    border=activated_color(ctx, border),
                    gradient=_activated_gradient(ctx, gradient))
        if style.highlight is not None and ctx.h > 4:
            inset = int(style.radius // 2) + 1
            hline(p, ctx.x + inset, ctx.y + 1, ctx.x + ctx.w - 1 - inset,
                  activated_color(ctx, style.highlight))
    return draw


def _raised_frame(style: FrameStyle, border: RGB) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        if style.bevelled:
            nested_bevels(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, [
                (activated_color(ctx, style.light2), activated_color(ctx, style.dark)),
                (activated_color(ctx, style.light), activated_color(ctx, style.dark2)),
            ])
            return
        rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, style.radius,
                    border=activated_color(ctx, border))
    return draw


def _sunken_box(style: FrameStyle, gradient: Optional[Gradient], border: RGB) -> FrameDrawer:
    """Pressed parts when gradient is given, input-like wells otherwise."""
    def draw(ctx: FrameContext) -> None:
        p = ctx.painter
        if style.bevelled:
            fill = style.input_fill if gradient is None else ctx.color
            fill_rect(p, ctx.x + 2, ctx.y + 2, ctx.w - 4, ctx.h - 4, activated_color(ctx, fill))
            nested_bevels(p, ctx.x, ctx.y, ctx.w, ctx.h, [
                (activated_color(ctx, style.dark2), activated_color(ctx, style.light)),
                (activated_color(ctx, style.dark), activated_color(ctx, style.light2)),
            ])
            return
        if gradient is None:
            rounded_box(p, ctx.x, ctx.y, ctx.w, ctx.h, style.radius / 2.0,
                        fill=activated_color(ctx, style.input_fill),
                        border=activated_color(ctx, border))
        else:
            rounded_box(p, ctx.x, ctx.y, ctx.w, ctx.h, style.radius,
                        border=activated_color(ctx, border),
                        gradient=_activated_gradient(ctx, gradient))
    return draw


def _sunken_frame(style: FrameStyle, border: RGB) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        if style.bevelled:
            nested_bevels(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, [
                (activated_color(ctx, style.dark2), activated_color(ctx, style.light)),
                (activated_color(ctx, style.dark), activated_color(ctx, style.light2)),
            ])
            return
        rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, style.radius / 2.0,
                    border=activated_color(ctx, border))
    return draw


def _thin_box(style: FrameStyle, raised: bool, filled: bool) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        top_left, bottom_right = (style.light, style.dark2) if raised else (style.dark2, style.light)
        if filled:
            fill_rect(ctx.painter, ctx.x + 1, ctx.y + 1, ctx.w - 2, ctx.h - 2,
                      activated_color(ctx, ctx.color))
        bevel(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
              activated_color(ctx, top_left), activated_color(ctx, bottom_right))
    return draw


def _round_box(style: FrameStyle, raised: bool) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        if raised:
            oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
                     border=activated_color(ctx, style.border),
                     gradient=_activated_gradient(ctx, style.up))
        else:
            oval_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
                     fill=activated_color(ctx, style.input_fill),
                     border=activated_color(ctx, style.dark if style.bevelled else style.input_border))
    return draw


def _tabs_box(style: FrameStyle) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        if style.bevelled:
            fill_rect(ctx.painter, ctx.x + 1, ctx.y + 1, ctx.w - 2, ctx.h - 2,
                      activated_color(ctx, ctx.color))
            bevel(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h,
                  activated_color(ctx, style.light), activated_color(ctx, style.dark))
            return
        rounded_box(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, style.radius / 2.0,
                    fill=activated_color(ctx, ctx.color),
                    border=activated_color(ctx, style.tab_border))
    return draw


def _swatch_box(style: FrameStyle, filled: bool) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        if filled:
            fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, ctx.color))
        rect_outline(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, activated_color(ctx, style.dark))
    return draw


def _bg_box(style: FrameStyle) -> FrameDrawer:
    def draw(ctx: FrameContext) -> None:
        color = activated_color(ctx, ctx.color)
        if style.bevelled:
            fill_rect(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, color)
        else:
            vertical_gradient(ctx.painter, ctx.x, ctx.y, ctx.w, ctx.h, lighter(color, 0.85), color)
    return draw


def build_frame_table(style: FrameStyle) -> Dict[FrameType, FrameSpec]:
    """
    Build the drawers for every frame type a widget theme overrides.

    Returns:
        Dict mapping frame types to FrameSpec (drawer plus content insets)
    """
    button_up = FrameSpec(_raised_box(style, style.up, style.border), 2, 2, 4, 4)
    button_frame = FrameSpec(_raised_frame(style, style.border), 2, 2, 4, 4)
    check_down = FrameSpec(_sunken_box(style, None, style.input_border), 2, 2, 4, 4)
    check_frame = FrameSpec(_sunken_frame(style, style.input_border), 2, 2, 4, 4)
    thin_up = FrameSpec(_thin_box(style, raised=True, filled=True), 1, 1, 2, 2)
    thin_up_frame = FrameSpec(_thin_box(style, raised=True, filled=False), 1, 1, 2, 2)
    thin_down = FrameSpec(_thin_box(style, raised=False, filled=True), 1, 1, 2, 2)
    thin_down_frame = FrameSpec(_thin_box(style, raised=False, filled=False), 1, 1, 2, 2)
    round_up = FrameSpec(_round_box(style, raised=True), 3, 3, 6, 6)
    round_down = FrameSpec(_round_box(style, raised=False), 3, 3, 6, 6)
    hovered = FrameSpec(_raised_box(style, style.hover, style.hover_border), 2, 2, 4, 4)
    hovered_frame = FrameSpec(_raised_frame(style, style.hover_border), 2, 2, 4, 4)
    depressed = FrameSpec(_sunken_box(style, style.depressed, style.depressed_border), 2, 2, 4, 4)
    depressed_frame = FrameSpec(_sunken_frame(style, style.depressed_border), 2, 2, 4, 4)
    default_up = FrameSpec(_raised_box(style, style.default, style.default_border), 2, 2, 4, 4)

    return {
        FrameType.UP_BOX: button_up,
        FrameType.DOWN_BOX: check_down,
        FrameType.UP_FRAME: button_frame,
        FrameType.DOWN_FRAME: check_frame,
        FrameType.THIN_UP_BOX: thin_up,
        FrameType.THIN_DOWN_BOX: thin_down,
        FrameType.THIN_UP_FRAME: thin_up_frame,
        FrameType.THIN_DOWN_FRAME: thin_down_frame,
        FrameType.ROUND_UP_BOX: round_up,
        FrameType.ROUND_DOWN_BOX: round_down,
        frames.OS_BUTTON_UP_BOX: button_up,
        frames.OS_CHECK_DOWN_BOX: check_down,
        frames.OS_BUTTON_UP_FRAME: button_frame,
        frames.OS_CHECK_DOWN_FRAME: check_frame,
        frames.OS_PANEL_THIN_UP_BOX: thin_up,
        frames.OS_SPACER_THIN_DOWN_BOX: thin_down,
        frames.OS_PANEL_THIN_UP_FRAME: thin_up_frame,
        frames.OS_SPACER_THIN_DOWN_FRAME: thin_down_frame,
        frames.OS_RADIO_ROUND_DOWN_BOX: round_down,
        frames.OS_HOVERED_UP_BOX: hovered,
        frames.OS_DEPRESSED_DOWN_BOX: depressed,
        frames.OS_HOVERED_UP_FRAME: hovered_frame,
        frames.OS_DEPRESSED_DOWN_FRAME: depressed_frame,
        frames.OS_INPUT_THIN_DOWN_BOX: check_down,
        frames.OS_INPUT_THIN_DOWN_FRAME: check_frame,
        frames.OS_MINI_BUTTON_UP_BOX: button_up,
        frames.OS_MINI_DEPRESSED_DOWN_BOX: depressed,
        frames.OS_MINI_BUTTON_UP_FRAME: button_frame,
        frames.OS_MINI_DEPRESSED_DOWN_FRAME: depressed_frame,
        frames.OS_DEFAULT_BUTTON_UP_BOX: default_up,
        frames.OS_DEFAULT_HOVERED_UP_BOX: hovered,
        frames.OS_DEFAULT_DEPRESSED_DOWN_BOX: depressed,
        frames.OS_TOOLBAR_BUTTON_HOVER_BOX: hovered,
        frames.OS_TABS_BOX: FrameSpec(_tabs_box(style), 2, 2, 4, 4),
        frames.OS_SWATCH_BOX: FrameSpec(_swatch_box(style, filled=True), 1, 1, 2, 2),
        frames.OS_SWATCH_FRAME: FrameSpec(_swatch_box(style, filled=False), 1, 1, 2, 2),
        frames.OS_BG_BOX: FrameSpec(_bg_box(style)),
    }


def register_frames(registry: StyleRegistry, table: Dict[FrameType, FrameSpec]) -> None:
    """Install every drawer of a frame table into the registry."""
    for frame, spec in table.items():
        registry.set_frame_type(frame, spec.drawer, spec.dx, spec.dy, spec.dw, spec.dh)
    logger.debug(f"Registered {len(table)} frame drawers")
