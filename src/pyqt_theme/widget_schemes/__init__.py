"""
Widget schemes.

Color-neutral frame drawing styles: aqua, clean, crystal, fluent, gleam
and an SVG-based scheme for rounded and oval frames.
"""

from .widget_scheme import SchemeType, WidgetScheme

__all__ = [
    "SchemeType",
    "WidgetScheme",
]
