"""Tests for EnumDispatcher."""

from enum import Enum

import pytest

from pyqt_theme.core import EnumDispatcher


class Flavor(Enum):
    PLAIN = "plain"
    FANCY = "fancy"


class Other(Enum):
    X = "x"


def test_dispatch_forwards_arguments():
    dispatcher = EnumDispatcher(Flavor, {
        Flavor.PLAIN: lambda value: ("plain", value),
        Flavor.FANCY: lambda value, suffix="!": ("fancy", value + suffix),
    })
    assert dispatcher.dispatch(Flavor.PLAIN, 1) == ("plain", 1)
    assert dispatcher.dispatch(Flavor.FANCY, "a", suffix="?") == ("fancy", "a?")
    assert dispatcher.dispatch("fancy", "b") == ("fancy", "b!")


def test_missing_handler_is_rejected():
    with pytest.raises(ValueError, match="FANCY"):
        EnumDispatcher(Flavor, {Flavor.PLAIN: print})


def test_foreign_handler_is_rejected():
    with pytest.raises(ValueError):
        EnumDispatcher(Flavor, {Flavor.PLAIN: print, Flavor.FANCY: print, Other.X: print})


def test_registered_variants():
    dispatcher = EnumDispatcher(Flavor, {Flavor.FANCY: len, Flavor.PLAIN: str})
    assert dispatcher.get_registered_variants() == [Flavor.PLAIN, Flavor.FANCY]
    assert dispatcher.handler_for(Flavor.FANCY) is len
