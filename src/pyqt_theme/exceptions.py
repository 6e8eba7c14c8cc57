"""Theme exceptions."""


class ThemeError(Exception):
    """Base class for theming errors."""


class InvalidColorError(ThemeError, ValueError):
    """Raised when a palette index or color channel is out of range."""


class UnknownThemeError(ThemeError, KeyError):
    """Raised when a theme, scheme or color name cannot be resolved."""
