"""
Declarative theme selection.

A ThemeConfig names at most one color theme, one widget theme and one widget
scheme. It can be built from environment variables or a JSON file and applied
to a style registry in a fixed order: scheme, widget theme, color theme.
Later layers win where they overlap.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from pyqt_theme.color_themes import get_color_theme
from pyqt_theme.core.style_registry import StyleRegistry, get_style_registry
from pyqt_theme.exceptions import ThemeError
from pyqt_theme.widget_schemes import SchemeType, WidgetScheme
from pyqt_theme.widget_themes import ThemeType, WidgetTheme

logger = logging.getLogger(__name__)

ENV_COLOR_THEME = "PYQT_THEME_COLOR_THEME"
ENV_WIDGET_THEME = "PYQT_THEME_WIDGET_THEME"
ENV_WIDGET_SCHEME = "PYQT_THEME_WIDGET_SCHEME"


@dataclass
class ThemeConfig:
    """Names of the themes to apply; None leaves that layer alone."""

    color_theme: Optional[str] = None
    widget_theme: Optional[str] = None
    widget_scheme: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ThemeConfig":
        """Read theme names from PYQT_THEME_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            color_theme=env.get(ENV_COLOR_THEME) or None,
            widget_theme=env.get(ENV_WIDGET_THEME) or None,
            widget_scheme=env.get(ENV_WIDGET_SCHEME) or None,
        )

    @classmethod
    def from_dict(cls, data: Mapping) -> "ThemeConfig":
        unknown = set(data) - {"color_theme", "widget_theme", "widget_scheme"}
        if unknown:
            raise ThemeError(f"Unknown theme config keys: {sorted(unknown)}")
        for key, value in data.items():
            if value is not None and not isinstance(value, str):
                raise ThemeError(f"Theme config {key!r} must be a name or null, got {value!r}")
        return cls(**data)

    @classmethod
    def from_json(cls, config_path: Union[str, Path]) -> "ThemeConfig":
        """
        Load a theme config from a JSON file.

        Raises:
            ThemeError: If the file cannot be read or parsed
        """
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ThemeError(f"Failed to load theme config from {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ThemeError(f"Theme config in {config_path} must be a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return asdict(self)

    def save_to_json(self, config_path: Union[str, Path]) -> bool:
        """
        Save theme config to a JSON file.

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            with open(config_path, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
            logger.info(f"Theme config saved to {config_path}")
            return True
        except OSError as e:
            logger.error(f"Failed to save theme config to {config_path}: {e}")
            return False

    def apply(self, registry: Optional[StyleRegistry] = None) -> StyleRegistry:
        """
        Apply scheme, widget theme and color theme, in that order.

        All names are resolved before anything is applied, so an unknown
        name leaves the registry untouched.

        Raises:
            UnknownThemeError: If any configured name is unknown
        """
        registry = registry or get_style_registry()

        scheme = WidgetScheme.new(SchemeType.from_name(self.widget_scheme)) if self.widget_scheme else None
        theme = WidgetTheme.new(ThemeType.from_name(self.widget_theme)) if self.widget_theme else None
        colors = get_color_theme(self.color_theme) if self.color_theme else None

        if scheme is not None:
            scheme.apply(registry)
        if theme is not None:
            theme.apply(registry)
        if colors is not None:
            colors.apply(registry)

        logger.debug(f"Theme config applied: {self}")
        return registry
