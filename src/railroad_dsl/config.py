"""
Render configuration for railroad-dsl.

The RAILROAD_DSL_THEME environment variable sets the default theme for the
CLI when ``--theme`` is not given:

    - light (default)
    - dark

Usage:
    from railroad_dsl.config import RenderOptions

    options = RenderOptions(format="png", max_width=800)
    css = options.stylesheet()
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Theme(StrEnum):
    """Built-in stylesheets."""

    LIGHT = "light"
    DARK = "dark"


class OutputFormat(StrEnum):
    """Output file formats."""

    SVG = "svg"
    PNG = "png"


# Environment variable for the default theme
THEME_ENV_VAR = "RAILROAD_DSL_THEME"


def get_default_theme() -> Theme:
    """Get the default theme from RAILROAD_DSL_THEME.

    Returns:
        Theme: The configured theme. Defaults to light if the variable is
        not set or invalid.
    """
    value = os.environ.get(THEME_ENV_VAR, "").lower().strip()
    if not value:
        return Theme.LIGHT
    try:
        return Theme(value)
    except ValueError:
        logger.warning(
            "Unknown %s value '%s'. Valid values: light, dark. Defaulting to light.",
            THEME_ENV_VAR,
            value,
        )
        return Theme.LIGHT


class RenderOptions(BaseModel):
    """Options controlling how diagrams are rendered and written."""

    format: OutputFormat = Field(default=OutputFormat.SVG, description="Output file format")
    theme: Theme = Field(default_factory=get_default_theme, description="Built-in stylesheet")
    css: Path | None = Field(default=None, description="Stylesheet file overriding the theme")
    max_width: int | None = Field(default=None, gt=0, description="PNG width bound in pixels")
    max_height: int | None = Field(default=None, gt=0, description="PNG height bound in pixels")
    strict: bool = Field(default=False, description="Require exactly one diagram per input")

    model_config = ConfigDict(frozen=True)

    def stylesheet(self) -> str:
        """Return the CSS to embed: the override file if set, else the theme's.

        Raises:
            OSError: If the override file cannot be read.
        """
        if self.css is not None:
            return self.css.read_text(encoding="utf-8")
        from railroad_dsl.render.themes import stylesheet_for

        return stylesheet_for(self.theme)

    def background(self) -> str:
        """Canvas colour for raster output."""
        from railroad_dsl.render.themes import BACKGROUNDS

        return BACKGROUNDS[self.theme]

    def output_path(self, input_path: Path) -> Path:
        """Sibling output path for an input file, extension replaced."""
        return input_path.with_suffix(f".{self.format.value}")
