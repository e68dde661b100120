"""Rendering boundary: expression to ``railroad`` node conversion, themes, PNG output."""

from .nodes import (
    StandaloneDiagram,
    VerticalGrid,
    assemble,
    dimensions,
    standalone_svg,
    to_node,
    wrap_diagram,
)
from .raster import fit_size, svg_to_png
from .themes import BACKGROUNDS, DARK_CSS, DEFAULT_CSS, LIGHT_CSS, stylesheet_for

__all__ = [
    "StandaloneDiagram",
    "VerticalGrid",
    "assemble",
    "dimensions",
    "standalone_svg",
    "to_node",
    "wrap_diagram",
    "fit_size",
    "svg_to_png",
    "BACKGROUNDS",
    "DARK_CSS",
    "DEFAULT_CSS",
    "LIGHT_CSS",
    "stylesheet_for",
]
