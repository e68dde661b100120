"""
Built-in stylesheets for rendered diagrams.

Selectors target the class names emitted by the ``railroad`` library.
"""

from __future__ import annotations

from railroad_dsl.config import Theme

LIGHT_CSS = """\
svg.railroad-diagram {
    background-color: hsl(30, 20%, 95%);
}
svg.railroad-diagram path {
    stroke-width: 3;
    stroke: black;
    fill: rgba(0, 0, 0, 0);
}
svg.railroad-diagram text {
    font: bold 14px monospace;
    text-anchor: middle;
    white-space: pre;
}
svg.railroad-diagram text.diagram-text {
    font-size: 12px;
}
svg.railroad-diagram text.diagram-arrow {
    font-size: 16px;
}
svg.railroad-diagram text.label {
    text-anchor: start;
}
svg.railroad-diagram text.comment {
    font: italic 12px monospace;
}
svg.railroad-diagram g.non-terminal text {
    font-style: italic;
}
svg.railroad-diagram rect {
    stroke-width: 3;
    stroke: black;
    fill: hsl(120, 100%, 90%);
}
svg.railroad-diagram rect.group-box {
    stroke: gray;
    stroke-dasharray: 10 5;
    fill: none;
}
"""

DARK_CSS = """\
svg.railroad-diagram {
    background-color: hsl(220, 15%, 16%);
}
svg.railroad-diagram path {
    stroke-width: 3;
    stroke: hsl(220, 15%, 80%);
    fill: rgba(0, 0, 0, 0);
}
svg.railroad-diagram text {
    font: bold 14px monospace;
    text-anchor: middle;
    white-space: pre;
    fill: hsl(220, 15%, 90%);
}
svg.railroad-diagram text.diagram-text {
    font-size: 12px;
}
svg.railroad-diagram text.diagram-arrow {
    font-size: 16px;
}
svg.railroad-diagram text.label {
    text-anchor: start;
}
svg.railroad-diagram text.comment {
    font: italic 12px monospace;
}
svg.railroad-diagram g.non-terminal text {
    font-style: italic;
}
svg.railroad-diagram rect {
    stroke-width: 3;
    stroke: hsl(220, 15%, 80%);
    fill: hsl(200, 40%, 28%);
}
svg.railroad-diagram rect.group-box {
    stroke: hsl(220, 10%, 55%);
    stroke-dasharray: 10 5;
    fill: none;
}
"""

DEFAULT_CSS = LIGHT_CSS

_STYLESHEETS: dict[Theme, str] = {
    Theme.LIGHT: LIGHT_CSS,
    Theme.DARK: DARK_CSS,
}

# Canvas colour for raster output, matching each stylesheet's background
BACKGROUNDS: dict[Theme, str] = {
    Theme.LIGHT: "#f5f2ef",
    Theme.DARK: "#23272f",
}


def stylesheet_for(theme: Theme) -> str:
    """Return the built-in stylesheet for a theme."""
    return _STYLESHEETS[theme]
