"""
HTML gallery of example diagrams.

Collects ``*diagram.txt`` files from a directory and renders each one next
to its source on a single page.
"""

from __future__ import annotations

import html
import logging
from pathlib import Path

from railroad_dsl.compiler import compile
from railroad_dsl.core.errors import DiagramSyntaxError
from railroad_dsl.render.themes import DEFAULT_CSS

logger = logging.getLogger(__name__)

GALLERY_SUFFIX = "diagram.txt"
DEFAULT_GALLERY_NAME = "example_diagrams.html"


def discover_examples(directory: Path) -> list[Path]:
    """Return example diagram files in ``directory``, sorted by name."""
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.name.endswith(GALLERY_SUFFIX)),
        key=lambda p: p.name,
    )


def render_gallery(paths: list[Path], stylesheet: str = DEFAULT_CSS) -> str:
    """Render example files into one HTML page.

    Raises:
        DiagramSyntaxError: If an example fails to compile; the error is
            labelled with the example's path.
        OSError: If an example cannot be read.
    """
    parts = ["<html>"]
    for path in paths:
        logger.info("Generating from `%s`", path.name)
        source = path.read_text(encoding="utf-8")
        try:
            diagram = compile(source, stylesheet)
        except DiagramSyntaxError as e:
            raise e.with_path(str(path)) from e
        parts.append(f"<h3>Generated from <i>`{html.escape(path.name)}`</i></h3>")
        parts.append(f"<pre>{html.escape(source)}</pre><br>")
        parts.append(
            f'<div style="width: {diagram.width}px; height: auto; '
            f'max-height: 100%; max-width: 100%">{diagram.to_svg()}</div>'
        )
        parts.append("<hr>")
    parts.append("</html>")
    return "".join(parts)


def build_gallery(directory: Path, output: Path | None = None, stylesheet: str = DEFAULT_CSS) -> Path:
    """Write the gallery page for ``directory`` and return its path."""
    output = output or directory / DEFAULT_GALLERY_NAME
    page = render_gallery(discover_examples(directory), stylesheet)
    output.write_text(page, encoding="utf-8")
    logger.info("Written result to `%s`", output)
    return output
