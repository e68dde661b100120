"""
Diagram compilation: DSL source text to a renderable diagram.

Usage:
    from railroad_dsl import compile

    diagram = compile('["SELECT", <"*", \'column\'*",">]')
    svg = str(diagram)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from railroad_dsl.core.builder import parse
from railroad_dsl.core.errors import make_syntax_error
from railroad_dsl.core.ir.expressions import Expr
from railroad_dsl.render.nodes import (
    StandaloneDiagram,
    VerticalGrid,
    assemble,
    dimensions,
    standalone_svg,
)
from railroad_dsl.render.themes import DEFAULT_CSS

logger = logging.getLogger(__name__)


@dataclass
class CompiledDiagram:
    """
    A compiled document ready for output.

    Attributes:
        width: Overall width in pixels, padding included
        height: Overall height in pixels, padding included
        diagram: Renderable root (one diagram, or a grid of several);
            ``str(diagram)`` is standalone SVG with the stylesheet embedded
        expressions: Top-level expressions, one per diagram in the source
        stylesheet: CSS embedded in standalone SVG output
    """

    width: int
    height: int
    diagram: StandaloneDiagram | VerticalGrid
    expressions: list[Expr]
    stylesheet: str = DEFAULT_CSS

    def to_svg(self) -> str:
        """Render a standalone SVG document with the stylesheet embedded.

        Raises:
            RailroadDslError: If the diagram is nested too deeply to write out.
        """
        return standalone_svg(self.diagram, self.stylesheet)

    def __str__(self) -> str:
        return self.to_svg()


def compile(source: str, stylesheet: str = DEFAULT_CSS, *, strict: bool = False) -> CompiledDiagram:
    """Compile diagram DSL source.

    Args:
        source: Full DSL document text.
        stylesheet: CSS passed through to the SVG output uninterpreted.
        strict: Require exactly one top-level diagram.

    Returns:
        The compiled diagram with its pixel size.

    Raises:
        DiagramSyntaxError: If the source is malformed or nested too deeply
            to lay out.
    """
    expressions = parse(source, strict=strict)
    try:
        root = assemble(expressions, stylesheet)
        width, height = dimensions(root)
    except RecursionError:
        # Postfix runs such as "a"??? recognize without recursion but
        # still nest one layout level per operator.
        raise make_syntax_error("diagram nesting too deep", source, 0) from None
    logger.debug("Compiled %d diagram(s), %dx%d px", len(expressions), width, height)
    return CompiledDiagram(
        width=width,
        height=height,
        diagram=root,
        expressions=expressions,
        stylesheet=stylesheet,
    )
