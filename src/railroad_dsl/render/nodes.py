"""
Conversion from expressions to ``railroad`` diagram nodes.

This is the boundary with the rendering library: every expression type
maps onto one ``railroad`` node, each top-level expression is framed with
start/end markers, and several top-level diagrams are stacked in a
``VerticalGrid``.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterable

import railroad
from railroad import DIAGRAM_CLASS, DiagramItem, Style

from railroad_dsl.core.errors import RailroadDslError
from railroad_dsl.core.ir.expressions import (
    Choice,
    Comment,
    Empty,
    Expr,
    LabeledBox,
    NonTerm,
    Optional,
    Repeat,
    Sequence,
    Stack,
    Term,
)

SVG_NAMESPACES = {
    "xmlns": "http://www.w3.org/2000/svg",
    "xmlns:xlink": "http://www.w3.org/1999/xlink",
}


def to_node(expr: Expr) -> DiagramItem:
    """Convert an expression tree into the equivalent ``railroad`` node tree."""
    if isinstance(expr, Term):
        return railroad.Terminal(expr.text)
    if isinstance(expr, NonTerm):
        return railroad.NonTerminal(expr.text)
    if isinstance(expr, Comment):
        return railroad.Comment(expr.text)
    if isinstance(expr, Empty):
        return railroad.Skip()
    if isinstance(expr, Sequence):
        return railroad.Sequence(*[to_node(i) for i in expr.items])
    if isinstance(expr, Stack):
        return railroad.Stack(*[to_node(i) for i in expr.items])
    if isinstance(expr, Choice):
        return railroad.Choice(0, *[to_node(i) for i in expr.items])
    if isinstance(expr, Optional):
        return railroad.Optional(to_node(expr.inner))
    if isinstance(expr, Repeat):
        return railroad.OneOrMore(to_node(expr.body), to_node(expr.separator))
    if isinstance(expr, LabeledBox):
        return railroad.Group(to_node(expr.inner), to_node(expr.label))

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def standalone_svg(root: DiagramItem, css: str | None = None) -> str:
    """Render a formatted root as a complete SVG document."""
    buf = io.StringIO()
    try:
        root.writeStandalone(buf.write, css=css)
    except RecursionError:
        raise RailroadDslError("diagram nesting too deep to render") from None
    return buf.getvalue()


class StandaloneDiagram(railroad.Diagram):
    """A single diagram whose ``str()`` is standalone SVG markup."""

    stylesheet: str | None = None

    def __str__(self) -> str:
        return standalone_svg(self, self.stylesheet)


def wrap_diagram(expr: Expr) -> StandaloneDiagram:
    """Frame one top-level expression with start and end markers."""
    return StandaloneDiagram(railroad.Start(), to_node(expr), railroad.End())


class VerticalGrid(DiagramItem):
    """
    Independent diagrams stacked top to bottom in one SVG document.

    Each diagram keeps its own start/end markers and border; no track
    connects them.
    """

    stylesheet: str | None = None

    def __init__(self, diagrams: Iterable[railroad.Diagram]) -> None:
        DiagramItem.__init__(self, "svg", {"class": DIAGRAM_CLASS})
        self.diagrams = list(diagrams)
        self.width = 0
        self.height = 0
        for diagram in self.diagrams:
            if not diagram.formatted:
                diagram.format()
            width, height = _size(diagram)
            diagram.attrs["x"] = 0
            diagram.attrs["y"] = self.height
            diagram.addTo(self)
            self.width = max(self.width, width)
            self.height += height
        self.attrs["width"] = self.width
        self.attrs["height"] = self.height
        self.attrs["viewBox"] = f"0 0 {self.width} {self.height}"
        self.formatted = True

    def __repr__(self) -> str:
        return f"VerticalGrid({', '.join(repr(d) for d in self.diagrams)})"

    def __str__(self) -> str:
        return standalone_svg(self, self.stylesheet)

    def format(self, *args: object) -> VerticalGrid:
        return self

    def writeStandalone(self, write: Callable[[str], object], css: str | None = None) -> None:
        """Write a complete SVG document, embedding ``css`` if given."""
        if css is not None:
            self.children.insert(0, Style(css))
        self.attrs.update(SVG_NAMESPACES)
        try:
            DiagramItem.writeSvg(self, write)
        finally:
            if css is not None:
                self.children.pop(0)
            for name in SVG_NAMESPACES:
                del self.attrs[name]


def assemble(
    exprs: list[Expr], stylesheet: str | None = None
) -> StandaloneDiagram | VerticalGrid:
    """Build the renderable root for a document's top-level expressions.

    ``stylesheet`` is embedded when the root is converted with ``str()``.
    """
    if not exprs:
        raise ValueError("A document needs at least one diagram")
    diagrams = [wrap_diagram(e) for e in exprs]
    root = diagrams[0] if len(diagrams) == 1 else VerticalGrid(diagrams)
    root.stylesheet = stylesheet
    return root


def dimensions(root: railroad.Diagram | VerticalGrid) -> tuple[int, int]:
    """Return the pixel (width, height) of a renderable root, padding included."""
    if not root.formatted:
        root.format()
    return _size(root)


def _size(item: DiagramItem) -> tuple[int, int]:
    return round(float(item.attrs["width"])), round(float(item.attrs["height"]))
