"""
Tree builder: shapes the recognizer's parse tree into expressions.

Each grammar rule maps to one expression type, except the postfix rules,
which fold outward from the innermost simple expression:

- ``opt_expr`` wraps once in Optional per ``?``
- ``rpt_expr`` becomes Repeat(body, separator) when a ``*`` tail is present
- ``lbox_expr`` becomes LabeledBox(inner, label) when a ``#`` tail is present
"""

from __future__ import annotations

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
from railroad_dsl.core.parser import ParseNode, Rule, parse_document


def unescape(raw: str) -> str:
    """Resolve backslash escapes in delimited text.

    A backslash followed by any character yields that character.

    Raises:
        ValueError: If the text ends with a lone backslash. The recognizer
            never captures such text.
    """
    chars: list[str] = []
    i = 0
    n = len(raw)
    while i < n:
        c = raw[i]
        if c == "\\":
            if i + 1 >= n:
                raise ValueError(f"Dangling escape at end of {raw!r}")
            chars.append(raw[i + 1])
            i += 2
        else:
            chars.append(c)
            i += 1
    return "".join(chars)


_LEAVES = {
    Rule.TERM: Term,
    Rule.NONTERM: NonTerm,
    Rule.COMMENT: Comment,
}

_CONTAINERS = {
    Rule.SEQUENCE: Sequence,
    Rule.STACK: Stack,
    Rule.CHOICE: Choice,
}


def build_expression(node: ParseNode) -> Expr:
    """Convert one parse tree node (and its subtree) into an expression."""
    if node.rule in _LEAVES:
        if node.text is None:
            raise ValueError(f"A {node.rule} node carries no text")
        return _LEAVES[node.rule](text=unescape(node.text))

    if node.rule == Rule.EMPTY:
        return Empty()

    if node.rule in _CONTAINERS:
        return _CONTAINERS[node.rule](items=[build_expression(c) for c in node.children])

    if node.rule == Rule.OPT_EXPR:
        expr = build_expression(node.children[0])
        for _ in node.children[1:]:
            expr = Optional(inner=expr)
        return expr

    if node.rule == Rule.RPT_EXPR:
        body = build_expression(node.children[0])
        if len(node.children) == 1:
            return body
        return Repeat(body=body, separator=build_expression(node.children[1]))

    if node.rule == Rule.LBOX_EXPR:
        inner = build_expression(node.children[0])
        if len(node.children) == 1:
            return inner
        return LabeledBox(inner=inner, label=build_expression(node.children[1]))

    raise ValueError(f"Cannot build an expression from a {node.rule} node")


def build_document(node: ParseNode) -> list[Expr]:
    """Convert a ``DOCUMENT`` node into its top-level expressions."""
    if node.rule != Rule.DOCUMENT:
        raise ValueError(f"Expected a document node, got {node.rule}")
    return [build_expression(child) for child in node.children]


def parse(source: str, strict: bool = False) -> list[Expr]:
    """Parse diagram source into its top-level expressions.

    Args:
        source: Full DSL document text.
        strict: Require exactly one top-level diagram.

    Returns:
        One expression per top-level diagram, in source order.

    Raises:
        DiagramSyntaxError: If the source is malformed.
    """
    return build_document(parse_document(source, strict=strict))
