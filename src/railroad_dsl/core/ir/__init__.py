"""
Intermediate representation for railroad diagrams.

Re-exports the expression node types from ``expressions``.
"""

from .expressions import (
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
    escape,
)

__all__ = [
    "Choice",
    "Comment",
    "Empty",
    "Expr",
    "LabeledBox",
    "NonTerm",
    "Optional",
    "Repeat",
    "Sequence",
    "Stack",
    "Term",
    "escape",
]
