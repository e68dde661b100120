"""
railroad-dsl - compile a compact text notation into railroad (syntax) diagrams.

    {} is a Stack          "" is a Term
    [] is a Sequence       '' is a NonTerm
    <> is a Choice         `` is a Comment
    ?  is an Optional      !  is Empty
    *  is a Repeat with separator
    #  is a Labeled box
"""

from __future__ import annotations

from ._version import get_version as _get_version

# Re-export commonly used types for convenience
from .compiler import CompiledDiagram, compile
from .core import ir
from .core.builder import parse
from .core.errors import DiagramSyntaxError, ErrorContext, RailroadDslError
from .render.themes import DARK_CSS, DEFAULT_CSS, LIGHT_CSS

__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "compile",
    "parse",
    "CompiledDiagram",
    "RailroadDslError",
    "DiagramSyntaxError",
    "ErrorContext",
    "DEFAULT_CSS",
    "LIGHT_CSS",
    "DARK_CSS",
]
