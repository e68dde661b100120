"""Core railroad-dsl functionality: tokenizer, recognizer, expression IR, tree builder."""

from . import ir
from .builder import build_document, build_expression, parse, unescape
from .errors import DiagramSyntaxError, ErrorContext, RailroadDslError
from .parser import ParseNode, Rule, parse_document
from .tokenizer import Token, TokenKind, tokenize

__all__ = [
    "ir",
    "RailroadDslError",
    "DiagramSyntaxError",
    "ErrorContext",
    "Token",
    "TokenKind",
    "tokenize",
    "ParseNode",
    "Rule",
    "parse_document",
    "build_expression",
    "build_document",
    "parse",
    "unescape",
]
