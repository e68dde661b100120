"""
Recursive descent recognizer for the railroad diagram DSL.

Produces a concrete parse tree that mirrors the grammar one node per rule;
shaping it into expressions is left to ``railroad_dsl.core.builder``.

Grammar (postfix binding tightest to loosest: ``?``, ``*``, ``#``):
    document    → diagram (diagram)* EOF
    diagram     → lbox_expr
    lbox_expr   → rpt_expr ("#" rpt_expr)?
    rpt_expr    → opt_expr ("*" opt_expr)?
    opt_expr    → simple_expr ("?")*
    simple_expr → term | nonterm | comment | empty | sequence | stack | choice
    term        → '"' ("\\" ANY | not '"')* '"'
    nonterm     → "'" ("\\" ANY | not "'")* "'"
    comment     → "`" ("\\" ANY | not "`")* "`"
    empty       → "!"
    sequence    → "[" list "]"
    stack       → "{" list "}"
    choice      → "<" list ">"
    list        → lbox_expr ("," lbox_expr)*
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum, auto

from railroad_dsl.core.errors import DiagramSyntaxError, make_syntax_error
from railroad_dsl.core.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


class Rule(StrEnum):
    """Grammar rules that appear as parse tree nodes."""

    DOCUMENT = auto()
    LBOX_EXPR = auto()
    RPT_EXPR = auto()
    OPT_EXPR = auto()
    OPTIONAL_MARK = auto()
    TERM = auto()
    NONTERM = auto()
    COMMENT = auto()
    EMPTY = auto()
    SEQUENCE = auto()
    STACK = auto()
    CHOICE = auto()


@dataclass
class ParseNode:
    """
    A node of the concrete parse tree.

    ``text`` holds the raw delimited text (escapes included) for
    ``TERM``/``NONTERM``/``COMMENT`` and is ``None`` otherwise.
    ``start``/``end`` are character offsets into the source.
    """

    rule: Rule
    start: int
    end: int
    text: str | None = None
    children: list[ParseNode] = field(default_factory=list)


# Human-readable names used in "expected ..." messages
_DESCRIPTIONS: dict[TokenKind, str] = {
    TokenKind.TERM: "term",
    TokenKind.NONTERM: "non-terminal",
    TokenKind.COMMENT: "comment",
    TokenKind.BANG: "'!'",
    TokenKind.LBRACKET: "'['",
    TokenKind.RBRACKET: "']'",
    TokenKind.LBRACE: "'{'",
    TokenKind.RBRACE: "'}'",
    TokenKind.LANGLE: "'<'",
    TokenKind.RANGLE: "'>'",
    TokenKind.COMMA: "','",
    TokenKind.QUESTION: "'?'",
    TokenKind.STAR: "'*'",
    TokenKind.HASH: "'#'",
    TokenKind.EOF: "end of input",
}

_LEAVES: dict[TokenKind, Rule] = {
    TokenKind.TERM: Rule.TERM,
    TokenKind.NONTERM: Rule.NONTERM,
    TokenKind.COMMENT: Rule.COMMENT,
}

# Opening bracket -> (closing bracket, rule)
_BRACKETS: dict[TokenKind, tuple[TokenKind, Rule]] = {
    TokenKind.LBRACKET: (TokenKind.RBRACKET, Rule.SEQUENCE),
    TokenKind.LBRACE: (TokenKind.RBRACE, Rule.STACK),
    TokenKind.LANGLE: (TokenKind.RANGLE, Rule.CHOICE),
}

_QUOTE_NAMES = {'"': "term", "'": "non-terminal", "`": "comment"}


class _Parser:
    """Recursive descent parser over a token list."""

    def __init__(self, source: str, tokens: list[Token]) -> None:
        self.source = source
        self.tokens = tokens
        self.pos = 0
        # Constructs tried and rejected at the current token
        self.expected: list[str] = []

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        self.expected = []
        return tok

    def check(self, kind: TokenKind) -> bool:
        """Test the current token, remembering the attempt on mismatch."""
        if self.current.kind == kind:
            return True
        description = _DESCRIPTIONS[kind]
        if description not in self.expected:
            self.expected.append(description)
        return False

    def match(self, kind: TokenKind) -> Token | None:
        if self.check(kind):
            return self.advance()
        return None

    def expect(self, kind: TokenKind) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error()

    def error(self) -> DiagramSyntaxError:
        """Build the error for a mismatch at the current token."""
        tok = self.current
        expected = _join(self.expected)
        if tok.kind == TokenKind.UNTERMINATED:
            message = f"unterminated {_QUOTE_NAMES[tok.value]}, expected closing {tok.value}"
            return make_syntax_error(message, self.source, tok.pos, [tok.value])
        if tok.kind == TokenKind.INVALID:
            message = f"unexpected character {tok.value!r}, expected {expected}"
        elif tok.kind == TokenKind.EOF:
            message = f"unexpected end of input, expected {expected}"
        else:
            message = f"unexpected {_describe(tok)}, expected {expected}"
        return make_syntax_error(message, self.source, tok.pos, self.expected)

    # -- Grammar rules --

    def parse_document(self, strict: bool) -> ParseNode:
        """diagram (diagram)* EOF, or exactly one diagram when strict."""
        diagrams = [self.parse_lbox_expr()]
        if strict:
            self.expect(TokenKind.EOF)
        else:
            while not self.check(TokenKind.EOF):
                diagrams.append(self.parse_lbox_expr())
        return ParseNode(Rule.DOCUMENT, 0, len(self.source), children=diagrams)

    def parse_lbox_expr(self) -> ParseNode:
        """rpt_expr ('#' rpt_expr)?"""
        inner = self.parse_rpt_expr()
        children = [inner]
        if self.match(TokenKind.HASH):
            children.append(self.parse_rpt_expr())
        return ParseNode(Rule.LBOX_EXPR, inner.start, children[-1].end, children=children)

    def parse_rpt_expr(self) -> ParseNode:
        """opt_expr ('*' opt_expr)?"""
        body = self.parse_opt_expr()
        children = [body]
        if self.match(TokenKind.STAR):
            children.append(self.parse_opt_expr())
        return ParseNode(Rule.RPT_EXPR, body.start, children[-1].end, children=children)

    def parse_opt_expr(self) -> ParseNode:
        """simple_expr ('?')*"""
        simple = self.parse_simple_expr()
        children = [simple]
        while tok := self.match(TokenKind.QUESTION):
            children.append(ParseNode(Rule.OPTIONAL_MARK, tok.pos, tok.end))
        return ParseNode(Rule.OPT_EXPR, simple.start, children[-1].end, children=children)

    def parse_simple_expr(self) -> ParseNode:
        """term | nonterm | comment | empty | sequence | stack | choice"""
        for kind, rule in _LEAVES.items():
            if self.check(kind):
                tok = self.advance()
                return ParseNode(rule, tok.pos, tok.end, text=tok.value)

        if self.check(TokenKind.BANG):
            tok = self.advance()
            return ParseNode(Rule.EMPTY, tok.pos, tok.end)

        for opening, (closing, rule) in _BRACKETS.items():
            if self.check(opening):
                return self._parse_bracketed(closing, rule)

        raise self.error()

    def _parse_bracketed(self, closing: TokenKind, rule: Rule) -> ParseNode:
        """open lbox_expr (',' lbox_expr)* close"""
        start = self.advance().pos
        items = [self.parse_lbox_expr()]
        while self.match(TokenKind.COMMA):
            items.append(self.parse_lbox_expr())
        end = self.expect(closing).end
        return ParseNode(rule, start, end, children=items)


def _describe(tok: Token) -> str:
    if tok.kind in _LEAVES:
        return f"{_DESCRIPTIONS[tok.kind]} {tok.value!r}"
    return _DESCRIPTIONS.get(tok.kind, repr(tok.value))


def _join(descriptions: list[str]) -> str:
    if not descriptions:
        return "nothing"
    if len(descriptions) == 1:
        return descriptions[0]
    return f"{', '.join(descriptions[:-1])} or {descriptions[-1]}"


def parse_document(source: str, strict: bool = False) -> ParseNode:
    """Recognize a diagram document and return its parse tree.

    Args:
        source: Full DSL document text.
        strict: Accept exactly one top-level diagram followed by end of
            input instead of one or more diagrams.

    Returns:
        A ``DOCUMENT`` node whose children are the top-level ``LBOX_EXPR`` nodes.

    Raises:
        DiagramSyntaxError: On the first mismatch in the source.
    """
    parser = _Parser(source, tokenize(source))
    try:
        document = parser.parse_document(strict)
    except RecursionError:
        raise make_syntax_error(
            "diagram nesting too deep", source, parser.current.pos
        ) from None
    logger.debug("Recognized %d top-level diagram(s)", len(document.children))
    return document
