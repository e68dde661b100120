"""
Tokenizer for the railroad diagram DSL.

Converts diagram source text into a sequence of typed tokens. Quoted forms
keep their raw inner text, escapes included; unescaping happens later in
the tree builder.

Malformed input never raises here. An unexpected character becomes an
``INVALID`` token and an unterminated quoted form becomes an
``UNTERMINATED`` token, so the parser can report whichever failure comes
first in the source together with what it expected at that point.
"""

from __future__ import annotations

from enum import StrEnum, auto


class TokenKind(StrEnum):
    """Token types for the diagram DSL."""

    # Quoted forms
    TERM = auto()  # "..."
    NONTERM = auto()  # '...'
    COMMENT = auto()  # `...`

    # Empty placeholder
    BANG = auto()  # !

    # Brackets
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LANGLE = auto()  # <
    RANGLE = auto()  # >
    COMMA = auto()

    # Postfix modifiers
    QUESTION = auto()  # ?
    STAR = auto()  # *
    HASH = auto()  # #

    # Malformed input
    INVALID = auto()
    UNTERMINATED = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the diagram tokenizer."""

    __slots__ = ("kind", "value", "pos", "end")

    def __init__(self, kind: TokenKind, value: str, pos: int, end: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos
        self.end = end

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


QUOTES: dict[str, TokenKind] = {
    '"': TokenKind.TERM,
    "'": TokenKind.NONTERM,
    "`": TokenKind.COMMENT,
}

PUNCTUATION: dict[str, TokenKind] = {
    "!": TokenKind.BANG,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "<": TokenKind.LANGLE,
    ">": TokenKind.RANGLE,
    ",": TokenKind.COMMA,
    "?": TokenKind.QUESTION,
    "*": TokenKind.STAR,
    "#": TokenKind.HASH,
}

WHITESPACE = " \t\n\r"


def tokenize(source: str) -> list[Token]:
    """Tokenize diagram source text into a list of tokens ending with EOF."""
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in WHITESPACE:
            i += 1
            continue

        if c in QUOTES:
            tok = _read_quoted(source, i)
            tokens.append(tok)
            if tok.kind == TokenKind.UNTERMINATED:
                # Everything up to EOF belongs to the broken literal
                break
            i = tok.end
            continue

        if c in PUNCTUATION:
            tokens.append(Token(PUNCTUATION[c], c, i, i + 1))
            i += 1
            continue

        tokens.append(Token(TokenKind.INVALID, c, i, i + 1))
        i += 1

    tokens.append(Token(TokenKind.EOF, "", n, n))
    return tokens


def _read_quoted(source: str, start: int) -> Token:
    """Read a delimited form, keeping escape sequences in the raw text."""
    quote = source[start]
    i = start + 1
    n = len(source)

    while i < n:
        c = source[i]
        if c == "\\":
            if i + 1 < n:
                i += 2
                continue
            break
        if c == quote:
            return Token(QUOTES[quote], source[start + 1 : i], start, i + 1)
        i += 1

    return Token(TokenKind.UNTERMINATED, quote, start, n)
