"""Tests for the tree builder: unescaping, postfix folding, document assembly."""

from __future__ import annotations

import pytest

from railroad_dsl.core.builder import build_document, build_expression, parse, unescape
from railroad_dsl.core.errors import DiagramSyntaxError
from railroad_dsl.core.ir.expressions import (
    Choice,
    Comment,
    Empty,
    LabeledBox,
    NonTerm,
    Optional,
    Repeat,
    Sequence,
    Stack,
    Term,
)
from railroad_dsl.core.parser import ParseNode, Rule, parse_document


def parse_one(source: str):
    exprs = parse(source)
    assert len(exprs) == 1
    return exprs[0]


class TestUnescape:
    """Backslash escapes resolve exactly once."""

    def test_plain_text(self) -> None:
        assert unescape("hello") == "hello"

    def test_escaped_quote(self) -> None:
        assert unescape('a\\"b') == 'a"b'

    def test_escaped_backslash(self) -> None:
        assert unescape("a\\\\b") == "a\\b"

    def test_any_character_is_literal(self) -> None:
        assert unescape("\\n\\t") == "nt"

    def test_single_pass(self) -> None:
        assert unescape("\\\\\\\\") == "\\\\"

    def test_dangling_backslash(self) -> None:
        with pytest.raises(ValueError):
            unescape("abc\\")


class TestLeaves:
    """Quoted forms map to leaf expressions with unescaped text."""

    def test_term_unescaped(self) -> None:
        assert parse_one('"a\\"b"') == Term(text='a"b')

    def test_nonterm_unescaped(self) -> None:
        assert parse_one("'x\\'y'") == NonTerm(text="x'y")

    def test_comment(self) -> None:
        assert parse_one("`see \\`below\\``") == Comment(text="see `below`")

    def test_empty(self) -> None:
        assert parse_one("!") == Empty()

    def test_empty_text(self) -> None:
        assert parse_one('""') == Term(text="")


class TestContainers:
    """Bracketed lists keep their items in source order."""

    def test_sequence(self) -> None:
        assert parse_one('["b", "a", "b"]') == Sequence(
            items=[Term(text="b"), Term(text="a"), Term(text="b")]
        )

    def test_stack(self) -> None:
        assert parse_one("{'x', !}") == Stack(items=[NonTerm(text="x"), Empty()])

    def test_choice(self) -> None:
        assert parse_one('<"a", `c`>') == Choice(items=[Term(text="a"), Comment(text="c")])

    def test_nested(self) -> None:
        assert parse_one('[<"a", ["b"]>]') == Sequence(
            items=[Choice(items=[Term(text="a"), Sequence(items=[Term(text="b")])])]
        )


class TestPostfix:
    """Postfix modifiers fold outward with fixed precedence."""

    def test_optional(self) -> None:
        assert parse_one('"a"?') == Optional(inner=Term(text="a"))

    def test_nested_optional(self) -> None:
        assert parse_one('"a"??') == Optional(inner=Optional(inner=Term(text="a")))

    def test_optional_binds_before_repeat(self) -> None:
        assert parse_one('"a"?*","') == Repeat(
            body=Optional(inner=Term(text="a")),
            separator=Term(text=","),
        )

    def test_optional_separator(self) -> None:
        assert parse_one('"a"*","?') == Repeat(
            body=Term(text="a"),
            separator=Optional(inner=Term(text=",")),
        )

    def test_label_binds_loosest(self) -> None:
        assert parse_one('"a"*","#\'L\'') == LabeledBox(
            inner=Repeat(body=Term(text="a"), separator=Term(text=",")),
            label=NonTerm(text="L"),
        )

    def test_label_may_repeat(self) -> None:
        assert parse_one('"a"#"b"*"c"') == LabeledBox(
            inner=Term(text="a"),
            label=Repeat(body=Term(text="b"), separator=Term(text="c")),
        )

    def test_postfix_inside_list(self) -> None:
        assert parse_one('["a"?, "b"*!]') == Sequence(
            items=[
                Optional(inner=Term(text="a")),
                Repeat(body=Term(text="b"), separator=Empty()),
            ]
        )

    def test_whitespace_around_operators(self) -> None:
        assert parse_one('"a" ? * "," # `x`') == parse_one('"a"?*","#`x`')


class TestDocument:
    """Documents hold one or more top-level diagrams."""

    def test_multiple_diagrams_in_order(self) -> None:
        assert parse('"a" "b"') == [Term(text="a"), Term(text="b")]

    def test_strict(self) -> None:
        assert parse('"a"', strict=True) == [Term(text="a")]
        with pytest.raises(DiagramSyntaxError):
            parse('"a" "b"', strict=True)

    def test_empty_document_fails(self) -> None:
        with pytest.raises(DiagramSyntaxError):
            parse(" \n\t ")

    def test_deterministic(self, select_source: str) -> None:
        assert parse(select_source) == parse(select_source)

    def test_build_document_requires_document_node(self) -> None:
        node = parse_document('"a"').children[0]
        with pytest.raises(ValueError):
            build_document(node)

    def test_build_expression_rejects_document_node(self) -> None:
        with pytest.raises(ValueError):
            build_expression(parse_document('"a"'))

    def test_build_expression_from_hand_made_node(self) -> None:
        node = ParseNode(
            Rule.CHOICE,
            0,
            9,
            children=[ParseNode(Rule.TERM, 1, 4, text="\\<"), ParseNode(Rule.EMPTY, 6, 7)],
        )
        assert build_expression(node) == Choice(items=[Term(text="<"), Empty()])

    def test_leaf_without_text(self) -> None:
        with pytest.raises(ValueError, match="carries no text"):
            build_expression(ParseNode(Rule.TERM, 0, 3))
