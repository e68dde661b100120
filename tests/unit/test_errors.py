"""Tests for error types and their formatting."""

from __future__ import annotations

import pytest

from railroad_dsl.core.builder import parse
from railroad_dsl.core.errors import (
    DiagramSyntaxError,
    ErrorContext,
    RailroadDslError,
    line_and_column,
    make_syntax_error,
)


class TestErrorContext:
    def test_format_without_file(self) -> None:
        assert ErrorContext(line=3, column=7).format() == "3:7"

    def test_format_with_file(self) -> None:
        assert ErrorContext(line=3, column=7, file="a.txt").format() == "a.txt:3:7"

    def test_snippet_marker(self) -> None:
        ctx = ErrorContext(line=1, column=3, snippet='["a" "b"]')
        lines = ctx.format().split("\n")
        assert lines[0] == "1:3"
        assert lines[1] == '   1 | ["a" "b"]'
        assert lines[2] == " " * 9 + "^^^"


class TestDiagramSyntaxError:
    def test_is_railroad_error(self) -> None:
        assert issubclass(DiagramSyntaxError, RailroadDslError)

    def test_message_includes_location(self) -> None:
        err = make_syntax_error("boom", '"a" %', 4, ["end of input"])
        assert str(err).startswith("1:5\n")
        assert str(err).endswith("boom")
        assert err.expected == ["end of input"]

    def test_with_path(self) -> None:
        with pytest.raises(DiagramSyntaxError) as exc_info:
            parse('["a"')
        labelled = exc_info.value.with_path("<stdin>")
        assert str(labelled).startswith("<stdin>:1:5")
        assert labelled.message == exc_info.value.message
        # The original is left untouched
        assert exc_info.value.context is not None
        assert exc_info.value.context.file is None

    def test_with_path_without_context(self) -> None:
        err = DiagramSyntaxError("bad").with_path("x.txt")
        assert str(err) == "x.txt: bad"


def test_line_and_column() -> None:
    source = "ab\ncd\n"
    assert line_and_column(source, 0) == (1, 1)
    assert line_and_column(source, 4) == (2, 2)
    assert line_and_column(source, 6) == (3, 1)
