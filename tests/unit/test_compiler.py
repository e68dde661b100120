"""Tests for compile() and CompiledDiagram."""

from __future__ import annotations

import tomllib
from pathlib import Path

import pytest
import railroad

import railroad_dsl
from railroad_dsl import DEFAULT_CSS, CompiledDiagram, DiagramSyntaxError, compile
from railroad_dsl._version import get_version
from railroad_dsl.core.ir import NonTerm, Repeat, Term
from railroad_dsl.render.nodes import VerticalGrid


class TestCompile:
    def test_single_diagram(self) -> None:
        result = compile('"a"')
        assert isinstance(result, CompiledDiagram)
        assert isinstance(result.diagram, railroad.Diagram)
        assert result.expressions == [Term(text="a")]
        assert result.width > 0
        assert result.height > 0

    def test_svg_output(self, select_source: str) -> None:
        svg = str(compile(select_source))
        assert svg.startswith("<svg")
        assert svg.rstrip().endswith("</svg>")
        assert "SELECT" in svg
        assert "column" in svg
        assert "clause" in svg

    def test_default_stylesheet_embedded(self) -> None:
        result = compile('"a"')
        assert result.stylesheet == DEFAULT_CSS
        assert "svg.railroad-diagram path" in result.to_svg()

    def test_stylesheet_passed_through(self) -> None:
        css = "/* custom */ svg.railroad-diagram rect { fill: gold; }"
        assert css in compile('"a"', css).to_svg()

    def test_multiple_diagrams(self) -> None:
        result = compile('"a" "b"')
        assert isinstance(result.diagram, VerticalGrid)
        assert len(result.diagram.diagrams) == 2
        assert result.expressions == [Term(text="a"), Term(text="b")]
        single = compile('"a"')
        assert result.height > single.height

    def test_top_level_count(self) -> None:
        source = "'expr' ['a', 'b'] <'c', !> {`d`}"
        assert len(compile(source).expressions) == 4

    def test_strict(self) -> None:
        assert len(compile('"a"', strict=True).expressions) == 1
        with pytest.raises(DiagramSyntaxError):
            compile('"a" "b"', strict=True)

    def test_syntax_error(self) -> None:
        with pytest.raises(DiagramSyntaxError):
            compile("")

    def test_recompile_is_stable(self, select_source: str) -> None:
        first = compile(select_source)
        second = compile(select_source)
        assert first.expressions == second.expressions
        assert first.to_svg() == second.to_svg()
        assert (first.width, first.height) == (second.width, second.height)

    def test_to_svg_repeatable(self) -> None:
        result = compile('"a"*","#\'L\'')
        assert result.to_svg() == result.to_svg()
        assert result.expressions == [
            railroad_dsl.ir.LabeledBox(
                inner=Repeat(body=Term(text="a"), separator=Term(text=",")),
                label=NonTerm(text="L"),
            )
        ]

    def test_diagram_str_is_svg(self) -> None:
        result = compile('"a" "b"', "/* grid */")
        assert str(result.diagram) == result.to_svg()
        assert "/* grid */" in str(result.diagram)

    def test_long_optional_run(self) -> None:
        with pytest.raises(DiagramSyntaxError) as exc_info:
            compile('"a"' + "?" * 2000)
        assert "nesting too deep" in exc_info.value.message

    def test_moderate_optional_run(self) -> None:
        result = compile('"a"' + "?" * 20)
        assert result.to_svg().startswith("<svg")

    def test_special_characters_escaped(self) -> None:
        svg = compile('"<&>"').to_svg()
        assert "<&>" not in svg


def test_version() -> None:
    assert isinstance(railroad_dsl.__version__, str)
    assert railroad_dsl.__version__


def test_version_matches_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    with pyproject.open("rb") as fh:
        declared = tomllib.load(fh)["project"]["version"]
    assert get_version() == declared
