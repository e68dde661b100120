"""Tests for render configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from railroad_dsl.config import (
    THEME_ENV_VAR,
    OutputFormat,
    RenderOptions,
    Theme,
    get_default_theme,
)
from railroad_dsl.render.themes import BACKGROUNDS, DARK_CSS, LIGHT_CSS


class TestDefaultTheme:
    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(THEME_ENV_VAR, raising=False)
        assert get_default_theme() == Theme.LIGHT

    def test_dark(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, " Dark ")
        assert get_default_theme() == Theme.DARK

    def test_unknown_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, "neon")
        with caplog.at_level(logging.WARNING, logger="railroad_dsl.config"):
            assert get_default_theme() == Theme.LIGHT
        assert "neon" in caplog.text


class TestRenderOptions:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(THEME_ENV_VAR, raising=False)
        options = RenderOptions()
        assert options.format == OutputFormat.SVG
        assert options.theme == Theme.LIGHT
        assert options.stylesheet() == LIGHT_CSS
        assert options.background() == BACKGROUNDS[Theme.LIGHT]
        assert options.strict is False

    def test_theme_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, "dark")
        assert RenderOptions().stylesheet() == DARK_CSS

    def test_css_override(self, tmp_path: Path) -> None:
        css_file = tmp_path / "custom.css"
        css_file.write_text("rect { fill: pink; }")
        options = RenderOptions(css=css_file, theme=Theme.DARK)
        assert options.stylesheet() == "rect { fill: pink; }"

    def test_css_missing(self, tmp_path: Path) -> None:
        options = RenderOptions(css=tmp_path / "missing.css")
        with pytest.raises(OSError):
            options.stylesheet()

    @pytest.mark.parametrize("field", ["max_width", "max_height"])
    def test_sizes_must_be_positive(self, field: str) -> None:
        with pytest.raises(ValidationError):
            RenderOptions(**{field: 0})

    def test_string_values_coerced(self) -> None:
        options = RenderOptions(format="png", theme="dark")
        assert options.format == OutputFormat.PNG
        assert options.theme == Theme.DARK

    def test_output_path(self) -> None:
        assert RenderOptions().output_path(Path("dir/grammar.txt")) == Path("dir/grammar.svg")
        png = RenderOptions(format=OutputFormat.PNG)
        assert png.output_path(Path("grammar")) == Path("grammar.png")
