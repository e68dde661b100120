"""
Render command for the railroad-dsl CLI.

If no input files are given, act as a pipe from stdin to stdout.
Otherwise, process each input file into an output file next to it with
the file extension replaced by `.svg` (or `.png` with --format png).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from railroad_dsl.compiler import CompiledDiagram, compile
from railroad_dsl.config import OutputFormat, RenderOptions, Theme, get_default_theme
from railroad_dsl.core.errors import DiagramSyntaxError, RailroadDslError
from railroad_dsl.render.raster import svg_to_png

from .utils import configure_logging, version_callback

logger = logging.getLogger(__name__)


def _encode(diagram: CompiledDiagram, options: RenderOptions) -> bytes:
    """Encode a compiled diagram in the configured output format."""
    svg = diagram.to_svg()
    if options.format == OutputFormat.PNG:
        return svg_to_png(
            svg,
            diagram.width,
            diagram.height,
            max_width=options.max_width,
            max_height=options.max_height,
            background=None if options.css else options.background(),
        )
    return svg.encode("utf-8")


def _render_stdin(options: RenderOptions, stylesheet: str) -> bool:
    """Pipe stdin to stdout. Returns True on success."""
    try:
        source = sys.stdin.read()
    except OSError as e:
        typer.echo(f"error reading stdin: {e}", err=True)
        return False

    try:
        diagram = compile(source, stylesheet, strict=options.strict)
        data = _encode(diagram, options)
    except DiagramSyntaxError as e:
        typer.echo(f"syntax error:\n{e.with_path('<stdin>')}", err=True)
        return False
    except RailroadDslError as e:
        typer.echo(f"Error: {e}", err=True)
        return False

    if options.format == OutputFormat.PNG:
        typer.get_binary_stream("stdout").write(data)
    else:
        typer.echo(data.decode("utf-8"))
    return True


def _render_file(input_path: Path, options: RenderOptions, stylesheet: str) -> bool:
    """Render one input file to its sibling output. Returns True on success."""
    output_path = options.output_path(input_path)

    try:
        source = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"error reading file {input_path}: {e}", err=True)
        return False

    try:
        diagram = compile(source, stylesheet, strict=options.strict)
        data = _encode(diagram, options)
    except DiagramSyntaxError as e:
        typer.echo(f"syntax error:\n{e.with_path(str(input_path))}", err=True)
        return False
    except RailroadDslError as e:
        typer.echo(f"Error: {e}", err=True)
        return False

    try:
        output_path.write_bytes(data)
    except OSError as e:
        typer.echo(f"error writing file {output_path}: {e}", err=True)
        return False

    logger.info("Wrote %s (%dx%d)", output_path, diagram.width, diagram.height)
    return True


def render_command(
    inputs: list[Path] | None = typer.Argument(None, help="Input files to process"),
    format: OutputFormat = typer.Option(
        OutputFormat.SVG, "--format", "-f", help="Output format for input files"
    ),
    css: Path | None = typer.Option(
        None, "--css", help="Stylesheet file to embed instead of the theme's"
    ),
    theme: Theme | None = typer.Option(
        None, "--theme", "-t", help="Built-in stylesheet [default: RAILROAD_DSL_THEME or light]"
    ),
    max_width: int | None = typer.Option(None, "--max-width", help="Maximum PNG width in pixels"),
    max_height: int | None = typer.Option(
        None, "--max-height", help="Maximum PNG height in pixels"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Require exactly one diagram per input"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """
    Process railroad diagrams according to DSL.

    If no input files are given, act as a pipe from stdin to stdout.
    Otherwise, process each input file into an output file with the file
    extension replaced by `.svg` or `.png`.
    """
    configure_logging(verbose)

    try:
        options = RenderOptions(
            format=format,
            theme=theme or get_default_theme(),
            css=css,
            max_width=max_width,
            max_height=max_height,
            strict=strict,
        )
    except ValidationError as e:
        typer.echo(f"Invalid options: {e}", err=True)
        raise typer.Exit(code=2)

    try:
        stylesheet = options.stylesheet()
    except (OSError, UnicodeDecodeError) as e:
        typer.echo(f"error reading stylesheet {css}: {e}", err=True)
        raise typer.Exit(code=1)

    if not inputs:
        ok = _render_stdin(options, stylesheet)
    else:
        results = [_render_file(path, options, stylesheet) for path in inputs]
        ok = all(results)

    if not ok:
        raise typer.Exit(code=1)
