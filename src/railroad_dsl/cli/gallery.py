"""
Gallery command for the railroad-dsl CLI.

Renders every `*diagram.txt` file in a directory into one HTML page.
"""

from __future__ import annotations

from pathlib import Path

import typer

from railroad_dsl.core.errors import DiagramSyntaxError, RailroadDslError
from railroad_dsl.gallery import build_gallery

from .utils import configure_logging


def gallery_command(
    directory: Path = typer.Argument(
        Path("examples"), help="Directory containing *diagram.txt files"
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="HTML file to write [default: DIR/example_diagrams.html]"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
) -> None:
    """
    Build an HTML page showing each example's source and rendered diagram.
    """
    configure_logging(verbose)

    if not directory.is_dir():
        typer.echo(f"Not a directory: {directory}", err=True)
        raise typer.Exit(code=1)

    try:
        written = build_gallery(directory, output)
    except DiagramSyntaxError as e:
        typer.echo(f"syntax error:\n{e}", err=True)
        raise typer.Exit(code=1)
    except (RailroadDslError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Written result to `{written}`")
