"""
railroad-dsl CLI Package.

- render.py: `railroad` - render DSL files (or stdin) to SVG/PNG
- gallery.py: `railroad-gallery` - HTML page of example diagrams
- utils.py: Shared utilities
"""

import sys

import typer

from railroad_dsl.cli.gallery import gallery_command
from railroad_dsl.cli.render import render_command
from railroad_dsl.cli.utils import configure_logging, version_callback

app = typer.Typer(help="Process railroad diagrams according to DSL.", add_completion=False)
app.command()(render_command)

gallery_app = typer.Typer(help="Build an HTML gallery of example diagrams.", add_completion=False)
gallery_app.command()(gallery_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


def gallery_main(argv: list[str] | None = None) -> None:
    gallery_app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "gallery_app",
    "main",
    "gallery_main",
    "configure_logging",
    "version_callback",
]

if __name__ == "__main__":
    main(sys.argv[1:])
