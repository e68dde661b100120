"""
railroad-dsl CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from railroad_dsl._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import railroad_dsl

            install_location = Path(railroad_dsl.__file__).parent
        except Exception:
            install_location = Path.cwd()

        png_available = False
        try:
            import cairosvg  # noqa: F401 - intentional import for availability check

            png_available = True
        except (ImportError, OSError):
            pass

        typer.echo(f"railroad-dsl version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        typer.echo("")
        typer.echo("Features:")
        typer.echo(
            f"  PNG output:    {'✓ Available' if png_available else '✗ Not available (install with: pip install railroad-dsl[png])'}"
        )

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or the LOG_LEVEL variable."""
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv("LOG_LEVEL", "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
