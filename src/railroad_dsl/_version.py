"""
Version lookup for railroad-dsl.

A source checkout (editable install, or ``src`` on the path) reports the
version declared in ``pyproject.toml``; an installed wheel reports its
distribution metadata.
"""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "railroad-dsl"
UNKNOWN_VERSION = "0.0.0"

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Return the railroad-dsl version string."""
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as fh:
            project = tomllib.load(fh).get("project", {})
        if project.get("name") == DIST_NAME and "version" in project:
            return str(project["version"])
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
