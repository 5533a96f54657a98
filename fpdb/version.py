"""Version management - pyproject.toml is the single source of truth."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
DISTRIBUTION_NAME = "fpdb-search-api"


def get_version() -> str:
    """
    Get the project version.

    Reads pyproject.toml when running from a checkout and falls back to the
    installed distribution metadata otherwise.

    Returns:
        Version string (e.g., "1.0.0")
    """
    pyproject_path = PROJECT_ROOT / "pyproject.toml"

    if pyproject_path.is_file():
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
        return pyproject_data["project"]["version"]

    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
