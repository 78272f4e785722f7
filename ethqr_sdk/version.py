"""
Version information for the EthQR SDK.

Installed distributions report their metadata version. A source checkout
reads ``[project].version`` from the adjacent ``pyproject.toml``.
"""
import importlib.metadata
import pathlib
from typing import Optional

import tomli

DISTRIBUTION_NAME = "ethqr-sdk"
FALLBACK_VERSION = "0.2.0"
PYPROJECT_PATH = pathlib.Path(__file__).resolve().parent.parent / "pyproject.toml"


def read_pyproject_version(path: Optional[pathlib.Path] = None) -> Optional[str]:
    """Version declared in a pyproject.toml, None if it is missing or unreadable"""
    try:
        with (path or PYPROJECT_PATH).open("rb") as f:
            project = tomli.load(f).get("project", {})
    except (OSError, tomli.TOMLDecodeError):
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None


def resolve_version() -> str:
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return read_pyproject_version() or FALLBACK_VERSION


__version__ = resolve_version()
