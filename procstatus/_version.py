"""Version lookup for installed and source-checkout runs."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
import tomllib

DISTRIBUTION = "procstatus"
UNKNOWN_VERSION = "0.0.0"

_CHECKOUT_PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def installed_version() -> str | None:
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return None


def checkout_version(pyproject: Path = _CHECKOUT_PYPROJECT) -> str | None:
    """Version declared by a ``pyproject.toml`` that belongs to this project.

    A ``pyproject.toml`` of some other project (e.g. when the package is
    vendored into another tree) is ignored.
    """
    try:
        with pyproject.open("rb") as fh:
            project = tomllib.load(fh).get("project", {})
    except (OSError, tomllib.TOMLDecodeError):
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def resolve_version() -> tuple[str, str]:
    """Return the version and where it came from.

    The source is ``"installed"``, ``"checkout"`` or ``"unknown"``.
    """
    version = installed_version()
    if version is not None:
        return version, "installed"
    version = checkout_version()
    if version is not None:
        return version, "checkout"
    return UNKNOWN_VERSION, "unknown"


__version__, VERSION_SOURCE = resolve_version()

__all__ = ["VERSION_SOURCE", "__version__", "checkout_version", "resolve_version"]
