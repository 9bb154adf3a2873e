"""Version of the installed ``unicode-cli`` distribution."""

from __future__ import annotations

from importlib import metadata


DISTRIBUTION = "unicode-cli"


def get_version() -> str:
    """Return the installed version, or ``0.0.0`` when running from a source tree."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = ["get_version"]
