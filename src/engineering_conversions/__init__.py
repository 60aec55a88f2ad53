"""Top-level package for the engineering unit conversion library."""

from importlib import metadata

from . import length, mass, pressure, temperature


def get_version() -> str:
    """Return the installed package version."""
    try:
        return metadata.version("engineering-conversions")
    except metadata.PackageNotFoundError:  # pragma: no cover - local dev fallback
        return "0.0.0"


__all__ = ["get_version", "length", "mass", "pressure", "temperature"]
