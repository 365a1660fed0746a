"""Command line interface for textsplit."""

from __future__ import annotations


def _get_version() -> str:
    """Get version from package metadata."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("textsplit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__all__ = ["__version__"]
