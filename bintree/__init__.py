"""
bintree package root.

This module exposes the high-level API surface for building, copying and
drawing generic binary trees.
"""

from importlib.metadata import version, PackageNotFoundError


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("bintree")
        except PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__"]
