"""CLI utilities (XDG directories, search cache)."""

from erplookup.cli.util.paths import ERPLookupPaths

__all__ = [
    "ERPLookupPaths",
]
