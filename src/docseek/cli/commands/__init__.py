"""CLI command modules."""

from . import docsets, search

__all__ = ["docsets", "search"]
