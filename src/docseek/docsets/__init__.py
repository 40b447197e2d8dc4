"""Installed docsets and where to find them."""

from docseek.docsets.docset import Docset, find_docset, list_docsets
from docseek.docsets.locations import (
    check_viewer,
    platform_strategy,
    resolve_docsets_dir,
)

__all__ = [
    "Docset",
    "find_docset",
    "list_docsets",
    "check_viewer",
    "platform_strategy",
    "resolve_docsets_dir",
]
