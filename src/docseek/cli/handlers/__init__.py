"""CLI command handlers containing business logic."""

from docseek.cli.handlers.docset_handler import DocsetHandler
from docseek.cli.handlers.search_handler import SearchHandler

__all__ = [
    "DocsetHandler",
    "SearchHandler",
]
