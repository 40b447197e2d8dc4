"""CLI decorators for common options and error handling."""

from docseek.cli.decorators.error_handling import handle_errors
from docseek.cli.decorators.options import with_docset_dir, with_icons

__all__ = [
    "handle_errors",
    "with_docset_dir",
    "with_icons",
]
