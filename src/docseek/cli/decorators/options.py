"""Common CLI option decorators."""

from __future__ import annotations

from pathlib import Path

import click


def with_docset_dir(f):
    """Add --docset-dir option to command.

    The same option exists on the top-level group; a value given on the
    command wins.

    Example:
        @click.command()
        @with_docset_dir
        def my_command(docset_dir):
            pass
    """
    return click.option(
        "--docset-dir",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Directory containing *.docset bundles (default: Zeal's docsets directory)",
    )(f)


def with_icons(f):
    """Add --icons/--no-icons option to command.

    Example:
        @click.command()
        @with_icons
        def my_command(icons):
            pass
    """
    return click.option(
        "--icons/--no-icons",
        default=None,
        help="Prefix results with symbol-kind glyphs (default: output.icons from config)",
    )(f)
