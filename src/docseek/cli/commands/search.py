"""Search command."""

from __future__ import annotations

import click

from docseek.cli.decorators import handle_errors, with_docset_dir, with_icons
from docseek.cli.handlers import SearchHandler
from docseek.cli.output import OutputFormatter
from docseek.core.exceptions import DocsetNotFound, StoreUnavailable
from docseek.utils.config import get_config
from docseek.utils.logging import get_logger

logger = get_logger(__name__)
out = OutputFormatter()


@click.command(name="search")
@click.argument("docset")
@click.argument("query", nargs=-1)
@with_docset_dir
@with_icons
@handle_errors
@click.pass_context
def search_cmd(ctx, docset, query, docset_dir, icons):
    """Search DOCSET for QUERY (fuzzy); with no QUERY, list every entry.

    \b
    Examples:
        # Fuzzy search
        docseek search Python_3 readf

        # Multi-word queries are joined with spaces
        docseek search Python_3 open file

        # List all entries, with kind glyphs
        docseek --icons search Rust
    """
    obj = ctx.obj or {}
    config = obj.get("config") or get_config()
    docset_dir = docset_dir or obj.get("docset_dir")
    if icons is None:
        icons = obj.get("icons")

    handler = SearchHandler(config)

    try:
        result = handler.search(
            docset_name=docset, query_tokens=query, docsets_dir=docset_dir
        )
    except DocsetNotFound as e:
        out.error(str(e))
        raise click.Abort()
    except StoreUnavailable as e:
        out.error(f"Error searching docset '{docset}': {e.reason}")
        logger.debug("Store failure", exc_info=True)
        raise click.Abort()

    if result.is_empty:
        out.message(f"No results found for '{result.query}' in docset '{docset}'")
        return

    out.lines(handler.format_results(result, decorate=icons))
