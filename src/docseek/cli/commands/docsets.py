"""Docset listing command."""

from __future__ import annotations

import click

from docseek.cli.decorators import handle_errors, with_docset_dir
from docseek.cli.handlers import DocsetHandler
from docseek.cli.output import OutputFormatter
from docseek.utils.config import get_config

out = OutputFormatter()


@click.command(name="list-docsets")
@with_docset_dir
@handle_errors
@click.pass_context
def list_docsets_cmd(ctx, docset_dir):
    """List installed docsets.

    \b
    Examples:
        docseek list-docsets
        docseek list-docsets --docset-dir ~/docsets
    """
    obj = ctx.obj or {}
    handler = DocsetHandler(obj.get("config") or get_config())

    names = handler.list_docsets(docset_dir or obj.get("docset_dir"))
    if not names:
        out.message("No docsets found.")
        return

    out.lines(names)
