"""CLI entry point for docseek."""

from __future__ import annotations

from pathlib import Path

import click

from docseek import __version__
from docseek.cli.commands import docsets, search
from docseek.cli.handlers import DocsetHandler
from docseek.cli.output import OutputFormatter
from docseek.utils.config import get_config, load_config
from docseek.utils.logging import setup_logging

out = OutputFormatter()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config.yml file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
@click.option(
    "--docset-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory containing *.docset bundles (default: Zeal's docsets directory)",
)
@click.option(
    "--icons/--no-icons",
    default=None,
    help="Prefix results with symbol-kind glyphs",
)
@click.pass_context
def cli(ctx, config, log_level, docset_dir, icons):
    """docseek - fuzzy lookup in local Dash/Zeal docsets.

    \b
    Examples:
        # Show installed docsets
        docseek list-docsets

        # Fuzzy search a docset
        docseek search Python_3 readf

        # List every entry of a docset with kind glyphs
        docseek --icons search Rust

        # Use docsets from another directory
        docseek --docset-dir ~/docsets search Go http
    """
    ctx.ensure_object(dict)

    # Setup logging
    setup_logging(level=log_level)

    # Load config if provided
    cfg = load_config(config) if config else get_config()
    ctx.obj["config"] = cfg
    ctx.obj["docset_dir"] = docset_dir
    ctx.obj["icons"] = icons

    binary = DocsetHandler(cfg).missing_viewer()
    if binary:
        out.warning(f"Cannot find binary `{binary}`")

    if ctx.invoked_subcommand is None:
        out.message("No command provided.")
        out.message(ctx.get_help())
        ctx.exit(1)


# Register commands
cli.add_command(docsets.list_docsets_cmd)
cli.add_command(search.search_cmd)


def main():
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
