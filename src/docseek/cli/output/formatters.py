"""Output formatting utilities for CLI."""

from __future__ import annotations

from typing import Iterable

import click


class OutputFormatter:
    """Format output for CLI display.

    Result lines and informational messages go to stdout; errors and
    warnings go to stderr so piped output only carries results.

    Example:
        >>> out = OutputFormatter()
        >>> out.lines(["Python_3", "Rust"])
        >>> out.error("Something went wrong")
    """

    @staticmethod
    def lines(lines: Iterable[str]) -> None:
        """Display lines verbatim, one per row.

        Args:
            lines: Lines to display
        """
        for line in lines:
            click.echo(line)

    @staticmethod
    def message(message: str) -> None:
        """Display a plain informational message on stdout.

        Args:
            message: Message to display
        """
        click.echo(message)

    @staticmethod
    def error(message: str, abort: bool = False) -> None:
        """Display error message.

        Args:
            message: Error message to display
            abort: Whether to abort command execution after displaying error
        """
        click.echo(f"❌ {message}", err=True)
        if abort:
            raise click.Abort()

    @staticmethod
    def warning(message: str) -> None:
        """Display warning message.

        Args:
            message: Warning message to display
        """
        click.echo(f"⚠️  {message}", err=True)
