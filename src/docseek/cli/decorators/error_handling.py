"""Error handling decorators for CLI commands."""

from __future__ import annotations

import os
import signal
import sys
from functools import wraps

import click

from docseek.core.exceptions import DocseekError
from docseek.utils.logging import get_logger

logger = get_logger(__name__)

# Handle SIGPIPE gracefully (prevent BrokenPipeError when piping to head, etc.)
try:
    signal.signal(signal.SIGPIPE, signal.SIG_DFL)
except AttributeError:
    # Windows doesn't have SIGPIPE
    pass


def handle_errors(f):
    """Decorator to handle common errors in CLI commands.

    Catches exceptions and displays user-friendly error messages,
    then aborts the command with a non-zero exit code.

    Example:
        @click.command()
        @handle_errors
        def my_command():
            # Your command logic
            pass
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (click.Abort, click.exceptions.Exit):
            # Re-raise to let Click handle it
            raise
        except BrokenPipeError:
            # Output was closed early (e.g. piped to head); silence further writes
            devnull = open(os.devnull, "w")
            sys.stdout = devnull
            sys.stderr = devnull
            sys.exit(0)
        except DocseekError as e:
            click.echo(f"❌ {e}", err=True)
            logger.debug("DocseekError details", exc_info=True)
            raise click.Abort()
        except PermissionError as e:
            click.echo(f"❌ Permission denied: {e}", err=True)
            raise click.Abort()
        except ValueError as e:
            click.echo(f"❌ Invalid value: {e}", err=True)
            logger.debug("ValueError details", exc_info=True)
            raise click.Abort()
        except Exception as e:
            click.echo(f"❌ Unexpected error: {e}", err=True)
            logger.exception("Unexpected error in command")
            raise click.Abort()

    return wrapper
