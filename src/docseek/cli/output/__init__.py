"""CLI output helpers."""

from docseek.cli.output.formatters import OutputFormatter

__all__ = ["OutputFormatter"]
