"""Command line interface for docseek."""
