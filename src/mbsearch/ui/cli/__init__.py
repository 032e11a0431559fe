"""Command line interface package."""

from mbsearch.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
