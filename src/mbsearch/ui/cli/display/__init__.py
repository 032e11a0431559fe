"""Console rendering helpers for the CLI."""

from mbsearch.ui.cli.display.result import ResultDisplay, describe_entity

__all__ = ["ResultDisplay", "describe_entity"]
