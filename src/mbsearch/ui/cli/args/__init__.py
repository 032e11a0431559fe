"""Command line argument handling package."""

from mbsearch.ui.cli.args.options import CLIArgs, InitConfigArgs, SearchArgs
from mbsearch.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "InitConfigArgs", "SearchArgs"]
