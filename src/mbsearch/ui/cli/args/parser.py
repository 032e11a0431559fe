"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from mbsearch.config.config import Config
from mbsearch.platform.logging import setup_logger
from mbsearch.platform.musicbrainz.kinds import SEARCHABLE_KINDS
from mbsearch.platform.musicbrainz.params import OMIT
from mbsearch.ui.cli.args.options import CLIArgs, InitConfigArgs, SearchArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="mbsearch",
            description="Search the MusicBrainz WS2 web service from the command line.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        search_parser = subparsers.add_parser(
            "search",
            help="Run one search request and print the scored matches",
        )
        _ = search_parser.add_argument(
            "kind",
            choices=sorted(SEARCHABLE_KINDS),
            help="Entity kind to search",
        )
        _ = search_parser.add_argument(
            "search_term",
            type=str,
            help="Lucene query, e.g. 'artist:Nirvana AND country:US'",
            metavar="QUERY",
        )
        _ = search_parser.add_argument(
            "--limit",
            type=int,
            default=OMIT,
            help="Maximum number of results (service default 25; -1 omits the parameter)",
        )
        _ = search_parser.add_argument(
            "--offset",
            type=int,
            default=OMIT,
            help="Offset into the result set (-1 omits the parameter)",
        )
        _ = search_parser.add_argument(
            "--root-url",
            type=str,
            help="Override the configured WS2 root address",
            metavar="URL",
        )
        verbosity = search_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show request and response details",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress log output except errors",
        )

        init_parser = subparsers.add_parser(
            "init-config",
            help="Write a commented configuration file with default values",
        )
        _ = init_parser.add_argument(
            "--path",
            type=str,
            help="Target file (defaults to MBSEARCH_CONFIG or config/config.toml)",
            metavar="PATH",
        )
        _ = init_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file",
        )

        return parser

    @staticmethod
    def process_args(
        args_list: Sequence[str] | None = None,
        configuration: Config | None = None,
    ) -> CLIArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).
            configuration: Loaded configuration; read from disk when omitted.

        Returns:
            CLIArgs: Processed command line arguments.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = configuration or Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        if parsed_args.command == "init-config":
            return InitConfigArgs(
                command="init-config",
                path=Path(parsed_args.path) if parsed_args.path else None,
                force=bool(parsed_args.force),
            )

        return SearchArgs(
            command="search",
            kind=parsed_args.kind,
            search_term=parsed_args.search_term,
            limit=parsed_args.limit,
            offset=parsed_args.offset,
            root_url=parsed_args.root_url,
            verbose=is_verbose,
            quiet=is_quiet,
        )
