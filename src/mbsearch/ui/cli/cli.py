"""Command line interface for mbsearch."""

import sys
from typing import final

from mbsearch.config.config import Config, ConfigError
from mbsearch.platform.logging import logger, setup_logger
from mbsearch.platform.musicbrainz import MusicBrainzError, RequestsHTTPClient, WS2Client
from mbsearch.ui.cli.args import ArgumentParser
from mbsearch.ui.cli.args.options import CLIArgs, InitConfigArgs, SearchArgs
from mbsearch.ui.cli.display import ResultDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        # Console handler for errors raised before the arguments pick the log level.
        _ = setup_logger()
        try:
            configuration = Config.load()
            args: CLIArgs = ArgumentParser.process_args(args_list, configuration)

            if isinstance(args, InitConfigArgs):
                CommandProcessor._init_config(args)
                return

            assert isinstance(args, SearchArgs)
            CommandProcessor._search(args, configuration)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (MusicBrainzError, ConfigError) as e:
            logger.error("%s", e, extra={"markup": False})
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e), extra={"markup": False})
            sys.exit(1)

    @staticmethod
    def _search(args: SearchArgs, configuration: Config) -> None:
        client = WS2Client(
            args.root_url or configuration.root_url,
            configuration.app_name,
            configuration.app_version,
            configuration.contact,
            http_client=RequestsHTTPClient(timeout=configuration.timeout_seconds),
        )
        response = client.search(args.kind, args.search_term, args.limit, args.offset)
        ResultDisplay().show_response(args.kind, response)

    @staticmethod
    def _init_config(args: InitConfigArgs) -> None:
        created = Config().save(args.path, overwrite=args.force)
        if not created:
            logger.warning("Configuration already exists; use --force to overwrite")


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Errors exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
