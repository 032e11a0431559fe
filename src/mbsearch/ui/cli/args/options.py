"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class SearchArgs:
    """Command line arguments for the ``search`` subcommand."""

    command: Literal["search"]
    kind: str
    search_term: str
    limit: int
    offset: int
    root_url: str | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InitConfigArgs:
    """Command line arguments for the ``init-config`` subcommand."""

    command: Literal["init-config"]
    path: Path | None
    force: bool


CLIArgs = SearchArgs | InitConfigArgs

__all__ = ["CLIArgs", "InitConfigArgs", "SearchArgs"]
