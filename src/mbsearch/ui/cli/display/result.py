"""src/mbsearch/ui/cli/display/result.py
What: Render search responses as Rich tables.
Why: Keep console output formatting out of the command flow.
"""

from __future__ import annotations

from typing import Any, final

from rich.console import Console
from rich.table import Table
from rich.text import Text

from mbsearch.domain import (
    Annotation,
    Area,
    Artist,
    CDStub,
    Label,
    NameCredit,
    Place,
    Release,
    ReleaseGroup,
    SearchResponse,
    Tag,
)


def _credit(credits: tuple[NameCredit, ...]) -> str:
    return "".join(f"{credit.name}{credit.join_phrase}" for credit in credits)


def _join(*parts: str | None) -> str:
    return ", ".join(part for part in parts if part)


def describe_entity(entity: Any) -> tuple[str, str, str]:
    """Return ``(id, label, details)`` columns for one matched entity."""

    match entity:
        case Artist():
            return entity.id, entity.name, _join(entity.type, entity.country, entity.disambiguation)
        case Release():
            return entity.id, entity.title, _join(_credit(entity.artist_credit), entity.date, entity.country)
        case ReleaseGroup():
            return entity.id, entity.title, _join(_credit(entity.artist_credit), entity.primary_type)
        case Label():
            return entity.id, entity.name, _join(entity.type, entity.country)
        case Area():
            return entity.id, entity.name, _join(entity.type, *entity.iso_3166_1_codes)
        case Place():
            area = entity.area.name if entity.area else None
            return entity.id, entity.name, _join(entity.type, entity.address, area)
        case CDStub():
            return entity.id, entity.title, _join(entity.artist, entity.barcode)
        case Tag():
            return "", entity.name, ""
        case Annotation():
            return entity.entity or "", entity.name or "", _join(entity.type)
        case _:
            return "", str(entity), ""


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_response(self, kind: str, response: SearchResponse[Any]) -> None:
        """Print one table row per matched entity, in service order.

        Args:
            kind: Entity kind name used in the table title.
            response: Flattened search response.
        """
        table = Table(
            title=f"{kind} matches {response.offset + 1}-{response.offset + len(response)} of {response.count}"
            if len(response)
            else f"No {kind} matches",
        )
        table.add_column("Score", justify="right", style="green")
        table.add_column("Name", style="bold")
        table.add_column("Details")
        table.add_column("ID", style="dim")

        for entity in response.entities:
            entity_id, label, details = describe_entity(entity)
            table.add_row(
                str(response.scores.get(entity, "")),
                Text(label),
                Text(details),
                Text(entity_id),
            )

        self.console.print(table)


__all__ = ["ResultDisplay", "describe_entity"]
