"""
Summary: List wrapper and public search response containers shared by all entity kinds.
Why: Keep the decoded envelope separate from the flattened caller-facing view.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

EntityT = TypeVar("EntityT", bound=Hashable)


@dataclass(frozen=True, slots=True)
class ScoredEntity(Generic[EntityT]):
    """Pair one decoded entity with the relevance score (0-100) the service assigned."""

    entity: EntityT
    score: int


@dataclass(frozen=True, slots=True)
class EntityList(Generic[EntityT]):
    """Raw ``<*-list>`` envelope: pagination header plus scored entries in service order."""

    count: int
    offset: int
    items: tuple[ScoredEntity[EntityT], ...] = ()


@dataclass(slots=True)
class SearchResponse(Generic[EntityT]):
    """Matched entities in service order and a lookup from entity to score.

    Attributes:
        count: Total number of matches reported by the service.
        offset: Offset of this page within the full result set.
        entities: Matched entities, duplicates included, ordered as received.
        scores: Relevance score per distinct entity. When an entity appears
            twice in one page only the last score is retained.
    """

    count: int
    offset: int
    entities: list[EntityT] = field(default_factory=list)
    scores: dict[EntityT, int] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entities)

    def score_of(self, entity: EntityT) -> int | None:
        """Return the score recorded for ``entity`` or ``None`` when it is absent."""

        return self.scores.get(entity)


__all__ = ["EntityList", "EntityT", "ScoredEntity", "SearchResponse"]
