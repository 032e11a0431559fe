"""Where: src/mbsearch/platform/musicbrainz/kinds.py
What: Per-entity descriptors binding endpoint, XML element names, and parser.
Why: The search client is generic; these descriptors are the only per-kind data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Generic

from mbsearch.domain import (
    Annotation,
    Area,
    Artist,
    CDStub,
    EntityList,
    Label,
    Place,
    Release,
    ReleaseGroup,
    Tag,
)
from mbsearch.domain.results import EntityT

from .xml_decoder import (
    EntityParser,
    decode_list,
    parse_annotation,
    parse_area,
    parse_artist,
    parse_cdstub,
    parse_label,
    parse_place,
    parse_release,
    parse_release_group,
    parse_tag,
)


@dataclass(frozen=True, slots=True)
class EntityKind(Generic[EntityT]):
    """Shape descriptor for one searchable entity kind."""

    name: str
    parse_entity: EntityParser[EntityT]

    @property
    def endpoint(self) -> str:
        return f"/{self.name}"

    @property
    def list_tag(self) -> str:
        return f"{self.name}-list"

    @property
    def entity_tag(self) -> str:
        return self.name

    def decode(self, payload: bytes | str) -> EntityList[EntityT]:
        return decode_list(payload, self.list_tag, self.entity_tag, self.parse_entity)


ANNOTATION: Final[EntityKind[Annotation]] = EntityKind("annotation", parse_annotation)
AREA: Final[EntityKind[Area]] = EntityKind("area", parse_area)
ARTIST: Final[EntityKind[Artist]] = EntityKind("artist", parse_artist)
RELEASE: Final[EntityKind[Release]] = EntityKind("release", parse_release)
RELEASE_GROUP: Final[EntityKind[ReleaseGroup]] = EntityKind("release-group", parse_release_group)
TAG: Final[EntityKind[Tag]] = EntityKind("tag", parse_tag)
CDSTUB: Final[EntityKind[CDStub]] = EntityKind("cdstub", parse_cdstub)
LABEL: Final[EntityKind[Label]] = EntityKind("label", parse_label)
PLACE: Final[EntityKind[Place]] = EntityKind("place", parse_place)

SEARCHABLE_KINDS: Final[dict[str, EntityKind[Any]]] = {
    kind.name: kind
    for kind in (ANNOTATION, AREA, ARTIST, RELEASE, RELEASE_GROUP, TAG, CDSTUB, LABEL, PLACE)
}

# Declared by the service but not supported by this client.
UNSUPPORTED_KINDS: Final[tuple[str, ...]] = ("freedb", "recording", "work")


__all__ = [
    "ANNOTATION",
    "AREA",
    "ARTIST",
    "CDSTUB",
    "EntityKind",
    "LABEL",
    "PLACE",
    "RELEASE",
    "RELEASE_GROUP",
    "SEARCHABLE_KINDS",
    "TAG",
    "UNSUPPORTED_KINDS",
]
