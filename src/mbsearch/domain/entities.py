"""
Summary: Immutable MusicBrainz entity values decoded from WS2 search payloads.
Why: Frozen dataclasses hash by value so search responses can key scores by entity.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LifeSpan:
    """Begin/end dates as reported by MusicBrainz (partial dates kept verbatim)."""

    begin: str | None = None
    end: str | None = None
    ended: bool = False


@dataclass(frozen=True, slots=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Alias:
    name: str
    sort_name: str | None = None
    locale: str | None = None
    type: str | None = None
    primary: bool = False


@dataclass(frozen=True, slots=True)
class NameCredit:
    """One credited artist inside an artist credit."""

    name: str
    join_phrase: str = ""
    artist_id: str | None = None
    artist_name: str | None = None
    artist_sort_name: str | None = None


@dataclass(frozen=True, slots=True)
class Annotation:
    type: str | None
    entity: str | None
    name: str | None
    text: str | None


@dataclass(frozen=True, slots=True)
class Area:
    id: str
    name: str
    type: str | None = None
    sort_name: str | None = None
    disambiguation: str | None = None
    iso_3166_1_codes: tuple[str, ...] = ()
    life_span: LifeSpan | None = None


@dataclass(frozen=True, slots=True)
class Artist:
    id: str
    name: str
    type: str | None = None
    sort_name: str | None = None
    gender: str | None = None
    country: str | None = None
    area: Area | None = None
    begin_area: Area | None = None
    disambiguation: str | None = None
    life_span: LifeSpan | None = None
    aliases: tuple[Alias, ...] = ()


@dataclass(frozen=True, slots=True)
class ReleaseGroup:
    id: str
    title: str
    type: str | None = None
    primary_type: str | None = None
    secondary_types: tuple[str, ...] = ()
    disambiguation: str | None = None
    artist_credit: tuple[NameCredit, ...] = ()


@dataclass(frozen=True, slots=True)
class Release:
    id: str
    title: str
    status: str | None = None
    disambiguation: str | None = None
    packaging: str | None = None
    language: str | None = None
    script: str | None = None
    artist_credit: tuple[NameCredit, ...] = ()
    release_group: ReleaseGroup | None = None
    date: str | None = None
    country: str | None = None
    barcode: str | None = None
    asin: str | None = None
    track_count: int | None = None


@dataclass(frozen=True, slots=True)
class Tag:
    name: str


@dataclass(frozen=True, slots=True)
class CDStub:
    id: str
    title: str
    artist: str | None = None
    barcode: str | None = None
    comment: str | None = None
    track_count: int | None = None


@dataclass(frozen=True, slots=True)
class Label:
    id: str
    name: str
    type: str | None = None
    sort_name: str | None = None
    label_code: int | None = None
    country: str | None = None
    area: Area | None = None
    disambiguation: str | None = None
    life_span: LifeSpan | None = None


@dataclass(frozen=True, slots=True)
class Place:
    id: str
    name: str
    type: str | None = None
    address: str | None = None
    coordinates: Coordinates | None = None
    area: Area | None = None
    life_span: LifeSpan | None = None


# Search for the following kinds is not implemented; the types exist so the
# declared client methods carry precise return annotations.


@dataclass(frozen=True, slots=True)
class FreeDBDisc:
    id: str
    title: str
    artist: str | None = None
    category: str | None = None
    year: str | None = None
    track_count: int | None = None


@dataclass(frozen=True, slots=True)
class Recording:
    id: str
    title: str
    length: int | None = None
    artist_credit: tuple[NameCredit, ...] = ()


@dataclass(frozen=True, slots=True)
class Work:
    id: str
    title: str
    type: str | None = None


__all__ = [
    "Alias",
    "Annotation",
    "Area",
    "Artist",
    "CDStub",
    "Coordinates",
    "FreeDBDisc",
    "Label",
    "LifeSpan",
    "NameCredit",
    "Place",
    "Recording",
    "Release",
    "ReleaseGroup",
    "Tag",
    "Work",
]
