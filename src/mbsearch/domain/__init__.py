"""
Summary: Public exports for MusicBrainz entity values and search result containers.
Why: Give callers one import path for the types returned by the search client.
"""

from __future__ import annotations

from .entities import (
    Alias,
    Annotation,
    Area,
    Artist,
    CDStub,
    Coordinates,
    FreeDBDisc,
    Label,
    LifeSpan,
    NameCredit,
    Place,
    Recording,
    Release,
    ReleaseGroup,
    Tag,
    Work,
)
from .results import EntityList, ScoredEntity, SearchResponse

__all__ = [
    "Alias",
    "Annotation",
    "Area",
    "Artist",
    "CDStub",
    "Coordinates",
    "EntityList",
    "FreeDBDisc",
    "Label",
    "LifeSpan",
    "NameCredit",
    "Place",
    "Recording",
    "Release",
    "ReleaseGroup",
    "ScoredEntity",
    "SearchResponse",
    "Tag",
    "Work",
]
