"""Where: src/mbsearch/platform/musicbrainz/xml_decoder.py
What: Decode WS2 ``<*-list>`` XML payloads into scored entity envelopes.
Why: Separate wire-format interpretation from HTTP and response shaping.

Payloads look like::

    <metadata xmlns="http://musicbrainz.org/ns/mmd-2.0#"
              xmlns:ext="http://musicbrainz.org/ns/ext#-2.0">
      <artist-list count="2" offset="0">
        <artist id="..." type="Group" ext:score="100">...</artist>
      </artist-list>
    </metadata>

Namespaces are stripped up front so lookups use local names only; the score
attribute is accepted under any prefix.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable, Hashable
from typing import TypeVar

from mbsearch.domain import (
    Alias,
    Annotation,
    Area,
    Artist,
    CDStub,
    Coordinates,
    EntityList,
    Label,
    LifeSpan,
    NameCredit,
    Place,
    Release,
    ReleaseGroup,
    ScoredEntity,
    Tag,
)

from .errors import DecodeError

T = TypeVar("T", bound=Hashable)

EntityParser = Callable[[ET.Element], T]


def _local(name: str) -> str:
    return name.rsplit("}", 1)[-1]


def _strip_namespaces(root: ET.Element) -> None:
    for element in root.iter():
        if isinstance(element.tag, str):
            element.tag = _local(element.tag)
        if element.attrib:
            element.attrib = {_local(key): value for key, value in element.attrib.items()}


def truthy(value: str | None) -> bool:
    """Return True when an XML flag attribute or text represents an affirmative value."""

    if value is None:
        return False
    return value.strip().lower() in {"true", "1", "yes", "primary"}


def _text(element: ET.Element, path: str) -> str | None:
    child = element.find(path)
    if child is None or not child.text:
        return None
    return child.text


def _to_int(raw: str | None, what: str) -> int | None:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise DecodeError(f"{what} is not an integer: {raw!r}") from exc


def _to_float(raw: str | None, what: str) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise DecodeError(f"{what} is not a number: {raw!r}") from exc


# Shared fragments -----------------------------------------------------------


def _life_span(element: ET.Element) -> LifeSpan | None:
    span = element.find("life-span")
    if span is None:
        return None
    return LifeSpan(
        begin=_text(span, "begin"),
        end=_text(span, "end"),
        ended=truthy(_text(span, "ended")),
    )


def _optional_area(element: ET.Element, tag: str) -> Area | None:
    child = element.find(tag)
    return parse_area(child) if child is not None else None


def _artist_credit(element: ET.Element) -> tuple[NameCredit, ...]:
    credit = element.find("artist-credit")
    if credit is None:
        return ()
    credits: list[NameCredit] = []
    for name_credit in credit.findall("name-credit"):
        artist = name_credit.find("artist")
        artist_name = _text(artist, "name") if artist is not None else None
        credits.append(
            NameCredit(
                name=_text(name_credit, "name") or artist_name or "",
                join_phrase=name_credit.get("joinphrase", ""),
                artist_id=artist.get("id") if artist is not None else None,
                artist_name=artist_name,
                artist_sort_name=_text(artist, "sort-name") if artist is not None else None,
            )
        )
    return tuple(credits)


def _alias(element: ET.Element) -> Alias:
    return Alias(
        name=element.text or "",
        sort_name=element.get("sort-name"),
        locale=element.get("locale"),
        type=element.get("type"),
        primary=truthy(element.get("primary")),
    )


# Entity parsers -------------------------------------------------------------


def parse_annotation(element: ET.Element) -> Annotation:
    return Annotation(
        type=element.get("type"),
        entity=_text(element, "entity"),
        name=_text(element, "name"),
        text=_text(element, "text"),
    )


def parse_area(element: ET.Element) -> Area:
    return Area(
        id=element.get("id", ""),
        name=_text(element, "name") or "",
        type=element.get("type"),
        sort_name=_text(element, "sort-name"),
        disambiguation=_text(element, "disambiguation"),
        iso_3166_1_codes=tuple(
            code.text
            for code in element.findall("iso-3166-1-code-list/iso-3166-1-code")
            if code.text
        ),
        life_span=_life_span(element),
    )


def parse_artist(element: ET.Element) -> Artist:
    return Artist(
        id=element.get("id", ""),
        name=_text(element, "name") or "",
        type=element.get("type"),
        sort_name=_text(element, "sort-name"),
        gender=_text(element, "gender"),
        country=_text(element, "country"),
        area=_optional_area(element, "area"),
        begin_area=_optional_area(element, "begin-area"),
        disambiguation=_text(element, "disambiguation"),
        life_span=_life_span(element),
        aliases=tuple(_alias(alias) for alias in element.findall("alias-list/alias")),
    )


def parse_release_group(element: ET.Element) -> ReleaseGroup:
    return ReleaseGroup(
        id=element.get("id", ""),
        title=_text(element, "title") or "",
        type=element.get("type"),
        primary_type=_text(element, "primary-type"),
        secondary_types=tuple(
            secondary.text
            for secondary in element.findall("secondary-type-list/secondary-type")
            if secondary.text
        ),
        disambiguation=_text(element, "disambiguation"),
        artist_credit=_artist_credit(element),
    )


def parse_release(element: ET.Element) -> Release:
    group = element.find("release-group")
    return Release(
        id=element.get("id", ""),
        title=_text(element, "title") or "",
        status=_text(element, "status"),
        disambiguation=_text(element, "disambiguation"),
        packaging=_text(element, "packaging"),
        language=_text(element, "text-representation/language"),
        script=_text(element, "text-representation/script"),
        artist_credit=_artist_credit(element),
        release_group=parse_release_group(group) if group is not None else None,
        date=_text(element, "date"),
        country=_text(element, "country"),
        barcode=_text(element, "barcode"),
        asin=_text(element, "asin"),
        track_count=_to_int(_text(element, "medium-list/track-count"), "track-count"),
    )


def parse_tag(element: ET.Element) -> Tag:
    return Tag(name=_text(element, "name") or "")


def parse_cdstub(element: ET.Element) -> CDStub:
    track_list = element.find("track-list")
    return CDStub(
        id=element.get("id", ""),
        title=_text(element, "title") or "",
        artist=_text(element, "artist"),
        barcode=_text(element, "barcode"),
        comment=_text(element, "comment"),
        track_count=_to_int(
            track_list.get("count") if track_list is not None else None,
            "track-list count",
        ),
    )


def parse_label(element: ET.Element) -> Label:
    return Label(
        id=element.get("id", ""),
        name=_text(element, "name") or "",
        type=element.get("type"),
        sort_name=_text(element, "sort-name"),
        label_code=_to_int(_text(element, "label-code"), "label-code"),
        country=_text(element, "country"),
        area=_optional_area(element, "area"),
        disambiguation=_text(element, "disambiguation"),
        life_span=_life_span(element),
    )


def parse_place(element: ET.Element) -> Place:
    coordinates: Coordinates | None = None
    raw_coordinates = element.find("coordinates")
    if raw_coordinates is not None:
        latitude = _to_float(_text(raw_coordinates, "latitude"), "latitude")
        longitude = _to_float(_text(raw_coordinates, "longitude"), "longitude")
        if latitude is not None and longitude is not None:
            coordinates = Coordinates(latitude=latitude, longitude=longitude)
    return Place(
        id=element.get("id", ""),
        name=_text(element, "name") or "",
        type=element.get("type"),
        address=_text(element, "address"),
        coordinates=coordinates,
        area=_optional_area(element, "area"),
        life_span=_life_span(element),
    )


# Envelope -------------------------------------------------------------------


def parse_document(payload: bytes | str) -> ET.Element:
    """Parse ``payload`` and return its namespace-free root element."""

    try:
        root = ET.fromstring(payload)
    except ET.ParseError as exc:
        raise DecodeError(f"Malformed XML payload: {exc}") from exc
    _strip_namespaces(root)
    return root


def decode_list(
    payload: bytes | str,
    list_tag: str,
    entity_tag: str,
    parse_entity: EntityParser[T],
) -> EntityList[T]:
    """Decode a WS2 search payload into an :class:`EntityList`.

    Args:
        payload: Raw response body.
        list_tag: Local name of the list element, e.g. ``artist-list``.
        entity_tag: Local name of each entry, e.g. ``artist``.
        parse_entity: Builds one entity value from its element.

    Raises:
        DecodeError: If the XML is malformed or does not contain ``list_tag``.
    """

    root = parse_document(payload)
    list_element = root if root.tag == list_tag else root.find(list_tag)
    if list_element is None:
        raise DecodeError(f"Expected <{list_tag}> in payload rooted at <{root.tag}>")

    items: list[ScoredEntity[T]] = []
    for entry in list_element.findall(entity_tag):
        score = _to_int(entry.get("score"), f"{entity_tag} score")
        items.append(ScoredEntity(entity=parse_entity(entry), score=score or 0))

    count = _to_int(list_element.get("count"), f"{list_tag} count")
    offset = _to_int(list_element.get("offset"), f"{list_tag} offset")
    return EntityList(
        count=count if count is not None else len(items),
        offset=offset or 0,
        items=tuple(items),
    )


def extract_error_message(payload: bytes | str) -> str | None:
    """Return the ``<error><text>`` messages of a WS2 error body, if any."""

    try:
        root = parse_document(payload)
    except DecodeError:
        return None
    if root.tag != "error":
        return None
    messages = [text.text.strip() for text in root.findall("text") if text.text and text.text.strip()]
    return "; ".join(messages) or None


__all__ = [
    "EntityParser",
    "decode_list",
    "extract_error_message",
    "parse_annotation",
    "parse_area",
    "parse_artist",
    "parse_cdstub",
    "parse_document",
    "parse_label",
    "parse_place",
    "parse_release",
    "parse_release_group",
    "parse_tag",
    "truthy",
]
