"""Where: src/mbsearch/platform/musicbrainz/client.py
What: MusicBrainz WS2 search client exposing one method per entity kind.
Why: Every search shares one request/decode/flatten routine driven by a kind descriptor.

Collaborators:
- ``params`` validates the root address and encodes query strings
- ``http_client`` performs the single GET per search
- ``kinds`` / ``xml_decoder`` turn the XML body into a scored envelope
- ``shaping`` flattens the envelope into a ``SearchResponse``
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Final, NoReturn

from mbsearch.domain import (
    Annotation,
    Area,
    Artist,
    CDStub,
    FreeDBDisc,
    Label,
    Place,
    Recording,
    Release,
    ReleaseGroup,
    SearchResponse,
    Tag,
    Work,
)
from mbsearch.domain.results import EntityT
from mbsearch.platform.logging import logger

from . import kinds
from .errors import HTTPStatusError, MusicBrainzError, SearchNotImplementedError
from .http_client import HTTPClient, RequestsHTTPClient
from .kinds import EntityKind
from .params import OMIT, build_search_params, build_search_url, parse_root_url
from .shaping import flatten
from .user_agent import format_user_agent
from .xml_decoder import extract_error_message

_ACCEPT: Final[str] = "application/xml"


@dataclass(frozen=True, slots=True)
class _Settings:
    root_url: str
    user_agent: str


class WS2Client:
    """Client for the MusicBrainz Web Service v2 search API.

    ``search_term`` follows the Lucene query syntax. ``limit`` (1-100, service
    default 25) and ``offset`` page through results; pass ``-1`` to leave
    either out of the request.

    Configuration is held in an immutable snapshot. Setters swap the snapshot
    under a lock and each search reads it once, so concurrent searches never
    see a half-applied change.

    Please provide meaningful application details; see
    https://musicbrainz.org/doc/MusicBrainz_API/Rate_Limiting
    """

    def __init__(
        self,
        root_url: str,
        app_name: str,
        version: str,
        contact: str,
        *,
        http_client: HTTPClient | None = None,
    ) -> None:
        self._lock: Final[threading.Lock] = threading.Lock()
        self._settings: _Settings = _Settings(
            root_url=parse_root_url(root_url),
            user_agent=format_user_agent(app_name, version, contact),
        )
        self._http: HTTPClient = http_client or RequestsHTTPClient()

    @property
    def root_url(self) -> str:
        return self._settings.root_url

    @property
    def user_agent(self) -> str:
        return self._settings.user_agent

    def set_root_url(self, root_url: str) -> None:
        """Replace the root address; on failure the previous address is kept.

        Raises:
            InvalidRootAddressError: If ``root_url`` is not an absolute http(s) URL.
        """

        parsed = parse_root_url(root_url)
        with self._lock:
            self._settings = _Settings(root_url=parsed, user_agent=self._settings.user_agent)

    def set_client_info(self, app_name: str, version: str, contact: str) -> None:
        """Rebuild the User-Agent header sent with every request."""

        user_agent = format_user_agent(app_name, version, contact)
        with self._lock:
            self._settings = _Settings(root_url=self._settings.root_url, user_agent=user_agent)

    def _search(
        self,
        kind: EntityKind[EntityT],
        search_term: str,
        limit: int,
        offset: int,
    ) -> SearchResponse[EntityT]:
        settings = self._settings
        url = build_search_url(
            settings.root_url,
            kind.endpoint,
            build_search_params(search_term, limit, offset),
        )
        headers = {"User-Agent": settings.user_agent, "Accept": _ACCEPT}

        logger.debug(
            "WS2 GET %s",
            url,
            extra={"search_event": "search.request", "endpoint": kind.endpoint, "url": url},
        )
        started = time.perf_counter()
        try:
            result = self._http.get(url, headers)
            if not result.ok:
                raise HTTPStatusError(url, result.status, extract_error_message(result.body))
            response = flatten(kind.decode(result.body))
        except MusicBrainzError as exc:
            logger.warning(
                "WS2 search %s failed: %s",
                kind.endpoint,
                exc,
                extra={
                    "search_event": "search.error",
                    "endpoint": kind.endpoint,
                    "error_message": str(exc),
                },
            )
            raise

        logger.info(
            "WS2 search %s returned %d of %d entries",
            kind.endpoint,
            len(response),
            response.count,
            extra={
                "search_event": "search.response",
                "endpoint": kind.endpoint,
                "status": result.status,
                "entries": len(response),
                "duration_ms": (time.perf_counter() - started) * 1000.0,
            },
        )
        return response

    @staticmethod
    def _unsupported(kind: str) -> NoReturn:
        raise SearchNotImplementedError(kind)

    def search(
        self,
        kind_name: str,
        search_term: str,
        limit: int = OMIT,
        offset: int = OMIT,
    ) -> SearchResponse[Any]:
        """Search the entity kind named ``kind_name`` (``"artist"``, ``"release-group"``, ...).

        Raises:
            SearchNotImplementedError: For the declared but unsupported kinds.
            ValueError: For names the service does not know.
        """

        kind = kinds.SEARCHABLE_KINDS.get(kind_name)
        if kind is None:
            if kind_name in kinds.UNSUPPORTED_KINDS:
                self._unsupported(kind_name)
            raise ValueError(f"Unknown entity kind: {kind_name!r}")
        return self._search(kind, search_term, limit, offset)

    def search_annotation(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Annotation]:
        """Search annotations (field reference: WS2 Search#Annotation)."""
        return self._search(kinds.ANNOTATION, search_term, limit, offset)

    def search_area(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Area]:
        """Search areas; without fields the area and sortname fields are searched."""
        return self._search(kinds.AREA, search_term, limit, offset)

    def search_artist(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Artist]:
        """Search artists; without fields the artist, sortname and alias fields are searched."""
        return self._search(kinds.ARTIST, search_term, limit, offset)

    def search_release(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Release]:
        """Search releases; without fields only the release field is searched."""
        return self._search(kinds.RELEASE, search_term, limit, offset)

    def search_release_group(
        self, search_term: str, limit: int = OMIT, offset: int = OMIT
    ) -> SearchResponse[ReleaseGroup]:
        """Search release groups; without fields only the releasegroup field is searched."""
        return self._search(kinds.RELEASE_GROUP, search_term, limit, offset)

    def search_tag(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Tag]:
        """Search tags; the only field is ``tag``."""
        return self._search(kinds.TAG, search_term, limit, offset)

    def search_cdstub(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[CDStub]:
        """Search CD stubs; without fields only the artist field is searched."""
        return self._search(kinds.CDSTUB, search_term, limit, offset)

    def search_label(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Label]:
        """Search labels; without fields the label, sortname and alias fields are searched."""
        return self._search(kinds.LABEL, search_term, limit, offset)

    def search_place(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Place]:
        """Search places; without fields the place, alias, address and area fields are searched."""
        return self._search(kinds.PLACE, search_term, limit, offset)

    def search_freedb(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[FreeDBDisc]:
        """Not supported; always raises :class:`SearchNotImplementedError`."""
        self._unsupported("freedb")

    def search_recording(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Recording]:
        """Not supported; always raises :class:`SearchNotImplementedError`."""
        self._unsupported("recording")

    def search_work(self, search_term: str, limit: int = OMIT, offset: int = OMIT) -> SearchResponse[Work]:
        """Not supported; always raises :class:`SearchNotImplementedError`."""
        self._unsupported("work")


__all__ = ["WS2Client"]
