"""Where: src/mbsearch/platform/musicbrainz/http_client.py
What: HTTP adapter performing single GET requests for WS2 search calls.
Why: Decouple network concerns from parameter encoding and XML decoding.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Protocol, cast

import requests

from mbsearch.platform.logging import logger

from .errors import TransportError


@dataclass(slots=True)
class HTTPResult:
    """Represent an HTTP response as seen by the search client."""

    status: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class HTTPClient(Protocol):
    """Protocol for HTTP clients able to fetch a raw response body."""

    def get(self, url: str, headers: Mapping[str, str]) -> HTTPResult:
        ...


class RequestsHTTPClient:
    """Issue exactly one GET per call through ``requests``; no retries.

    Args:
        timeout: Seconds before the request is abandoned. ``None`` waits forever.
        session: Optional caller-owned session (connection pooling, proxies).
    """

    def __init__(
        self,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.timeout: float | None = timeout
        self._session: requests.Session | None = session

    def get(self, url: str, headers: Mapping[str, str]) -> HTTPResult:
        getter = self._session.get if self._session is not None else requests.get
        try:
            response = getter(url, headers=dict(headers), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.debug("WS2 transport failure for %s: %s", url, exc)
            raise TransportError(url, exc) from exc

        header_items = cast(Iterable[tuple[str, str]], response.headers.items())
        return HTTPResult(
            status=int(response.status_code),
            body=response.content,
            headers={str(key): str(value) for key, value in header_items},
        )


__all__ = ["HTTPClient", "HTTPResult", "RequestsHTTPClient"]
