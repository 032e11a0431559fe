"""Where: src/mbsearch/platform/musicbrainz/errors.py
What: Exception hierarchy raised by the WS2 search client.
Why: Every failure reaches the caller as a typed error; nothing aborts the host process.
"""

from __future__ import annotations


class MusicBrainzError(Exception):
    """Base class for all errors raised by mbsearch."""


class InvalidRootAddressError(MusicBrainzError, ValueError):
    """The WS2 root address could not be parsed into a usable URL."""

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"Invalid WS2 root address {address!r}: {reason}")
        self.address: str = address
        self.reason: str = reason


class TransportError(MusicBrainzError):
    """The HTTP request could not be completed (DNS, refused connection, timeout)."""

    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(f"Request to {url} failed: {cause}")
        self.url: str = url
        self.cause: BaseException = cause


class HTTPStatusError(MusicBrainzError):
    """The service answered with a non-2xx status code."""

    def __init__(self, url: str, status: int, message: str | None = None) -> None:
        detail = f"HTTP {status} from {url}"
        if message:
            detail += f": {message}"
        super().__init__(detail)
        self.url: str = url
        self.status: int = status
        self.message: str | None = message


class DecodeError(MusicBrainzError):
    """The response body is not the XML list payload expected for the entity kind."""


class SearchNotImplementedError(MusicBrainzError, NotImplementedError):
    """The entity kind is declared but searching it is not supported."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"Search for {kind!r} is not implemented")
        self.kind: str = kind


__all__ = [
    "DecodeError",
    "HTTPStatusError",
    "InvalidRootAddressError",
    "MusicBrainzError",
    "SearchNotImplementedError",
    "TransportError",
]
