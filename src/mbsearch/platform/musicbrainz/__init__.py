"""MusicBrainz infrastructure package.

This package provides the WS2 search client together with its HTTP adapter,
XML decoder, and error types.
"""

from __future__ import annotations

from .client import WS2Client
from .errors import (
    DecodeError,
    HTTPStatusError,
    InvalidRootAddressError,
    MusicBrainzError,
    SearchNotImplementedError,
    TransportError,
)
from .http_client import HTTPClient, HTTPResult, RequestsHTTPClient
from .user_agent import format_user_agent

__all__ = [
    "DecodeError",
    "HTTPClient",
    "HTTPResult",
    "HTTPStatusError",
    "InvalidRootAddressError",
    "MusicBrainzError",
    "RequestsHTTPClient",
    "SearchNotImplementedError",
    "TransportError",
    "WS2Client",
    "format_user_agent",
]
