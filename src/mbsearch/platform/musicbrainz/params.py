"""Where: src/mbsearch/platform/musicbrainz/params.py
What: Root URL validation and search query-string construction.
Why: Keep the ``-1`` omission rule and URL joining in one tested place.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import urlencode, urlsplit, urlunsplit

from .errors import InvalidRootAddressError

OMIT: Final[int] = -1
_ALLOWED_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})


def parse_root_url(address: str) -> str:
    """Validate a WS2 root address and return it without a trailing slash.

    Raises:
        InvalidRootAddressError: If the address is not an absolute http(s) URL.
    """

    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in address):
        raise InvalidRootAddressError(address, "contains whitespace or control characters")

    try:
        parts = urlsplit(address)
        _ = parts.port
    except ValueError as exc:
        raise InvalidRootAddressError(address, str(exc)) from exc

    if parts.scheme.lower() not in _ALLOWED_SCHEMES:
        raise InvalidRootAddressError(address, "scheme must be http or https")
    if not parts.hostname:
        raise InvalidRootAddressError(address, "missing host")
    if parts.query or parts.fragment:
        raise InvalidRootAddressError(address, "query and fragment are not allowed")

    return urlunsplit((parts.scheme.lower(), parts.netloc, parts.path.rstrip("/"), "", ""))


def _param_value(value: int) -> str | None:
    return None if value == OMIT else str(value)


def build_search_params(search_term: str, limit: int = OMIT, offset: int = OMIT) -> list[tuple[str, str]]:
    """Return ordered query pairs; ``limit``/``offset`` equal to ``-1`` are left out.

    Any other integer, including zero and other negatives, is passed through
    literally for the service to accept or reject.
    """

    params: list[tuple[str, str]] = [("query", search_term)]
    for name, raw in (("limit", limit), ("offset", offset)):
        value = _param_value(raw)
        if value is not None:
            params.append((name, value))
    return params


def build_search_url(root_url: str, endpoint: str, params: list[tuple[str, str]]) -> str:
    """Join ``root_url`` and ``endpoint`` and append the form-encoded ``params``."""

    return f"{root_url}{endpoint}?{urlencode(params)}"


__all__ = ["OMIT", "build_search_params", "build_search_url", "parse_root_url"]
