"""Shared fixtures for the WS2 client tests."""

from __future__ import annotations

import textwrap
from collections.abc import Callable, Mapping

import pytest

from mbsearch.platform.musicbrainz import HTTPResult, WS2Client

_ARTIST_ROWS: tuple[tuple[str, str, int], ...] = (
    ("5b11f4ce-a62d-471e-81fc-a69a8278c7da", "Nirvana", 100),
    ("9282c8b4-ca0b-4c6b-b7e3-4f7762dfc4d6", "Nirvana", 95),
    ("3aa878c0-224b-41e5-abd1-63be359d2bca", "Nirvana", 90),
    ("c49d69dc-e008-47cf-b5ff-160fafb1fe1f", "Nirvana UK", 85),
    ("f2dfdff9-3862-4be0-bf85-9c833fa3059e", "Nirvana 2002", 80),
)


class FakeHTTPClient:
    """In-memory ``HTTPClient`` recording every request it receives."""

    def __init__(self) -> None:
        self.result: HTTPResult = HTTPResult(status=200, body=b"")
        self.error: Exception | None = None
        self.calls: list[tuple[str, dict[str, str]]] = []

    def get(self, url: str, headers: Mapping[str, str]) -> HTTPResult:
        self.calls.append((url, dict(headers)))
        if self.error is not None:
            raise self.error
        return self.result


def xml_payload(body: str) -> bytes:
    """Wrap a list element in the WS2 ``<metadata>`` envelope."""

    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        '<metadata created="2014-07-01T12:00:00.000Z" '
        'xmlns="http://musicbrainz.org/ns/mmd-2.0#" '
        'xmlns:ext="http://musicbrainz.org/ns/ext#-2.0">'
        + textwrap.dedent(body).strip()
        + "</metadata>"
    ).encode("utf-8")


@pytest.fixture
def fake_http() -> FakeHTTPClient:
    return FakeHTTPClient()


@pytest.fixture
def client(fake_http: FakeHTTPClient) -> WS2Client:
    return WS2Client(
        "https://musicbrainz.org/ws/2",
        "testapp",
        "1.0",
        "test@example.com",
        http_client=fake_http,
    )


@pytest.fixture
def nirvana_payload() -> bytes:
    """Five Nirvana-ish artists with distinct, descending scores."""

    rows = "".join(
        f'<artist id="{mbid}" type="Group" ext:score="{score}">'
        f"<name>{name}</name><sort-name>{name}</sort-name></artist>"
        for mbid, name, score in _ARTIST_ROWS
    )
    return xml_payload(f'<artist-list count="210" offset="0">{rows}</artist-list>')


@pytest.fixture
def nirvana_rows() -> tuple[tuple[str, str, int], ...]:
    return _ARTIST_ROWS


@pytest.fixture
def wrap_xml() -> Callable[[str], bytes]:
    return xml_payload
