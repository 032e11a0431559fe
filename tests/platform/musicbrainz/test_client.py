"""Tests for the WS2 search client."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

import pytest
import requests

from mbsearch.domain import Artist, Tag
from mbsearch.platform.musicbrainz import (
    DecodeError,
    HTTPResult,
    HTTPStatusError,
    InvalidRootAddressError,
    SearchNotImplementedError,
    TransportError,
    WS2Client,
)


def test_nirvana_search_end_to_end(
    client: WS2Client,
    fake_http: Any,
    nirvana_payload: bytes,
    nirvana_rows: tuple[tuple[str, str, int], ...],
) -> None:
    fake_http.result = HTTPResult(status=200, body=nirvana_payload)

    response = client.search_artist("Nirvana", 5, -1)

    assert len(fake_http.calls) == 1
    url, headers = fake_http.calls[0]
    assert url == "https://musicbrainz.org/ws/2/artist?query=Nirvana&limit=5"
    assert headers["User-Agent"] == "testapp/1.0 ( test@example.com )"

    assert (response.count, response.offset) == (210, 0)
    assert [artist.id for artist in response.entities] == [mbid for mbid, _, _ in nirvana_rows]
    assert all(isinstance(artist, Artist) for artist in response.entities)
    assert len(response.scores) == 5
    for artist, (_, _, score) in zip(response.entities, nirvana_rows, strict=True):
        assert response.scores[artist] == score


def test_defaults_omit_limit_and_offset(client: WS2Client, fake_http: Any, wrap_xml: Callable[[str], bytes]) -> None:
    fake_http.result = HTTPResult(status=200, body=wrap_xml('<tag-list count="0" offset="0"/>'))

    _ = client.search_tag("grunge")

    assert fake_http.calls[0][0] == "https://musicbrainz.org/ws/2/tag?query=grunge"


@pytest.mark.parametrize(
    ("method", "kind"),
    [
        ("search_annotation", "annotation"),
        ("search_area", "area"),
        ("search_artist", "artist"),
        ("search_release", "release"),
        ("search_release_group", "release-group"),
        ("search_tag", "tag"),
        ("search_cdstub", "cdstub"),
        ("search_label", "label"),
        ("search_place", "place"),
    ],
)
def test_each_kind_targets_its_endpoint(
    client: WS2Client,
    fake_http: Any,
    wrap_xml: Callable[[str], bytes],
    method: str,
    kind: str,
) -> None:
    fake_http.result = HTTPResult(
        status=200,
        body=wrap_xml(f'<{kind}-list count="7" offset="2"><{kind} id="x" ext:score="64"/></{kind}-list>'),
    )

    response = getattr(client, method)("q", 1, 2)

    assert fake_http.calls[0][0] == f"https://musicbrainz.org/ws/2/{kind}?query=q&limit=1&offset=2"
    assert (response.count, response.offset, len(response)) == (7, 2, 1)
    assert list(response.scores.values()) == [64]


def test_search_by_kind_name(client: WS2Client, fake_http: Any, wrap_xml: Callable[[str], bytes]) -> None:
    fake_http.result = HTTPResult(
        status=200,
        body=wrap_xml('<tag-list count="1" offset="0"><tag ext:score="100"><name>rock</name></tag></tag-list>'),
    )

    response = client.search("tag", "rock")

    assert response.entities == [Tag("rock")]


def test_search_by_unknown_kind_name(client: WS2Client, fake_http: Any) -> None:
    with pytest.raises(ValueError, match="Unknown entity kind"):
        _ = client.search("instrument", "guitar")
    assert fake_http.calls == []


@pytest.mark.parametrize("method", ["search_freedb", "search_recording", "search_work"])
def test_unsupported_kinds_raise_without_network(client: WS2Client, fake_http: Any, method: str) -> None:
    with pytest.raises(SearchNotImplementedError) as excinfo:
        getattr(client, method)("anything", 5, 0)
    assert isinstance(excinfo.value, NotImplementedError)
    assert fake_http.calls == []


def test_search_by_unsupported_kind_name(client: WS2Client) -> None:
    with pytest.raises(SearchNotImplementedError) as excinfo:
        _ = client.search("work", "Smells Like Teen Spirit")
    assert excinfo.value.kind == "work"


def test_malformed_payload_raises_decode_error(client: WS2Client, fake_http: Any) -> None:
    fake_http.result = HTTPResult(status=200, body=b'<metadata><artist-list count="1"><artist id="x"><na')

    result: Any = None
    with pytest.raises(DecodeError):
        result = client.search_artist("Nirvana", 5, -1)
    assert result is None


def test_non_success_status_raises_with_service_message(client: WS2Client, fake_http: Any) -> None:
    fake_http.result = HTTPResult(
        status=503,
        body=b"<error><text>Your requests are exceeding the allowable rate limit.</text></error>",
    )

    with pytest.raises(HTTPStatusError) as excinfo:
        _ = client.search_artist("Nirvana")

    assert excinfo.value.status == 503
    assert excinfo.value.message == "Your requests are exceeding the allowable rate limit."


def test_error_status_with_list_shaped_body_is_not_a_result(
    client: WS2Client, fake_http: Any, nirvana_payload: bytes
) -> None:
    fake_http.result = HTTPResult(status=404, body=nirvana_payload)

    with pytest.raises(HTTPStatusError):
        _ = client.search_artist("Nirvana")


def test_transport_error_propagates(client: WS2Client, fake_http: Any) -> None:
    cause = requests.ConnectionError("connection refused")
    fake_http.error = TransportError("https://musicbrainz.org/ws/2/artist?query=x", cause)

    with pytest.raises(TransportError) as excinfo:
        _ = client.search_artist("x")
    assert excinfo.value.cause is cause


def test_construction_rejects_invalid_root(fake_http: Any) -> None:
    with pytest.raises(InvalidRootAddressError):
        _ = WS2Client("\x01\x02\x03", "testapp", "1.0", "test@example.com", http_client=fake_http)


def test_set_root_url_replaces_address(client: WS2Client, fake_http: Any, nirvana_payload: bytes) -> None:
    fake_http.result = HTTPResult(status=200, body=nirvana_payload)

    client.set_root_url("http://localhost:5000/ws/2/")
    _ = client.search_artist("Nirvana")

    assert client.root_url == "http://localhost:5000/ws/2"
    assert fake_http.calls[0][0] == "http://localhost:5000/ws/2/artist?query=Nirvana"


def test_set_root_url_failure_keeps_previous_address(client: WS2Client) -> None:
    with pytest.raises(InvalidRootAddressError):
        client.set_root_url("\x00\x1f")
    assert client.root_url == "https://musicbrainz.org/ws/2"


def test_set_client_info_rebuilds_user_agent(client: WS2Client, fake_http: Any, nirvana_payload: bytes) -> None:
    fake_http.result = HTTPResult(status=200, body=nirvana_payload)

    client.set_client_info("other", "2.3", "https://example.com/contact")
    _ = client.search_artist("Nirvana")

    assert client.user_agent == "other/2.3 ( https://example.com/contact )"
    assert fake_http.calls[0][1]["User-Agent"] == "other/2.3 ( https://example.com/contact )"
    assert client.root_url == "https://musicbrainz.org/ws/2"


def test_concurrent_setters_never_mix_snapshots(client: WS2Client) -> None:
    def flip(index: int) -> None:
        for _ in range(200):
            client.set_client_info(f"app{index}", str(index), "c")
            client.set_root_url(f"https://mirror{index}.example.org/ws/2")

    threads = [threading.Thread(target=flip, args=(i,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert client.user_agent.startswith("app")
    assert client.root_url.startswith("https://mirror")


def test_search_events_are_logged(
    client: WS2Client,
    fake_http: Any,
    nirvana_payload: bytes,
    caplog: pytest.LogCaptureFixture,
) -> None:
    fake_http.result = HTTPResult(status=200, body=nirvana_payload)

    with caplog.at_level(logging.DEBUG, logger="mbsearch"):
        _ = client.search_artist("Nirvana", 5)

    events = [getattr(record, "search_event", None) for record in caplog.records]
    assert events == ["search.request", "search.response"]
    response_record = caplog.records[-1]
    assert getattr(response_record, "entries") == 5
    assert getattr(response_record, "status") == 200


def test_failed_search_logs_error_event(
    client: WS2Client,
    fake_http: Any,
    caplog: pytest.LogCaptureFixture,
) -> None:
    fake_http.result = HTTPResult(status=200, body=b"garbage")

    with caplog.at_level(logging.DEBUG, logger="mbsearch"), pytest.raises(DecodeError):
        _ = client.search_label("Sub Pop")

    assert getattr(caplog.records[-1], "search_event") == "search.error"
    assert getattr(caplog.records[-1], "endpoint") == "/label"
