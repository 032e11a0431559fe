"""Tests for the ``requests``-backed HTTP adapter."""

from __future__ import annotations

import pytest
import requests
from pytest_mock import MockerFixture

from mbsearch.platform.musicbrainz import RequestsHTTPClient, TransportError

_URL = "https://musicbrainz.org/ws/2/artist?query=Nirvana"


def test_get_returns_status_body_and_headers(mocker: MockerFixture) -> None:
    get = mocker.patch("mbsearch.platform.musicbrainz.http_client.requests.get")
    get.return_value = mocker.Mock(
        status_code=200,
        content=b"<metadata/>",
        headers={"Content-Type": "application/xml; charset=UTF-8"},
    )

    result = RequestsHTTPClient(timeout=7.5).get(_URL, {"User-Agent": "app/1 ( me )"})

    get.assert_called_once_with(_URL, headers={"User-Agent": "app/1 ( me )"}, timeout=7.5)
    assert result.status == 200
    assert result.ok
    assert result.body == b"<metadata/>"
    assert result.headers["Content-Type"] == "application/xml; charset=UTF-8"


def test_error_statuses_are_returned_not_raised(mocker: MockerFixture) -> None:
    get = mocker.patch("mbsearch.platform.musicbrainz.http_client.requests.get")
    get.return_value = mocker.Mock(status_code=503, content=b"<error/>", headers={})

    result = RequestsHTTPClient().get(_URL, {})

    assert result.status == 503
    assert not result.ok


@pytest.mark.parametrize(
    "exc",
    [
        requests.ConnectionError("connection refused"),
        requests.Timeout("read timed out"),
        requests.exceptions.InvalidURL("bad"),
    ],
)
def test_request_exceptions_become_transport_errors(mocker: MockerFixture, exc: requests.RequestException) -> None:
    _ = mocker.patch("mbsearch.platform.musicbrainz.http_client.requests.get", side_effect=exc)

    with pytest.raises(TransportError) as excinfo:
        _ = RequestsHTTPClient().get(_URL, {})

    assert excinfo.value.cause is exc
    assert excinfo.value.url == _URL


def test_session_is_used_when_supplied(mocker: MockerFixture) -> None:
    module_get = mocker.patch("mbsearch.platform.musicbrainz.http_client.requests.get")
    session = mocker.Mock(spec=requests.Session)
    session.get.return_value = mocker.Mock(status_code=200, content=b"", headers={})

    _ = RequestsHTTPClient(session=session).get(_URL, {"Accept": "application/xml"})

    session.get.assert_called_once_with(_URL, headers={"Accept": "application/xml"}, timeout=None)
    module_get.assert_not_called()
