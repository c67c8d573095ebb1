from __future__ import annotations

import logging

import httpx
import pytest

from tvmaze_client.core.connection import Connection
from tvmaze_client.core.decoding import ResponseDecoder
from tvmaze_client.core.errors import (
    TvMazeClientError,
    TvMazeDecodeError,
    TvMazeServerError,
    TvMazeThrottledError,
    TvMazeTransportError,
)
from tvmaze_client.core.urls import build_index_request, build_resource_request
from tvmaze_client.parser import parse_show
from tests.shared.payloads import make_show_payload
from tests.shared.transport import (
    CountingCodec,
    SyncSequencedTransport,
    build_config,
    make_response,
)

SHOW = ResponseDecoder.object_of(parse_show)
REQUEST = build_resource_request("/shows/", 42)


def _connection(steps, **kwargs) -> tuple[Connection, SyncSequencedTransport]:
    transport = SyncSequencedTransport(steps)
    return Connection(build_config(), transport, **kwargs), transport


def test_execute_returns_decoded_value_and_sends_fixed_headers():
    connection, transport = _connection([make_response(200, make_show_payload(42))])
    show = connection.execute(REQUEST, SHOW)
    assert show.id == 42
    assert transport.urls == ["https://api.test/shows/42"]
    sent = transport.headers[0]
    assert sent["Accept-Encoding"] == "gzip"
    assert sent["Accept"].startswith("application/json")
    assert sent["User-Agent"] == "tvmaze-client/0.1.0"


@pytest.mark.parametrize(
    "exc",
    [httpx.ConnectError("refused"), httpx.ReadTimeout("slow"), OSError("reset"), RuntimeError("boom")],
    ids=["connect", "timeout", "oserror", "runtime"],
)
def test_dispatch_exception_is_transport_error_wrapping_cause(exc):
    codec = CountingCodec()
    connection, _ = _connection([exc], codec=codec)
    with pytest.raises(TvMazeTransportError) as exc_info:
        connection.execute(REQUEST, SHOW)
    assert exc_info.value.__cause__ is exc
    assert exc_info.value.http_status is None
    assert codec.calls == 0


def test_throttled_response_carries_retry_after():
    connection, _ = _connection([make_response(429, headers={"Retry-After": "5"})])
    with pytest.raises(TvMazeThrottledError) as exc_info:
        connection.execute(build_index_request("/people", 0), SHOW)
    assert exc_info.value.retry_after_seconds == 5


def test_throttled_response_without_header_uses_default():
    connection, _ = _connection([make_response(429, {"error": "slow down"})])
    with pytest.raises(TvMazeThrottledError) as exc_info:
        connection.execute(REQUEST, SHOW)
    assert exc_info.value.retry_after_seconds == 10


def test_not_found_is_client_error_without_decode_attempt():
    codec = CountingCodec()
    connection, _ = _connection([make_response(404, reason="Not Found")], codec=codec)
    with pytest.raises(TvMazeClientError) as exc_info:
        connection.execute(REQUEST, SHOW)
    assert exc_info.value.http_status == 404
    assert "404" in str(exc_info.value)
    assert "https://api.test/shows/42" in str(exc_info.value)
    assert codec.calls == 0


def test_server_error_is_surfaced_without_decode_attempt():
    codec = CountingCodec()
    connection, _ = _connection([make_response(503, reason="Service Unavailable")], codec=codec)
    with pytest.raises(TvMazeServerError) as exc_info:
        connection.execute(REQUEST, SHOW)
    assert exc_info.value.http_status == 503
    assert codec.calls == 0


def test_exhausted_index_page_is_client_error_not_empty_list():
    connection, _ = _connection([make_response(404, reason="Not Found")])
    with pytest.raises(TvMazeClientError):
        connection.execute(build_index_request("/shows", 9999), ResponseDecoder.list_of(parse_show))


def test_unparseable_success_body_is_decode_error():
    connection, _ = _connection([make_response(200, body=b"\x1f\x8bgarbage")])
    with pytest.raises(TvMazeDecodeError) as exc_info:
        connection.execute(REQUEST, SHOW)
    assert exc_info.value.http_status == 200
    assert exc_info.value.__cause__ is not None


def test_errors_are_logged_not_swallowed(caplog):
    connection, _ = _connection([make_response(500)])
    with caplog.at_level(logging.ERROR, logger="tvmaze_client"):
        with pytest.raises(TvMazeServerError):
            connection.execute(REQUEST, SHOW)
    assert any("http_status=500" in record.getMessage() for record in caplog.records)


def test_close_delegates_to_transport():
    connection, transport = _connection([])
    connection.close()
    assert transport.closed is True


def test_base_url_is_normalized():
    transport = SyncSequencedTransport([make_response(200, make_show_payload(1))])
    connection = Connection(build_config("https://api.test/"), transport)
    connection.execute(build_resource_request("/shows/", 1), SHOW)
    assert connection.base_url == "https://api.test"
    assert transport.urls == ["https://api.test/shows/1"]


def test_throttled_response_with_non_ascii_digit_uses_default():
    # httpx decodes non-UTF-8 header bytes as latin-1, so b"\xb2" arrives as "²"
    connection, _ = _connection([make_response(429, headers={"Retry-After": "²"})])
    with pytest.raises(TvMazeThrottledError) as exc_info:
        connection.execute(REQUEST, SHOW)
    assert exc_info.value.retry_after_seconds == 10
