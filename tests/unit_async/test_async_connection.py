from __future__ import annotations

import httpx
import pytest

from tvmaze_client.core.connection import AsyncConnection
from tvmaze_client.core.decoding import ResponseDecoder
from tvmaze_client.core.errors import (
    TvMazeClientError,
    TvMazeDecodeError,
    TvMazeThrottledError,
    TvMazeTransportError,
)
from tvmaze_client.core.urls import build_resource_request
from tvmaze_client.parser import parse_episode
from tests.shared.payloads import make_episode_payload
from tests.shared.transport import (
    AsyncSequencedTransport,
    CountingCodec,
    build_config,
    make_response,
)

EPISODE = ResponseDecoder.object_of(parse_episode)
REQUEST = build_resource_request("/episodes/", 1)


@pytest.mark.asyncio
async def test_execute_decodes_success():
    transport = AsyncSequencedTransport([make_response(200, make_episode_payload(1))])
    connection = AsyncConnection(build_config(), transport)
    episode = await connection.execute(REQUEST, EPISODE)
    assert episode.id == 1
    assert transport.urls == ["https://api.test/episodes/1"]
    assert transport.headers[0]["Accept-Encoding"] == "gzip"


@pytest.mark.asyncio
async def test_transport_failure_is_wrapped():
    cause = httpx.ConnectError("refused")
    connection = AsyncConnection(build_config(), AsyncSequencedTransport([cause]))
    with pytest.raises(TvMazeTransportError) as exc_info:
        await connection.execute(REQUEST, EPISODE)
    assert exc_info.value.__cause__ is cause


@pytest.mark.asyncio
async def test_throttled_and_client_errors_skip_decoding():
    codec = CountingCodec()
    transport = AsyncSequencedTransport(
        [
            make_response(429, headers={"retry-after": "5"}),
            make_response(404, reason="Not Found"),
        ]
    )
    connection = AsyncConnection(build_config(), transport, codec=codec)
    with pytest.raises(TvMazeThrottledError) as throttled:
        await connection.execute(REQUEST, EPISODE)
    with pytest.raises(TvMazeClientError):
        await connection.execute(REQUEST, EPISODE)
    assert throttled.value.retry_after_seconds == 5
    assert codec.calls == 0


@pytest.mark.asyncio
async def test_bad_success_body_is_decode_error():
    connection = AsyncConnection(
        build_config(),
        AsyncSequencedTransport([make_response(200, body=b'{"id": 1}')]),
    )
    with pytest.raises(TvMazeDecodeError):
        await connection.execute(REQUEST, EPISODE)


@pytest.mark.asyncio
async def test_close_delegates_to_transport():
    transport = AsyncSequencedTransport([])
    await AsyncConnection(build_config(), transport).close()
    assert transport.closed is True
