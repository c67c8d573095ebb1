from __future__ import annotations

import pytest

from tvmaze_client import AsyncTvMazeClient, TvMazeClient
from tvmaze_client.api import Since
from tvmaze_client.core.embedded import SHOW_CAST, SHOW_PREVIOUS_EPISODE
from tvmaze_client.core.errors import TvMazeClientClosedError, TvMazeValidationError
from tests.shared.payloads import make_cast_member_payload, make_episode_payload, make_show_payload
from tests.shared.transport import (
    AsyncSequencedTransport,
    SyncSequencedTransport,
    build_config,
    make_response,
)


def _show_with_embeds():
    return make_show_payload(
        1,
        _embedded={
            "cast": [make_cast_member_payload()],
            "previousepisode": make_episode_payload(9),
        },
    )


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport():
    transport = AsyncSequencedTransport([make_response(200, make_show_payload(1))])
    async with AsyncTvMazeClient(config=build_config(), transport=transport) as client:
        show = await client.shows.get_show(1)
    assert show.id == 1
    assert transport.closed is True


@pytest.mark.asyncio
async def test_sync_and_async_clients_agree():
    sync_transport = SyncSequencedTransport([make_response(200, _show_with_embeds())])
    async_transport = AsyncSequencedTransport([make_response(200, _show_with_embeds())])

    with TvMazeClient(config=build_config(), transport=sync_transport) as sync_client:
        sync_show = sync_client.shows.get_show(1, SHOW_CAST, SHOW_PREVIOUS_EPISODE)
    async with AsyncTvMazeClient(config=build_config(), transport=async_transport) as async_client:
        async_show = await async_client.shows.get_show(1, SHOW_CAST, SHOW_PREVIOUS_EPISODE)

    assert sync_transport.urls == async_transport.urls
    assert sync_show == async_show
    assert async_show.previous_episode.id == 9


@pytest.mark.asyncio
async def test_async_updates_decode_id_map():
    transport = AsyncSequencedTransport([make_response(200, {"10": 1, "11": 2})])
    client = AsyncTvMazeClient(config=build_config(), transport=transport)
    updates = await client.updates.get_show_updates(Since.WEEK)
    assert updates == {10: 1, 11: 2}
    assert transport.urls == ["https://api.test/updates/shows?since=week"]
    await client.close()


@pytest.mark.asyncio
async def test_validation_is_raised_at_call_time():
    transport = AsyncSequencedTransport([])
    client = AsyncTvMazeClient(config=build_config(), transport=transport)
    with pytest.raises(TvMazeValidationError):
        client.search.search_shows("   ")
    assert transport.urls == []
    await client.close()


@pytest.mark.asyncio
async def test_calls_after_close_are_rejected():
    transport = AsyncSequencedTransport([])
    client = AsyncTvMazeClient(config=build_config(), transport=transport)
    await client.close()
    await client.close()
    with pytest.raises(TvMazeClientClosedError):
        client.people.get_person(1)
    assert transport.urls == []
