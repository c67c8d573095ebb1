from __future__ import annotations

import gzip
import json

import httpx
import pytest

from tvmaze_client.core.async_transport import AsyncTransport
from tests.shared.transport import build_config


@pytest.mark.asyncio
async def test_async_dispatch_returns_raw_gzip_body():
    body = gzip.compress(json.dumps([{"id": 1}]).encode("utf-8"))
    seen: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, headers={"Content-Encoding": "gzip"}, stream=httpx.ByteStream(body))

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    transport = AsyncTransport(build_config(), client=client)
    response = await transport.dispatch("https://api.test/shows?page=0", headers={"Accept-Encoding": "gzip"})

    assert response.status_code == 200
    assert response.body == body
    assert seen[0].url.params["page"] == "0"
    await transport.close()
    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio
async def test_async_network_failure_propagates():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        transport = AsyncTransport(build_config(), client=client)
        with pytest.raises(httpx.ReadTimeout):
            await transport.dispatch("https://api.test/x", headers={})


@pytest.mark.asyncio
async def test_async_owned_client_closes_once():
    transport = AsyncTransport(build_config())
    await transport.close()
    await transport.close()
    with pytest.raises(RuntimeError):
        await transport.dispatch("https://api.test/x", headers={})
