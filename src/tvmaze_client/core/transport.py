"""Sync HTTP transport over httpx."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import TvMazeClientConfig
from .transport_shared import (
    RawResponse,
    build_default_headers,
    build_default_timeout,
    to_raw_response,
)


class SyncTransport:
    """Blocking transport that returns undecoded response bodies."""

    def __init__(
        self,
        config: TvMazeClientConfig,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def dispatch(self, url: str, *, headers: Mapping[str, str]) -> RawResponse:
        if self._closed:
            raise RuntimeError("transport is already closed")
        with self._client.stream("GET", url, headers=headers) as response:
            body = b"".join(response.iter_raw())
        return to_raw_response(response, body)


__all__ = [
    "SyncTransport",
]
