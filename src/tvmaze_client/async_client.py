"""Public async client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import build_api_groups, validate_client_config
from .config import TvMazeClientConfig
from .core.async_transport import AsyncTransport
from .core.connection import AsyncConnection, AsyncDispatcher
from .core.decoding import ResponseCodec
from .core.errors import TvMazeClientClosedError


class AsyncTvMazeClient:
    """Async TVMaze client; endpoint methods return awaitables."""

    def __init__(
        self,
        *,
        config: TvMazeClientConfig | None = None,
        transport: AsyncDispatcher | None = None,
        codec: ResponseCodec | None = None,
    ) -> None:
        self._config = config or TvMazeClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._connection = AsyncConnection(
            self._config,
            self._transport,
            codec=codec or ResponseCodec(),
        )
        self._closed = False

        groups = build_api_groups(self._connection, ensure_open=self._ensure_open)
        self.shows = groups.shows
        self.episodes = groups.episodes
        self.people = groups.people
        self.schedule = groups.schedule
        self.search = groups.search
        self.updates = groups.updates

    def _ensure_open(self) -> None:
        if self._closed:
            raise TvMazeClientClosedError("AsyncTvMazeClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._connection.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncTvMazeClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncTvMazeClient",
]
