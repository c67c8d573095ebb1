"""Public client entrypoint."""

from __future__ import annotations

from types import TracebackType

from .client_shared import build_api_groups, validate_client_config
from .config import TvMazeClientConfig
from .core.connection import Connection, SyncDispatcher
from .core.decoding import ResponseCodec
from .core.errors import TvMazeClientClosedError
from .core.transport import SyncTransport


class TvMazeClient:
    """Blocking TVMaze client.

    Every endpoint method validates its arguments, performs one GET and
    returns the decoded model, or raises a ``TvMazeApiError`` subclass.
    """

    def __init__(
        self,
        *,
        config: TvMazeClientConfig | None = None,
        transport: SyncDispatcher | None = None,
        codec: ResponseCodec | None = None,
    ) -> None:
        self._config = config or TvMazeClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._connection = Connection(self._config, self._transport, codec=codec or ResponseCodec())
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
            raise TvMazeClientClosedError("TvMazeClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._connection.close()
        self._closed = True

    def __enter__(self) -> "TvMazeClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "TvMazeClient",
]
