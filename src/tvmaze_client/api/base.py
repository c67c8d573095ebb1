"""Shared plumbing for endpoint operation groups."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from ..core.decoding import ResponseDecoder
from ..core.urls import EndpointRequest


class ApiConnection(Protocol):
    """``Connection`` or ``AsyncConnection``.

    The blocking connection returns the decoded value, the async one returns
    an awaitable of it; endpoint groups pass either result straight through.
    """

    def execute(self, request: EndpointRequest, decoder: ResponseDecoder[Any]) -> Any: ...


class ApiBase:
    def __init__(
        self,
        connection: ApiConnection,
        *,
        ensure_open: Callable[[], None] | None = None,
    ) -> None:
        self._connection = connection
        self._ensure_open = ensure_open or _always_open

    def _execute(self, request: EndpointRequest, decoder: ResponseDecoder[Any]) -> Any:
        self._ensure_open()
        return self._connection.execute(request, decoder)


def _always_open() -> None:
    return None


__all__ = [
    "ApiConnection",
    "ApiBase",
]
