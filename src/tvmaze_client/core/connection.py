"""Request execution, status classification and decoding."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol, TypeVar

from ..config import TvMazeClientConfig
from .decoding import ResponseCodec, ResponseDecoder
from .errors import (
    TvMazeDecodeError,
    TvMazeThrottledError,
    TvMazeTransportError,
    classify_response,
)
from .transport_shared import RawResponse, build_default_headers
from .urls import EndpointRequest

logger = logging.getLogger("tvmaze_client")

T = TypeVar("T")


class SyncDispatcher(Protocol):
    def dispatch(self, url: str, *, headers: Mapping[str, str]) -> RawResponse: ...
    def close(self) -> None: ...


class AsyncDispatcher(Protocol):
    async def dispatch(self, url: str, *, headers: Mapping[str, str]) -> RawResponse: ...
    async def close(self) -> None: ...


def _summary(url: str, response: RawResponse) -> str:
    return f"GET {url} {response.reason}".rstrip()


def _transport_error(url: str, exc: Exception) -> TvMazeTransportError:
    logger.error(
        "request transport error url=%s error=%s",
        url,
        exc.__class__.__name__,
    )
    return TvMazeTransportError(
        f"Unable to execute request: {exc}",
        cause="network",
    )


def evaluate_response(
    url: str,
    response: RawResponse,
    decoder: ResponseDecoder[T],
    codec: ResponseCodec,
) -> T:
    """Classify a received response and decode it when successful."""

    http_status = response.status_code
    logger.debug("response received url=%s http_status=%s", url, http_status)
    error = classify_response(
        http_status,
        headers=response.headers,
        summary=_summary(url, response),
    )
    if isinstance(error, TvMazeThrottledError):
        logger.warning(
            "request throttled url=%s retry_after=%s",
            url,
            error.retry_after_seconds,
        )
        raise error
    if error is not None:
        logger.error("request failed url=%s http_status=%s", url, http_status)
        raise error

    try:
        value = codec.decode(decoder, response.body)
    except TvMazeDecodeError as exc:
        exc.http_status = http_status
        logger.error(
            "response decode error url=%s http_status=%s shape=%s",
            url,
            http_status,
            decoder.shape.value,
        )
        raise
    logger.info("request success url=%s", url)
    return value


class _ConnectionBase:
    def __init__(self, config: TvMazeClientConfig, codec: ResponseCodec | None) -> None:
        self._config = config
        self._base_url = config.normalized_base_url
        self._headers = dict(build_default_headers(config))
        self._codec = codec or ResponseCodec()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> Mapping[str, str]:
        return dict(self._headers)

    @property
    def codec(self) -> ResponseCodec:
        return self._codec

    def url_for(self, request: EndpointRequest) -> str:
        return request.url(self._base_url)


class Connection(_ConnectionBase):
    """Blocking connection: one call, one outcome."""

    def __init__(
        self,
        config: TvMazeClientConfig,
        transport: SyncDispatcher,
        *,
        codec: ResponseCodec | None = None,
    ) -> None:
        super().__init__(config, codec)
        self._transport = transport

    def close(self) -> None:
        self._transport.close()

    def execute(self, request: EndpointRequest, decoder: ResponseDecoder[T]) -> T:
        url = self.url_for(request)
        logger.debug("request start url=%s", url)
        try:
            response = self._transport.dispatch(url, headers=self._headers)
        except Exception as exc:
            raise _transport_error(url, exc) from exc
        return evaluate_response(url, response, decoder, self._codec)


class AsyncConnection(_ConnectionBase):
    """Asyncio connection: same pipeline as :class:`Connection`, awaited."""

    def __init__(
        self,
        config: TvMazeClientConfig,
        transport: AsyncDispatcher,
        *,
        codec: ResponseCodec | None = None,
    ) -> None:
        super().__init__(config, codec)
        self._transport = transport

    async def close(self) -> None:
        await self._transport.close()

    async def execute(self, request: EndpointRequest, decoder: ResponseDecoder[T]) -> T:
        url = self.url_for(request)
        logger.debug("request start url=%s", url)
        try:
            response = await self._transport.dispatch(url, headers=self._headers)
        except Exception as exc:
            raise _transport_error(url, exc) from exc
        return evaluate_response(url, response, decoder, self._codec)


__all__ = [
    "SyncDispatcher",
    "AsyncDispatcher",
    "evaluate_response",
    "Connection",
    "AsyncConnection",
]
