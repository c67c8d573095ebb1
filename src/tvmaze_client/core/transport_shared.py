"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

from ..config import TvMazeClientConfig

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
GZIP_ENCODING = "gzip"


@dataclass(slots=True, frozen=True)
class RawResponse:
    """Status, headers and the still-encoded body of one HTTP exchange."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    reason: str = ""


def build_default_headers(config: TvMazeClientConfig) -> Mapping[str, str]:
    return {
        "User-Agent": config.user_agent,
        "Accept": JSON_CONTENT_TYPE,
        "Accept-Encoding": GZIP_ENCODING,
    }


def build_default_timeout(config: TvMazeClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def to_raw_response(response: httpx.Response, body: bytes) -> RawResponse:
    return RawResponse(
        status_code=response.status_code,
        headers=dict(response.headers),
        body=body,
        reason=response.reason_phrase,
    )


__all__ = [
    "JSON_CONTENT_TYPE",
    "GZIP_ENCODING",
    "RawResponse",
    "build_default_headers",
    "build_default_timeout",
    "to_raw_response",
]
