"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping

THROTTLED_STATUS = 429
DEFAULT_RETRY_AFTER_SECONDS = 10
RETRY_AFTER_HEADER = "Retry-After"


class TvMazeApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.cause = cause


class TvMazeValidationError(TvMazeApiError, ValueError):
    """Invalid caller input; raised before any request is sent."""


class TvMazeClientClosedError(TvMazeApiError):
    """Raised when client is used after close."""


class TvMazeTransportError(TvMazeApiError):
    """Network/transport-level failure before a response was received."""


class TvMazeThrottledError(TvMazeApiError):
    """Request was rate limited (HTTP 429)."""

    def __init__(
        self,
        message: str,
        *,
        retry_after_seconds: int | None,
        http_status: int | None = THROTTLED_STATUS,
    ) -> None:
        super().__init__(message, http_status=http_status, cause="throttled")
        self.retry_after_seconds = retry_after_seconds


class TvMazeClientError(TvMazeApiError):
    """4xx response other than 429."""


class TvMazeServerError(TvMazeApiError):
    """Non-2xx response that is not a client error."""


class TvMazeDecodeError(TvMazeApiError):
    """Response body did not match the expected shape."""


def _header(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def extract_retry_after(headers: Mapping[str, str]) -> int:
    """Return the ``Retry-After`` value in seconds, or the default."""

    raw = _header(headers, RETRY_AFTER_HEADER)
    if raw is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    text = raw.strip()
    if text.isascii() and text.isdigit():
        return int(text)
    return DEFAULT_RETRY_AFTER_SECONDS


def classify_response(
    http_status: int,
    *,
    headers: Mapping[str, str],
    summary: str,
) -> TvMazeApiError | None:
    """Map an HTTP status to a domain exception, or ``None`` for 2xx."""

    if http_status == THROTTLED_STATUS:
        retry_after = extract_retry_after(headers)
        return TvMazeThrottledError(
            f"Request throttled. Retry after {retry_after} seconds",
            retry_after_seconds=retry_after,
        )
    if 400 <= http_status < 500:
        return TvMazeClientError(
            f"Error with request ({http_status}): {summary}",
            http_status=http_status,
            cause="client",
        )
    if not 200 <= http_status < 300:
        return TvMazeServerError(
            f"Unsuccessful response ({http_status}): {summary}",
            http_status=http_status,
            cause="server",
        )
    return None


__all__ = [
    "THROTTLED_STATUS",
    "DEFAULT_RETRY_AFTER_SECONDS",
    "RETRY_AFTER_HEADER",
    "TvMazeApiError",
    "TvMazeValidationError",
    "TvMazeClientClosedError",
    "TvMazeTransportError",
    "TvMazeThrottledError",
    "TvMazeClientError",
    "TvMazeServerError",
    "TvMazeDecodeError",
    "extract_retry_after",
    "classify_response",
]
