"""Response body decoding into typed values."""

from __future__ import annotations

import gzip
import json
import zlib
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import TvMazeDecodeError

T = TypeVar("T")

JsonObject = dict[str, Any]
ItemParser = Callable[[JsonObject], Any]


class Shape(str, Enum):
    OBJECT = "object"
    LIST = "list"
    ID_MAP = "id_map"


@dataclass(slots=True, frozen=True)
class ResponseDecoder(Generic[T]):
    """Expected response shape plus the parser for each JSON object."""

    shape: Shape
    parse_item: ItemParser | None = None

    @classmethod
    def object_of(cls, parser: Callable[[JsonObject], T]) -> "ResponseDecoder[T]":
        return cls(Shape.OBJECT, parser)

    @classmethod
    def list_of(cls, parser: Callable[[JsonObject], Any]) -> "ResponseDecoder[Any]":
        return cls(Shape.LIST, parser)

    @classmethod
    def id_map(cls) -> "ResponseDecoder[dict[int, int]]":
        return cls(Shape.ID_MAP)


def _require_object(value: object, *, what: str) -> JsonObject:
    if not isinstance(value, dict):
        raise TvMazeDecodeError(f"{what} must be a JSON object")
    return value


def _decode_id_map(payload: object) -> dict[int, int]:
    raw = _require_object(payload, what="updates payload")
    out: dict[int, int] = {}
    for key, value in raw.items():
        if not isinstance(key, str) or not key.lstrip("-").isdigit():
            raise TvMazeDecodeError(f"updates key {key!r} is not an integer")
        if isinstance(value, bool) or not isinstance(value, int):
            raise TvMazeDecodeError(f"updates value for {key} is not an integer")
        out[int(key)] = value
    return out


@dataclass(slots=True, frozen=True)
class ResponseCodec:
    """Codec settings shared by every request of one client."""

    loads: Callable[[bytes], object] = field(default=json.loads)

    @staticmethod
    def decompress(body: bytes) -> bytes:
        # Bodies are always gzip encoded by the service.
        return gzip.decompress(body)

    def decode(self, decoder: ResponseDecoder[T], body: bytes) -> T:
        """Decode a raw response body or raise :class:`TvMazeDecodeError`."""

        try:
            payload = self.loads(self.decompress(body))
        except (OSError, EOFError, zlib.error, ValueError, RecursionError) as exc:
            raise TvMazeDecodeError(
                f"Error parsing response: {exc}",
                cause="decode",
            ) from exc
        try:
            return self._decode_payload(decoder, payload)
        except TvMazeDecodeError:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise TvMazeDecodeError(
                f"Error parsing response: {exc.__class__.__name__}: {exc}",
                cause="decode",
            ) from exc

    @staticmethod
    def _decode_payload(decoder: ResponseDecoder[T], payload: object) -> Any:
        if decoder.shape is Shape.ID_MAP:
            return _decode_id_map(payload)
        if decoder.parse_item is None:
            raise TvMazeDecodeError(f"no item parser for {decoder.shape.value} response")
        if decoder.shape is Shape.OBJECT:
            return decoder.parse_item(_require_object(payload, what="response JSON root"))
        if not isinstance(payload, list):
            raise TvMazeDecodeError("response JSON root must be a list")
        return [
            decoder.parse_item(_require_object(item, what="list element"))
            for item in payload
        ]


__all__ = [
    "JsonObject",
    "ItemParser",
    "Shape",
    "ResponseDecoder",
    "ResponseCodec",
]
