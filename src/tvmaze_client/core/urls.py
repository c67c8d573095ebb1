"""Endpoint request construction and input validation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from urllib.parse import urlencode

from .countries import is_iso_country_code
from .embedded import Embed, encode_embeds
from .errors import TvMazeValidationError

MAX_ID_LENGTH = 32
MAX_QUERY_LENGTH = 256
MAX_COUNTRY_CODE_LENGTH = 3
PAGE_PARAM = "page"
MAX_PAGE_SIZE = 250

QueryParams = tuple[tuple[str, str], ...]


@dataclass(slots=True, frozen=True)
class EndpointRequest:
    """A fully validated GET request relative to the service base URL."""

    base_path: str
    resource_id: str | None = None
    sub_path: str = ""
    query_params: QueryParams = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.query_params, tuple):
            object.__setattr__(self, "query_params", tuple(self.query_params))

    @property
    def path(self) -> str:
        return self.base_path + (self.resource_id or "") + self.sub_path

    def url(self, base_url: str) -> str:
        url = base_url.rstrip("/") + self.path
        if self.query_params:
            url += "?" + urlencode(self.query_params, safe="[]")
        return url


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_base_path(base_path: str) -> str:
    if not isinstance(base_path, str) or _is_blank(base_path):
        raise TvMazeValidationError("base_path must not be blank")
    return base_path


def validate_id(value: int | str, *, name: str = "id") -> str:
    """Validate a resource identifier and return its path form."""

    if isinstance(value, bool):
        raise TvMazeValidationError(f"{name} must be an int or str")
    if isinstance(value, int):
        if value < 0:
            raise TvMazeValidationError(f"{name} must be >= 0")
        value = str(value)
    if not isinstance(value, str):
        raise TvMazeValidationError(f"{name} must be an int or str")
    if _is_blank(value):
        raise TvMazeValidationError(f"{name} must not be blank")
    if len(value) > MAX_ID_LENGTH:
        raise TvMazeValidationError(f"{name} length must be <= {MAX_ID_LENGTH}")
    return value


def validate_search_query(query: str) -> str:
    if not isinstance(query, str) or _is_blank(query):
        raise TvMazeValidationError("query must not be blank")
    if len(query) > MAX_QUERY_LENGTH:
        raise TvMazeValidationError(f"query length must be <= {MAX_QUERY_LENGTH}")
    return query


def validate_country_code(country_code: str) -> str:
    if not isinstance(country_code, str) or _is_blank(country_code):
        raise TvMazeValidationError("country_code must not be blank")
    if len(country_code) > MAX_COUNTRY_CODE_LENGTH:
        raise TvMazeValidationError(
            f"country_code length must be <= {MAX_COUNTRY_CODE_LENGTH}"
        )
    if not is_iso_country_code(country_code):
        raise TvMazeValidationError("country_code must be a valid ISO 3166-1 country code")
    return country_code


def format_date(value: date) -> str:
    if not isinstance(value, date):
        raise TvMazeValidationError("date must be a datetime.date")
    return value.strftime("%Y-%m-%d")


def build_index_request(base_path: str, page: int) -> EndpointRequest:
    """Request for one page of a resource index.

    Page numbers follow the id rule, so a negative page is rejected before
    any request is sent rather than forwarded to the service.
    """

    validate_base_path(base_path)
    return EndpointRequest(
        base_path=base_path,
        query_params=((PAGE_PARAM, validate_id(page, name="page")),),
    )


def build_resource_request(
    base_path: str,
    resource_id: int | str,
    sub_path: str = "",
    *,
    embeds: Sequence[Embed | None] | None = None,
    params: Sequence[tuple[str, str]] = (),
) -> EndpointRequest:
    """Request for ``base_path + id + sub_path``; embeds precede filters."""

    validate_base_path(base_path)
    formatted_id = validate_id(resource_id)
    return EndpointRequest(
        base_path=base_path,
        resource_id=formatted_id,
        sub_path=sub_path,
        query_params=(*encode_embeds(embeds), *params),
    )


def build_path_request(
    base_path: str,
    *,
    params: Sequence[tuple[str, str]] = (),
    embeds: Sequence[Embed | None] | None = None,
) -> EndpointRequest:
    """Request for an id-less endpoint; filters precede embeds."""

    validate_base_path(base_path)
    return EndpointRequest(
        base_path=base_path,
        query_params=(*params, *encode_embeds(embeds)),
    )


__all__ = [
    "MAX_ID_LENGTH",
    "MAX_QUERY_LENGTH",
    "MAX_COUNTRY_CODE_LENGTH",
    "MAX_PAGE_SIZE",
    "PAGE_PARAM",
    "QueryParams",
    "EndpointRequest",
    "validate_base_path",
    "validate_id",
    "validate_search_query",
    "validate_country_code",
    "format_date",
    "build_index_request",
    "build_resource_request",
    "build_path_request",
]
