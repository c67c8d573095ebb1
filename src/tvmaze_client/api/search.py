"""Search and external-id lookup endpoints."""

from __future__ import annotations

from collections.abc import Awaitable
from enum import Enum

from ..core.decoding import ResponseDecoder
from ..core.embedded import Embed, ResourceKind, require_kind
from ..core.errors import TvMazeValidationError
from ..core.urls import build_path_request, validate_id, validate_search_query
from ..models import PersonResult, Show, ShowResult
from ..parser import parse_person_result, parse_show_result
from .base import ApiBase
from .shows import SHOW_DECODER

SEARCH_SHOWS_PATH = "/search/shows"
SINGLE_SEARCH_SHOWS_PATH = "/singlesearch/shows"
LOOKUP_SHOWS_PATH = "/lookup/shows"
SEARCH_PEOPLE_PATH = "/search/people"

SHOW_RESULT_LIST_DECODER = ResponseDecoder.list_of(parse_show_result)
PERSON_RESULT_LIST_DECODER = ResponseDecoder.list_of(parse_person_result)


class ShowLookupIdType(str, Enum):
    """External catalogue an id belongs to."""

    IMDB = "imdb"
    TV_RAGE = "tvrage"
    TVDB = "thetvdb"


class SearchApi(ApiBase):
    """Search endpoints; see https://www.tvmaze.com/api#search."""

    def search_shows(self, query: str) -> list[ShowResult] | Awaitable[list[ShowResult]]:
        request = build_path_request(
            SEARCH_SHOWS_PATH,
            params=(("q", validate_search_query(query)),),
        )
        return self._execute(request, SHOW_RESULT_LIST_DECODER)

    def single_search_show(self, query: str, *embeds: Embed) -> Show | Awaitable[Show]:
        request = build_path_request(
            SINGLE_SEARCH_SHOWS_PATH,
            params=(("q", validate_search_query(query)),),
            embeds=require_kind(ResourceKind.SHOW, embeds),
        )
        return self._execute(request, SHOW_DECODER)

    def lookup_show(
        self,
        id_type: ShowLookupIdType,
        external_id: str | int,
    ) -> Show | Awaitable[Show]:
        if not isinstance(id_type, ShowLookupIdType):
            raise TvMazeValidationError("id_type must be a ShowLookupIdType")
        request = build_path_request(
            LOOKUP_SHOWS_PATH,
            params=((id_type.value, validate_id(external_id, name="external_id")),),
        )
        return self._execute(request, SHOW_DECODER)

    def search_people(self, query: str) -> list[PersonResult] | Awaitable[list[PersonResult]]:
        request = build_path_request(
            SEARCH_PEOPLE_PATH,
            params=(("q", validate_search_query(query)),),
        )
        return self._execute(request, PERSON_RESULT_LIST_DECODER)


__all__ = [
    "ShowLookupIdType",
    "SearchApi",
]
