"""Shows, seasons and alternate-list endpoints."""

from __future__ import annotations

from collections.abc import Awaitable
from datetime import date

from ..core.decoding import ResponseDecoder
from ..core.embedded import (
    ALTERNATE_EPISODE_EPISODES,
    ALTERNATE_LIST_ALTERNATE_EPISODES,
    EPISODE_GUEST_CAST,
    Embed,
    ResourceKind,
    require_kind,
)
from ..core.urls import (
    build_index_request,
    build_resource_request,
    format_date,
    validate_id,
)
from ..models import (
    Alias,
    AlternateEpisode,
    AlternateList,
    CastMember,
    CrewMember,
    Episode,
    Image,
    Season,
    Show,
)
from ..parser import (
    parse_alias,
    parse_alternate_episode,
    parse_alternate_list,
    parse_cast_member,
    parse_crew_member,
    parse_episode,
    parse_image,
    parse_season,
    parse_show,
)
from .base import ApiBase

SHOWS_INDEX_PATH = "/shows"
SHOWS_PATH = SHOWS_INDEX_PATH + "/"
SEASONS_PATH = "/seasons/"
ALTERNATE_LISTS_PATH = "/alternatelists/"

SHOW_DECODER = ResponseDecoder.object_of(parse_show)
SHOW_LIST_DECODER = ResponseDecoder.list_of(parse_show)
EPISODE_DECODER = ResponseDecoder.object_of(parse_episode)
EPISODE_LIST_DECODER = ResponseDecoder.list_of(parse_episode)
SEASON_LIST_DECODER = ResponseDecoder.list_of(parse_season)
ALTERNATE_LIST_DECODER = ResponseDecoder.object_of(parse_alternate_list)
ALTERNATE_LIST_LIST_DECODER = ResponseDecoder.list_of(parse_alternate_list)
ALTERNATE_EPISODE_LIST_DECODER = ResponseDecoder.list_of(parse_alternate_episode)
CAST_MEMBER_LIST_DECODER = ResponseDecoder.list_of(parse_cast_member)
CREW_MEMBER_LIST_DECODER = ResponseDecoder.list_of(parse_crew_member)
ALIAS_LIST_DECODER = ResponseDecoder.list_of(parse_alias)
IMAGE_LIST_DECODER = ResponseDecoder.list_of(parse_image)


class ShowsApi(ApiBase):
    """Show endpoints; see https://www.tvmaze.com/api#shows."""

    def get_show(self, show_id: int, *embeds: Embed) -> Show | Awaitable[Show]:
        request = build_resource_request(
            SHOWS_PATH,
            show_id,
            embeds=require_kind(ResourceKind.SHOW, embeds),
        )
        return self._execute(request, SHOW_DECODER)

    def get_episodes(
        self,
        show_id: int,
        *,
        include_specials: bool = False,
    ) -> list[Episode] | Awaitable[list[Episode]]:
        params = (("specials", "1"),) if include_specials else ()
        request = build_resource_request(SHOWS_PATH, show_id, "/episodes", params=params)
        return self._execute(request, EPISODE_LIST_DECODER)

    def get_episode_by_number(
        self,
        show_id: int,
        season: int,
        number: int,
    ) -> Episode | Awaitable[Episode]:
        params = (
            ("season", validate_id(season, name="season")),
            ("number", validate_id(number, name="number")),
        )
        request = build_resource_request(SHOWS_PATH, show_id, "/episodebynumber", params=params)
        return self._execute(request, EPISODE_DECODER)

    def get_episodes_by_date(
        self,
        show_id: int,
        air_date: date,
    ) -> list[Episode] | Awaitable[list[Episode]]:
        params = (("date", format_date(air_date)),)
        request = build_resource_request(SHOWS_PATH, show_id, "/episodesbydate", params=params)
        return self._execute(request, EPISODE_LIST_DECODER)

    def get_seasons(self, show_id: int) -> list[Season] | Awaitable[list[Season]]:
        request = build_resource_request(SHOWS_PATH, show_id, "/seasons")
        return self._execute(request, SEASON_LIST_DECODER)

    def get_season_episodes(
        self,
        season_id: int,
        *,
        include_guest_cast: bool = False,
    ) -> list[Episode] | Awaitable[list[Episode]]:
        embeds = (EPISODE_GUEST_CAST,) if include_guest_cast else ()
        request = build_resource_request(SEASONS_PATH, season_id, "/episodes", embeds=embeds)
        return self._execute(request, EPISODE_LIST_DECODER)

    def get_alternate_lists(
        self,
        show_id: int,
    ) -> list[AlternateList] | Awaitable[list[AlternateList]]:
        request = build_resource_request(SHOWS_PATH, show_id, "/alternatelists")
        return self._execute(request, ALTERNATE_LIST_LIST_DECODER)

    def get_alternate_list(
        self,
        alternate_list_id: int,
        *,
        include_alternate_episodes: bool = False,
    ) -> AlternateList | Awaitable[AlternateList]:
        embeds = (ALTERNATE_LIST_ALTERNATE_EPISODES,) if include_alternate_episodes else ()
        request = build_resource_request(ALTERNATE_LISTS_PATH, alternate_list_id, embeds=embeds)
        return self._execute(request, ALTERNATE_LIST_DECODER)

    def get_alternate_episodes(
        self,
        alternate_list_id: int,
        *,
        include_episodes: bool = False,
    ) -> list[AlternateEpisode] | Awaitable[list[AlternateEpisode]]:
        embeds = (ALTERNATE_EPISODE_EPISODES,) if include_episodes else ()
        request = build_resource_request(
            ALTERNATE_LISTS_PATH,
            alternate_list_id,
            "/alternateepisodes",
            embeds=embeds,
        )
        return self._execute(request, ALTERNATE_EPISODE_LIST_DECODER)

    def get_cast(self, show_id: int) -> list[CastMember] | Awaitable[list[CastMember]]:
        request = build_resource_request(SHOWS_PATH, show_id, "/cast")
        return self._execute(request, CAST_MEMBER_LIST_DECODER)

    def get_crew(self, show_id: int) -> list[CrewMember] | Awaitable[list[CrewMember]]:
        request = build_resource_request(SHOWS_PATH, show_id, "/crew")
        return self._execute(request, CREW_MEMBER_LIST_DECODER)

    def get_aliases(self, show_id: int) -> list[Alias] | Awaitable[list[Alias]]:
        request = build_resource_request(SHOWS_PATH, show_id, "/akas")
        return self._execute(request, ALIAS_LIST_DECODER)

    def get_images(self, show_id: int) -> list[Image] | Awaitable[list[Image]]:
        request = build_resource_request(SHOWS_PATH, show_id, "/images")
        return self._execute(request, IMAGE_LIST_DECODER)

    def get_index(self, page: int = 0) -> list[Show] | Awaitable[list[Show]]:
        """One page (up to 250 shows) of the show index.

        Paging past the last page is answered with 404 and surfaces as
        ``TvMazeClientError``.
        """

        request = build_index_request(SHOWS_INDEX_PATH, page)
        return self._execute(request, SHOW_LIST_DECODER)


__all__ = [
    "SHOW_DECODER",
    "SHOW_LIST_DECODER",
    "EPISODE_DECODER",
    "EPISODE_LIST_DECODER",
    "ShowsApi",
]
