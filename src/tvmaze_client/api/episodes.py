"""Episode endpoints."""

from __future__ import annotations

from collections.abc import Awaitable

from ..core.embedded import EPISODE_SHOW
from ..core.urls import build_resource_request
from ..models import CastMember, CrewMember, Episode
from .base import ApiBase
from .shows import CAST_MEMBER_LIST_DECODER, CREW_MEMBER_LIST_DECODER, EPISODE_DECODER

EPISODES_PATH = "/episodes/"


class EpisodesApi(ApiBase):
    """Episode endpoints; see https://www.tvmaze.com/api#episodes."""

    def get_episode(
        self,
        episode_id: int,
        *,
        include_show: bool = False,
    ) -> Episode | Awaitable[Episode]:
        embeds = (EPISODE_SHOW,) if include_show else ()
        request = build_resource_request(EPISODES_PATH, episode_id, embeds=embeds)
        return self._execute(request, EPISODE_DECODER)

    def get_guest_cast(self, episode_id: int) -> list[CastMember] | Awaitable[list[CastMember]]:
        request = build_resource_request(EPISODES_PATH, episode_id, "/guestcast")
        return self._execute(request, CAST_MEMBER_LIST_DECODER)

    def get_guest_crew(self, episode_id: int) -> list[CrewMember] | Awaitable[list[CrewMember]]:
        request = build_resource_request(EPISODES_PATH, episode_id, "/guestcrew")
        return self._execute(request, CREW_MEMBER_LIST_DECODER)


__all__ = [
    "EpisodesApi",
]
