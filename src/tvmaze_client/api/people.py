"""People and credit endpoints."""

from __future__ import annotations

from collections.abc import Awaitable

from ..core.decoding import ResponseDecoder
from ..core.embedded import (
    CAST_CREDIT_EPISODE,
    CAST_CREDIT_SHOW,
    CREW_CREDIT_SHOW,
    PERSON_CAST_CREDITS,
)
from ..core.urls import build_index_request, build_resource_request
from ..models import CastCredit, CrewCredit, Person
from ..parser import parse_cast_credit, parse_crew_credit, parse_person
from .base import ApiBase

PEOPLE_INDEX_PATH = "/people"
PEOPLE_PATH = PEOPLE_INDEX_PATH + "/"

PERSON_DECODER = ResponseDecoder.object_of(parse_person)
PERSON_LIST_DECODER = ResponseDecoder.list_of(parse_person)
CAST_CREDIT_LIST_DECODER = ResponseDecoder.list_of(parse_cast_credit)
CREW_CREDIT_LIST_DECODER = ResponseDecoder.list_of(parse_crew_credit)


class PeopleApi(ApiBase):
    """People endpoints; see https://www.tvmaze.com/api#people."""

    def get_person(
        self,
        person_id: int,
        *,
        include_cast_credits: bool = False,
    ) -> Person | Awaitable[Person]:
        embeds = (PERSON_CAST_CREDITS,) if include_cast_credits else ()
        request = build_resource_request(PEOPLE_PATH, person_id, embeds=embeds)
        return self._execute(request, PERSON_DECODER)

    def get_cast_credits(
        self,
        person_id: int,
        *,
        include_show: bool = False,
    ) -> list[CastCredit] | Awaitable[list[CastCredit]]:
        embeds = (CAST_CREDIT_SHOW,) if include_show else ()
        request = build_resource_request(PEOPLE_PATH, person_id, "/castcredits", embeds=embeds)
        return self._execute(request, CAST_CREDIT_LIST_DECODER)

    def get_crew_credits(
        self,
        person_id: int,
        *,
        include_show: bool = False,
    ) -> list[CrewCredit] | Awaitable[list[CrewCredit]]:
        embeds = (CREW_CREDIT_SHOW,) if include_show else ()
        request = build_resource_request(PEOPLE_PATH, person_id, "/crewcredits", embeds=embeds)
        return self._execute(request, CREW_CREDIT_LIST_DECODER)

    def get_guest_cast_credits(
        self,
        person_id: int,
        *,
        include_episode: bool = False,
    ) -> list[CastCredit] | Awaitable[list[CastCredit]]:
        embeds = (CAST_CREDIT_EPISODE,) if include_episode else ()
        request = build_resource_request(
            PEOPLE_PATH,
            person_id,
            "/guestcastcredits",
            embeds=embeds,
        )
        return self._execute(request, CAST_CREDIT_LIST_DECODER)

    def get_index(self, page: int = 0) -> list[Person] | Awaitable[list[Person]]:
        request = build_index_request(PEOPLE_INDEX_PATH, page)
        return self._execute(request, PERSON_LIST_DECODER)


__all__ = [
    "PERSON_DECODER",
    "PeopleApi",
]
