"""Schedule endpoints."""

from __future__ import annotations

from collections.abc import Awaitable
from datetime import date

from ..core.urls import (
    build_path_request,
    format_date,
    validate_country_code,
)
from ..models import Episode
from .base import ApiBase
from .shows import EPISODE_LIST_DECODER

SCHEDULE_PATH = "/schedule"
WEB_SCHEDULE_PATH = SCHEDULE_PATH + "/web"
FULL_SCHEDULE_PATH = SCHEDULE_PATH + "/full"


def _schedule_params(country_code: str | None, air_date: date | None) -> tuple[tuple[str, str], ...]:
    params: list[tuple[str, str]] = []
    blank = isinstance(country_code, str) and country_code.strip() == ""
    if country_code is not None and not blank:
        params.append(("country", validate_country_code(country_code)))
    if air_date is not None:
        params.append(("date", format_date(air_date)))
    return tuple(params)


class ScheduleApi(ApiBase):
    """Schedule endpoints; see https://www.tvmaze.com/api#schedule.

    ``country_code`` is an ISO 3166-1 code; the service defaults to ``US``
    when omitted. ``air_date`` defaults to today on the service side.
    """

    def get_schedule(
        self,
        country_code: str | None = None,
        air_date: date | None = None,
    ) -> list[Episode] | Awaitable[list[Episode]]:
        request = build_path_request(SCHEDULE_PATH, params=_schedule_params(country_code, air_date))
        return self._execute(request, EPISODE_LIST_DECODER)

    def get_web_schedule(
        self,
        country_code: str | None = None,
        air_date: date | None = None,
    ) -> list[Episode] | Awaitable[list[Episode]]:
        request = build_path_request(
            WEB_SCHEDULE_PATH,
            params=_schedule_params(country_code, air_date),
        )
        return self._execute(request, EPISODE_LIST_DECODER)

    def get_full_schedule(self) -> list[Episode] | Awaitable[list[Episode]]:
        return self._execute(build_path_request(FULL_SCHEDULE_PATH), EPISODE_LIST_DECODER)


__all__ = [
    "ScheduleApi",
]
