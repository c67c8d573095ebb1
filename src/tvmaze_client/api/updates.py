"""Update-feed endpoints."""

from __future__ import annotations

from collections.abc import Awaitable
from enum import Enum

from ..core.decoding import ResponseDecoder
from ..core.errors import TvMazeValidationError
from ..core.urls import build_path_request
from .base import ApiBase

SHOW_UPDATES_PATH = "/updates/shows"
PERSON_UPDATES_PATH = "/updates/people"

UPDATES_DECODER = ResponseDecoder.id_map()


class Since(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def _since_params(since: Since | None) -> tuple[tuple[str, str], ...]:
    if since is None:
        return ()
    if not isinstance(since, Since):
        raise TvMazeValidationError("since must be a Since value")
    return (("since", since.value),)


class UpdatesApi(ApiBase):
    """Update feeds mapping resource id to last-updated epoch seconds."""

    def get_show_updates(self, since: Since | None = None) -> dict[int, int] | Awaitable[dict[int, int]]:
        request = build_path_request(SHOW_UPDATES_PATH, params=_since_params(since))
        return self._execute(request, UPDATES_DECODER)

    def get_person_updates(
        self,
        since: Since | None = None,
    ) -> dict[int, int] | Awaitable[dict[int, int]]:
        request = build_path_request(PERSON_UPDATES_PATH, params=_since_params(since))
        return self._execute(request, UPDATES_DECODER)


__all__ = [
    "Since",
    "UpdatesApi",
]
