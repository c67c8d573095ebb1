"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .api.base import ApiConnection
from .api.episodes import EpisodesApi
from .api.people import PeopleApi
from .api.schedule import ScheduleApi
from .api.search import SearchApi
from .api.shows import ShowsApi
from .api.updates import UpdatesApi
from .config import TvMazeClientConfig
from .core.errors import TvMazeValidationError


@dataclass(slots=True, frozen=True)
class ApiGroups:
    shows: ShowsApi
    episodes: EpisodesApi
    people: PeopleApi
    schedule: ScheduleApi
    search: SearchApi
    updates: UpdatesApi


def validate_client_config(config: TvMazeClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise TvMazeValidationError(str(exc)) from exc


def build_api_groups(
    connection: ApiConnection,
    *,
    ensure_open: Callable[[], None],
) -> ApiGroups:
    return ApiGroups(
        shows=ShowsApi(connection, ensure_open=ensure_open),
        episodes=EpisodesApi(connection, ensure_open=ensure_open),
        people=PeopleApi(connection, ensure_open=ensure_open),
        schedule=ScheduleApi(connection, ensure_open=ensure_open),
        search=SearchApi(connection, ensure_open=ensure_open),
        updates=UpdatesApi(connection, ensure_open=ensure_open),
    )


__all__ = [
    "ApiGroups",
    "validate_client_config",
    "build_api_groups",
]
