"""Endpoint operation groups."""

from .episodes import EpisodesApi
from .people import PeopleApi
from .schedule import ScheduleApi
from .search import SearchApi, ShowLookupIdType
from .shows import ShowsApi
from .updates import Since, UpdatesApi

__all__ = [
    "EpisodesApi",
    "PeopleApi",
    "ScheduleApi",
    "SearchApi",
    "ShowLookupIdType",
    "ShowsApi",
    "Since",
    "UpdatesApi",
]
