"""TVMaze domain models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class Link:
    href: str
    name: str | None = None


@runtime_checkable
class Identifiable(Protocol):
    """Anything with an integer id and named links to related resources."""

    @property
    def id(self) -> int: ...

    @property
    def links(self) -> Mapping[str, Any]: ...


@dataclass(slots=True, frozen=True)
class Country:
    name: str | None
    code: str | None
    timezone: str | None


@dataclass(slots=True, frozen=True)
class ImageUrl:
    medium: str | None
    original: str | None


@dataclass(slots=True, frozen=True)
class Network:
    id: int
    name: str | None
    country: Country | None = None
    official_site: str | None = None


@dataclass(slots=True, frozen=True)
class WebChannel:
    id: int
    name: str | None
    country: Country | None = None
    official_site: str | None = None


@dataclass(slots=True, frozen=True)
class Rating:
    average: float | None


@dataclass(slots=True, frozen=True)
class Schedule:
    time: str | None
    days: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class Character:
    id: int
    links: Mapping[str, Link]
    url: str | None
    name: str | None
    image: ImageUrl | None = None


@dataclass(slots=True, frozen=True)
class Person:
    id: int
    links: Mapping[str, Link]
    url: str | None
    name: str | None
    country: Country | None = None
    birthday: date | None = None
    deathday: date | None = None
    gender: str | None = None
    image: ImageUrl | None = None
    updated: int | None = None
    cast_credits: tuple["CastCredit", ...] | None = None


@dataclass(slots=True, frozen=True)
class CastMember:
    person: Person | None
    character: Character | None
    is_self: bool = False
    is_voice: bool = False


@dataclass(slots=True, frozen=True)
class CrewMember:
    type: str | None
    person: Person | None
    guest_crew_type: str | None = None


@dataclass(slots=True, frozen=True)
class Episode:
    id: int
    links: Mapping[str, Link]
    url: str | None
    name: str | None
    season: int | None = None
    number: int | None = None
    type: str | None = None
    airdate: date | None = None
    airtime: time | None = None
    airstamp: datetime | None = None
    runtime: int | None = None
    rating: Rating | None = None
    image: ImageUrl | None = None
    summary: str | None = None
    guest_cast: tuple[CastMember, ...] | None = None
    show: "Show | None" = None


@dataclass(slots=True, frozen=True)
class Show:
    id: int
    links: Mapping[str, Link]
    url: str | None
    name: str | None
    type: str | None = None
    language: str | None = None
    genres: tuple[str, ...] = ()
    status: str | None = None
    runtime: int | None = None
    average_runtime: int | None = None
    premiered: date | None = None
    ended: date | None = None
    official_site: str | None = None
    schedule: Schedule | None = None
    rating: Rating | None = None
    weight: int | None = None
    network: Network | None = None
    web_channel: WebChannel | None = None
    dvd_country: Country | None = None
    externals: Mapping[str, str | None] = field(default_factory=dict)
    image: ImageUrl | None = None
    summary: str | None = None
    updated: int | None = None
    cast: tuple[CastMember, ...] | None = None
    episodes: tuple[Episode, ...] | None = None
    previous_episode: Episode | None = None
    next_episode: Episode | None = None


@dataclass(slots=True, frozen=True)
class Season:
    id: int
    links: Mapping[str, Link]
    url: str | None
    number: int | None = None
    name: str | None = None
    episode_order: int | None = None
    premiere_date: date | None = None
    end_date: date | None = None
    network: Network | None = None
    web_channel: WebChannel | None = None
    image: ImageUrl | None = None
    summary: str | None = None


@dataclass(slots=True, frozen=True)
class CastCredit:
    links: Mapping[str, Link]
    is_self: bool = False
    is_voice: bool = False
    show: Show | None = None
    episode: Episode | None = None


@dataclass(slots=True, frozen=True)
class CrewCredit:
    links: Mapping[str, Link]
    type: str | None = None
    show: Show | None = None


@dataclass(slots=True, frozen=True)
class ImageResolution:
    url: str | None
    width: int | None = None
    height: int | None = None


@dataclass(slots=True, frozen=True)
class Image:
    id: int
    links: Mapping[str, Link]
    type: str | None
    main: bool = False
    resolutions: Mapping[str, ImageResolution] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class Alias:
    name: str | None
    country: Country | None = None


@dataclass(slots=True, frozen=True)
class AlternateEpisode:
    id: int
    links: Mapping[str, tuple[Link, ...]]
    url: str | None
    name: str | None = None
    season: int | None = None
    number: int | None = None
    type: str | None = None
    airdate: date | None = None
    airtime: time | None = None
    airstamp: datetime | None = None
    runtime: int | None = None
    episodes: tuple[Episode, ...] | None = None


@dataclass(slots=True, frozen=True)
class AlternateList:
    id: int
    links: Mapping[str, Link]
    url: str | None
    dvd_release: bool = False
    verbatim_order: bool = False
    country_premiere: bool = False
    streaming_premiere: bool = False
    broadcast_premiere: bool = False
    language_premiere: bool = False
    language: str | None = None
    network: Network | None = None
    web_channel: WebChannel | None = None
    alternate_episodes: tuple[AlternateEpisode, ...] | None = None
    episodes: tuple[Episode, ...] | None = None


@dataclass(slots=True, frozen=True)
class ShowResult:
    score: float
    show: Show


@dataclass(slots=True, frozen=True)
class PersonResult:
    score: float
    person: Person


__all__ = [
    "Link",
    "Identifiable",
    "Country",
    "ImageUrl",
    "Network",
    "WebChannel",
    "Rating",
    "Schedule",
    "Character",
    "Person",
    "CastMember",
    "CrewMember",
    "Episode",
    "Show",
    "Season",
    "CastCredit",
    "CrewCredit",
    "ImageResolution",
    "Image",
    "Alias",
    "AlternateEpisode",
    "AlternateList",
    "ShowResult",
    "PersonResult",
]
