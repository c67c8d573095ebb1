"""Parsers from TVMaze JSON payloads into typed models."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time
from typing import Any, TypeVar

from .core.decoding import JsonObject
from .core.errors import TvMazeDecodeError
from .models import (
    Alias,
    AlternateEpisode,
    AlternateList,
    CastCredit,
    CastMember,
    Character,
    Country,
    CrewCredit,
    CrewMember,
    Episode,
    Image,
    ImageResolution,
    ImageUrl,
    Link,
    Network,
    Person,
    PersonResult,
    Rating,
    Schedule,
    Season,
    Show,
    ShowResult,
    WebChannel,
)

T = TypeVar("T")


def _text(value: object, *, name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TvMazeDecodeError(f"{name} must be a string")
    return value


def _blank_to_none(value: object, *, name: str) -> str | None:
    text = _text(value, name=name)
    if text is None or text.strip() == "":
        return None
    return text


def _int(value: object, *, name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TvMazeDecodeError(f"{name} must be an integer")
    return value


def _required_id(item: JsonObject) -> int:
    value = _int(item.get("id"), name="id")
    if value is None:
        raise TvMazeDecodeError("id is required")
    return value


def _float(value: object, *, name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TvMazeDecodeError(f"{name} must be a number")
    return float(value)


def _object(value: object, *, name: str) -> JsonObject | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise TvMazeDecodeError(f"{name} must be an object")
    return value


def _optional(value: object, parse: Callable[[JsonObject], T], *, name: str) -> T | None:
    obj = _object(value, name=name)
    return parse(obj) if obj is not None else None


def _many(value: object, parse: Callable[[JsonObject], T], *, name: str) -> tuple[T, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise TvMazeDecodeError(f"{name} must be a list")
    out: list[T] = []
    for item in value:
        obj = _object(item, name=f"{name} element")
        if obj is None:
            raise TvMazeDecodeError(f"{name} element must not be null")
        out.append(parse(obj))
    return tuple(out)


def _date(value: object, *, name: str) -> date | None:
    text = _blank_to_none(value, name=name)
    return date.fromisoformat(text) if text is not None else None


def _time(value: object, *, name: str) -> time | None:
    text = _blank_to_none(value, name=name)
    return time.fromisoformat(text) if text is not None else None


def _datetime(value: object, *, name: str) -> datetime | None:
    text = _blank_to_none(value, name=name)
    return datetime.fromisoformat(text) if text is not None else None


def _link(item: JsonObject) -> Link:
    href = _text(item.get("href"), name="href")
    if href is None:
        raise TvMazeDecodeError("link href is required")
    return Link(href=href, name=_text(item.get("name"), name="name"))


def _links(item: JsonObject) -> dict[str, Link]:
    raw = _object(item.get("_links"), name="_links") or {}
    return {key: _link(_object(value, name=f"_links.{key}") or {}) for key, value in raw.items()}


def _multi_links(item: JsonObject) -> dict[str, tuple[Link, ...]]:
    raw = _object(item.get("_links"), name="_links") or {}
    out: dict[str, tuple[Link, ...]] = {}
    for key, value in raw.items():
        if isinstance(value, list):
            out[key] = _many(value, _link, name=f"_links.{key}") or ()
        else:
            out[key] = (_link(_object(value, name=f"_links.{key}") or {}),)
    return out


def _embedded(item: JsonObject) -> JsonObject:
    return _object(item.get("_embedded"), name="_embedded") or {}


def _bool(value: object, *, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TvMazeDecodeError(f"{name} must be a boolean")
    return value


def _strings(value: object, *, name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise TvMazeDecodeError(f"{name} must be a list")
    if not all(isinstance(entry, str) for entry in value):
        raise TvMazeDecodeError(f"{name} elements must be strings")
    return tuple(value)


def parse_country(item: JsonObject) -> Country:
    return Country(
        name=_text(item.get("name"), name="name"),
        code=_text(item.get("code"), name="code"),
        timezone=_text(item.get("timezone"), name="timezone"),
    )


def parse_image_url(item: JsonObject) -> ImageUrl:
    return ImageUrl(medium=_text(item.get("medium"), name="medium"), original=_text(item.get("original"), name="original"))


def parse_network(item: JsonObject) -> Network:
    return Network(
        id=_required_id(item),
        name=_text(item.get("name"), name="name"),
        country=_optional(item.get("country"), parse_country, name="country"),
        official_site=_text(item.get("officialSite"), name="officialSite"),
    )


def parse_web_channel(item: JsonObject) -> WebChannel:
    return WebChannel(
        id=_required_id(item),
        name=_text(item.get("name"), name="name"),
        country=_optional(item.get("country"), parse_country, name="country"),
        official_site=_text(item.get("officialSite"), name="officialSite"),
    )


def _rating(value: object) -> Rating | None:
    obj = _object(value, name="rating")
    if obj is None:
        return None
    return Rating(average=_float(obj.get("average"), name="rating.average"))


def _schedule(value: object) -> Schedule | None:
    obj = _object(value, name="schedule")
    if obj is None:
        return None
    return Schedule(
        time=_blank_to_none(obj.get("time"), name="schedule.time"),
        days=_strings(obj.get("days"), name="schedule.days"),
    )


def _external_id(value: object, *, name: str) -> str | None:
    # tvrage/thetvdb ids are numbers, imdb ids are strings
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _text(value, name=name)


def _externals(value: object) -> dict[str, str | None]:
    obj = _object(value, name="externals") or {}
    return {key: _external_id(raw, name=f"externals.{key}") for key, raw in obj.items()}


def parse_character(item: JsonObject) -> Character:
    return Character(
        id=_required_id(item),
        links=_links(item),
        url=_text(item.get("url"), name="url"),
        name=_text(item.get("name"), name="name"),
        image=_optional(item.get("image"), parse_image_url, name="image"),
    )


def parse_person(item: JsonObject) -> Person:
    embedded = _embedded(item)
    return Person(
        id=_required_id(item),
        links=_links(item),
        url=_text(item.get("url"), name="url"),
        name=_text(item.get("name"), name="name"),
        country=_optional(item.get("country"), parse_country, name="country"),
        birthday=_date(item.get("birthday"), name="birthday"),
        deathday=_date(item.get("deathday"), name="deathday"),
        gender=_text(item.get("gender"), name="gender"),
        image=_optional(item.get("image"), parse_image_url, name="image"),
        updated=_int(item.get("updated"), name="updated"),
        cast_credits=_many(embedded.get("castcredits"), parse_cast_credit, name="castcredits"),
    )


def parse_cast_member(item: JsonObject) -> CastMember:
    return CastMember(
        person=_optional(item.get("person"), parse_person, name="person"),
        character=_optional(item.get("character"), parse_character, name="character"),
        is_self=_bool(item.get("self"), name="self"),
        is_voice=_bool(item.get("voice"), name="voice"),
    )


def parse_crew_member(item: JsonObject) -> CrewMember:
    return CrewMember(
        type=_text(item.get("type"), name="type"),
        person=_optional(item.get("person"), parse_person, name="person"),
        guest_crew_type=_text(item.get("guestCrewType"), name="guestCrewType"),
    )


def parse_episode(item: JsonObject) -> Episode:
    embedded = _embedded(item)
    return Episode(
        id=_required_id(item),
        links=_links(item),
        url=_text(item.get("url"), name="url"),
        name=_text(item.get("name"), name="name"),
        season=_int(item.get("season"), name="season"),
        number=_int(item.get("number"), name="number"),
        type=_text(item.get("type"), name="type"),
        airdate=_date(item.get("airdate"), name="airdate"),
        airtime=_time(item.get("airtime"), name="airtime"),
        airstamp=_datetime(item.get("airstamp"), name="airstamp"),
        runtime=_int(item.get("runtime"), name="runtime"),
        rating=_rating(item.get("rating")),
        image=_optional(item.get("image"), parse_image_url, name="image"),
        summary=_text(item.get("summary"), name="summary"),
        guest_cast=_many(embedded.get("guestcast"), parse_cast_member, name="guestcast"),
        show=_optional(embedded.get("show"), parse_show, name="show"),
    )


def parse_show(item: JsonObject) -> Show:
    embedded = _embedded(item)
    return Show(
        id=_required_id(item),
        links=_links(item),
        url=_text(item.get("url"), name="url"),
        name=_text(item.get("name"), name="name"),
        type=_text(item.get("type"), name="type"),
        language=_text(item.get("language"), name="language"),
        genres=_strings(item.get("genres"), name="genres"),
        status=_text(item.get("status"), name="status"),
        runtime=_int(item.get("runtime"), name="runtime"),
        average_runtime=_int(item.get("averageRuntime"), name="averageRuntime"),
        premiered=_date(item.get("premiered"), name="premiered"),
        ended=_date(item.get("ended"), name="ended"),
        official_site=_text(item.get("officialSite"), name="officialSite"),
        schedule=_schedule(item.get("schedule")),
        rating=_rating(item.get("rating")),
        weight=_int(item.get("weight"), name="weight"),
        network=_optional(item.get("network"), parse_network, name="network"),
        web_channel=_optional(item.get("webChannel"), parse_web_channel, name="webChannel"),
        dvd_country=_optional(item.get("dvdCountry"), parse_country, name="dvdCountry"),
        externals=_externals(item.get("externals")),
        image=_optional(item.get("image"), parse_image_url, name="image"),
        summary=_text(item.get("summary"), name="summary"),
        updated=_int(item.get("updated"), name="updated"),
        cast=_many(embedded.get("cast"), parse_cast_member, name="cast"),
        episodes=_many(embedded.get("episodes"), parse_episode, name="episodes"),
        previous_episode=_optional(
            embedded.get("previousepisode"), parse_episode, name="previousepisode"
        ),
        next_episode=_optional(embedded.get("nextepisode"), parse_episode, name="nextepisode"),
    )


def parse_season(item: JsonObject) -> Season:
    return Season(
        id=_required_id(item),
        links=_links(item),
        url=_text(item.get("url"), name="url"),
        number=_int(item.get("number"), name="number"),
        name=_blank_to_none(item.get("name"), name="name"),
        episode_order=_int(item.get("episodeOrder"), name="episodeOrder"),
        premiere_date=_date(item.get("premiereDate"), name="premiereDate"),
        end_date=_date(item.get("endDate"), name="endDate"),
        network=_optional(item.get("network"), parse_network, name="network"),
        web_channel=_optional(item.get("webChannel"), parse_web_channel, name="webChannel"),
        image=_optional(item.get("image"), parse_image_url, name="image"),
        summary=_text(item.get("summary"), name="summary"),
    )


def parse_cast_credit(item: JsonObject) -> CastCredit:
    embedded = _embedded(item)
    return CastCredit(
        links=_links(item),
        is_self=_bool(item.get("self"), name="self"),
        is_voice=_bool(item.get("voice"), name="voice"),
        show=_optional(embedded.get("show"), parse_show, name="show"),
        episode=_optional(embedded.get("episode"), parse_episode, name="episode"),
    )


def parse_crew_credit(item: JsonObject) -> CrewCredit:
    embedded = _embedded(item)
    return CrewCredit(
        links=_links(item),
        type=_text(item.get("type"), name="type"),
        show=_optional(embedded.get("show"), parse_show, name="show"),
    )


def _image_resolution(item: JsonObject) -> ImageResolution:
    return ImageResolution(
        url=_text(item.get("url"), name="url"),
        width=_int(item.get("width"), name="width"),
        height=_int(item.get("height"), name="height"),
    )


def parse_image(item: JsonObject) -> Image:
    raw = _object(item.get("resolutions"), name="resolutions") or {}
    return Image(
        id=_required_id(item),
        links=_links(item),
        type=_text(item.get("type"), name="type"),
        main=_bool(item.get("main"), name="main"),
        resolutions={
            key: _image_resolution(_object(value, name=f"resolutions.{key}") or {})
            for key, value in raw.items()
        },
    )


def parse_alias(item: JsonObject) -> Alias:
    return Alias(
        name=_text(item.get("name"), name="name"),
        country=_optional(item.get("country"), parse_country, name="country"),
    )


def parse_alternate_episode(item: JsonObject) -> AlternateEpisode:
    embedded = _embedded(item)
    return AlternateEpisode(
        id=_required_id(item),
        links=_multi_links(item),
        url=_text(item.get("url"), name="url"),
        name=_text(item.get("name"), name="name"),
        season=_int(item.get("season"), name="season"),
        number=_int(item.get("number"), name="number"),
        type=_text(item.get("type"), name="type"),
        airdate=_date(item.get("airdate"), name="airdate"),
        airtime=_time(item.get("airtime"), name="airtime"),
        airstamp=_datetime(item.get("airstamp"), name="airstamp"),
        runtime=_int(item.get("runtime"), name="runtime"),
        episodes=_many(embedded.get("episodes"), parse_episode, name="episodes"),
    )


def parse_alternate_list(item: JsonObject) -> AlternateList:
    embedded = _embedded(item)
    return AlternateList(
        id=_required_id(item),
        links=_links(item),
        url=_text(item.get("url"), name="url"),
        dvd_release=_bool(item.get("dvd_release"), name="dvd_release"),
        verbatim_order=_bool(item.get("verbatim_order"), name="verbatim_order"),
        country_premiere=_bool(item.get("country_premiere"), name="country_premiere"),
        streaming_premiere=_bool(item.get("streaming_premiere"), name="streaming_premiere"),
        broadcast_premiere=_bool(item.get("broadcast_premiere"), name="broadcast_premiere"),
        language_premiere=_bool(item.get("language_premiere"), name="language_premiere"),
        language=_text(item.get("language"), name="language"),
        network=_optional(item.get("network"), parse_network, name="network"),
        web_channel=_optional(item.get("webChannel"), parse_web_channel, name="webChannel"),
        alternate_episodes=_many(
            embedded.get("alternateepisodes"),
            parse_alternate_episode,
            name="alternateepisodes",
        ),
        episodes=_many(embedded.get("episodes"), parse_episode, name="episodes"),
    )


def _score(item: JsonObject) -> float:
    score = _float(item.get("score"), name="score")
    if score is None:
        raise TvMazeDecodeError("score is required")
    return score


def _required(value: Any, parse: Callable[[JsonObject], T], *, name: str) -> T:
    parsed = _optional(value, parse, name=name)
    if parsed is None:
        raise TvMazeDecodeError(f"{name} is required")
    return parsed


def parse_show_result(item: JsonObject) -> ShowResult:
    return ShowResult(score=_score(item), show=_required(item.get("show"), parse_show, name="show"))


def parse_person_result(item: JsonObject) -> PersonResult:
    return PersonResult(
        score=_score(item),
        person=_required(item.get("person"), parse_person, name="person"),
    )


__all__ = [
    "parse_country",
    "parse_image_url",
    "parse_network",
    "parse_web_channel",
    "parse_character",
    "parse_person",
    "parse_cast_member",
    "parse_crew_member",
    "parse_episode",
    "parse_show",
    "parse_season",
    "parse_cast_credit",
    "parse_crew_credit",
    "parse_image",
    "parse_alias",
    "parse_alternate_episode",
    "parse_alternate_list",
    "parse_show_result",
    "parse_person_result",
]
