"""Embedded resource selectors and their query-parameter encoding."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .errors import TvMazeValidationError

EMBED_PARAM = "embed"
EMBED_ARRAY_PARAM = "embed[]"


class ResourceKind(str, Enum):
    SHOW = "show"
    EPISODE = "episode"
    PERSON = "person"
    CAST_CREDIT = "castcredit"
    CREW_CREDIT = "crewcredit"
    ALTERNATE_LIST = "alternatelist"
    ALTERNATE_EPISODE = "alternateepisode"


_EMBED_VALUES: dict[ResourceKind, tuple[str, ...]] = {
    ResourceKind.SHOW: ("cast", "episodes", "nextepisode", "previousepisode"),
    ResourceKind.EPISODE: ("guestcast", "show"),
    ResourceKind.PERSON: ("castcredits",),
    ResourceKind.CAST_CREDIT: ("show", "episode"),
    ResourceKind.CREW_CREDIT: ("show",),
    ResourceKind.ALTERNATE_LIST: ("alternateepisodes", "episodes"),
    ResourceKind.ALTERNATE_EPISODE: ("episodes",),
}


@dataclass(slots=True, frozen=True)
class Embed:
    """Related data to inline into a response for one resource kind."""

    kind: ResourceKind
    value: str

    def __post_init__(self) -> None:
        allowed = _EMBED_VALUES[self.kind]
        if self.value not in allowed:
            raise TvMazeValidationError(
                f"{self.value!r} cannot be embedded in a {self.kind.value} resource"
            )


SHOW_CAST = Embed(ResourceKind.SHOW, "cast")
SHOW_EPISODES = Embed(ResourceKind.SHOW, "episodes")
SHOW_NEXT_EPISODE = Embed(ResourceKind.SHOW, "nextepisode")
SHOW_PREVIOUS_EPISODE = Embed(ResourceKind.SHOW, "previousepisode")
EPISODE_GUEST_CAST = Embed(ResourceKind.EPISODE, "guestcast")
EPISODE_SHOW = Embed(ResourceKind.EPISODE, "show")
PERSON_CAST_CREDITS = Embed(ResourceKind.PERSON, "castcredits")
CAST_CREDIT_SHOW = Embed(ResourceKind.CAST_CREDIT, "show")
CAST_CREDIT_EPISODE = Embed(ResourceKind.CAST_CREDIT, "episode")
CREW_CREDIT_SHOW = Embed(ResourceKind.CREW_CREDIT, "show")
ALTERNATE_LIST_ALTERNATE_EPISODES = Embed(ResourceKind.ALTERNATE_LIST, "alternateepisodes")
ALTERNATE_LIST_EPISODES = Embed(ResourceKind.ALTERNATE_LIST, "episodes")
ALTERNATE_EPISODE_EPISODES = Embed(ResourceKind.ALTERNATE_EPISODE, "episodes")


def embed_values(kind: ResourceKind) -> tuple[str, ...]:
    return _EMBED_VALUES[kind]


def require_kind(
    kind: ResourceKind,
    embeds: Iterable[Embed | None] | None,
) -> tuple[Embed | None, ...]:
    if embeds is None:
        return ()
    checked = tuple(embeds)
    for embed in checked:
        if embed is None:
            continue
        if embed.kind is not kind:
            raise TvMazeValidationError(
                f"{embed.kind.value} embed {embed.value!r} is not valid for a {kind.value} request"
            )
    return checked


def encode_embeds(embeds: Sequence[Embed | None] | None) -> list[tuple[str, str]]:
    """Encode selectors as ``embed`` (single) or repeated ``embed[]`` pairs."""

    if not embeds:
        return []
    if len(embeds) == 1 and embeds[0] is not None:
        return [(EMBED_PARAM, embeds[0].value)]
    return [(EMBED_ARRAY_PARAM, embed.value) for embed in embeds if embed is not None]


__all__ = [
    "EMBED_PARAM",
    "EMBED_ARRAY_PARAM",
    "ResourceKind",
    "Embed",
    "SHOW_CAST",
    "SHOW_EPISODES",
    "SHOW_NEXT_EPISODE",
    "SHOW_PREVIOUS_EPISODE",
    "EPISODE_GUEST_CAST",
    "EPISODE_SHOW",
    "PERSON_CAST_CREDITS",
    "CAST_CREDIT_SHOW",
    "CAST_CREDIT_EPISODE",
    "CREW_CREDIT_SHOW",
    "ALTERNATE_LIST_ALTERNATE_EPISODES",
    "ALTERNATE_LIST_EPISODES",
    "ALTERNATE_EPISODE_EPISODES",
    "embed_values",
    "require_kind",
    "encode_embeds",
]
