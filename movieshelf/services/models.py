"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Credit:
    """One movie a person worked on, as shown on the person page."""

    id: int | None
    title: str | None
    poster: str | None
    rate: float | None
    release_year: int | None
    role: str


@dataclass(slots=True)
class SearchMovie:
    id: int | None
    title: str | None
    poster: str | None
    rate: float | None
    release_year: int | None
    media_type: str = "movie"


@dataclass(slots=True)
class SearchPerson:
    id: int | None
    name: str | None
    photo: str | None
    # Empty so person rows can be rendered by the cast component.
    character: str = ""
    media_type: str = "person"


@dataclass(slots=True)
class MovieCard:
    """Poster tile for discover and list results."""

    id: int | None
    title: str | None
    poster: str | None
    backdrop: str | None
    rate: float | None
    vote: int | None
    release_year: int | None
    media_type: str = "movie"


@dataclass(slots=True)
class PersonCard:
    id: int | None
    name: str | None
    photo: str | None
    media_type: str = "person"


@dataclass(slots=True)
class Director:
    id: int | str = ""
    name: str = "?"


@dataclass(slots=True)
class CastMember:
    id: int | None
    name: str | None
    character: str | None
    photo: str | None


@dataclass(slots=True)
class MovieDetail:
    """Everything the movie page needs from a single ``/movie/{id}`` payload."""

    id: int | None
    title: str | None
    overview: str | None
    poster: str | None
    backdrop: str | None
    rate: float | None
    vote: int | None
    genres: list[dict[str, Any]]
    short_genre: str
    release: str
    release_year: int | None
    productions: str
    budget: str
    revenue: str
    duration: str
    director: Director
    cast: list[CastMember]
    trailer: str
    social: dict[str, Any]
    backdrops: list[dict[str, Any]] = field(default_factory=list)
    posters: list[dict[str, Any]] = field(default_factory=list)
    videos: list[dict[str, Any]] = field(default_factory=list)


@dataclass(slots=True)
class PersonDetail:
    id: int | None
    name: str | None
    photo: str | None
    biography: str | None
    known_for: str | None
    birthday: str
    place_birth: str | None
    social: dict[str, Any]
    photos: list[dict[str, Any]]
    movies: list[Credit]
    credits: list[Credit]


@dataclass(slots=True)
class MoreLink:
    """Trailing "see more" tile appended to a record row."""

    more: str
    id: str = "00"
