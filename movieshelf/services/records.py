"""Map raw TMDb payloads to the view records used by the movie and person pages."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from movieshelf.services.credits import normalize_credits
from movieshelf.services.formatting import (
    format_currency,
    format_full_date,
    format_minutes,
    get_age,
    get_short_genre,
    get_year,
    handle_null,
    production_list,
)
from movieshelf.services.models import (
    CastMember,
    Director,
    MoreLink,
    MovieCard,
    MovieDetail,
    PersonCard,
    PersonDetail,
    SearchMovie,
    SearchPerson,
)
from movieshelf.services.tmdb import (
    TMDbPayloadError,
    get_backdrop_url,
    get_poster_url,
    get_profile_url,
    get_youtube_url,
)


logger = logging.getLogger(__name__)

SEARCHABLE_DEPARTMENTS = ("Acting", "Production", "Directing")


def _require_mapping(payload: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise TMDbPayloadError(f"{what} payload must be an object, got {type(payload).__name__}")
    return payload


def _require_list(results: Any, what: str) -> Sequence[Mapping[str, Any]]:
    if not isinstance(results, (list, tuple)):
        raise TMDbPayloadError(f"{what} results must be a list, got {type(results).__name__}")
    return _objects(results)


def _objects(items: Any) -> list[Mapping[str, Any]]:
    """Entries of a list that are JSON objects; anything else is skipped."""

    if not isinstance(items, (list, tuple)):
        return []
    return [item for item in items if isinstance(item, Mapping)]


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


def filter_search_results(results: Sequence[Mapping[str, Any]]) -> list[SearchMovie | SearchPerson]:
    """Shape ``/search/multi`` results; TV shows and off-screen people are skipped."""

    shaped: list[SearchMovie | SearchPerson] = []
    for data in _require_list(results, "search"):
        media_type = data.get("media_type")
        if media_type == "movie":
            shaped.append(
                SearchMovie(
                    id=data.get("id"),
                    title=data.get("title"),
                    poster=get_poster_url(data.get("poster_path")),
                    rate=data.get("vote_average"),
                    release_year=get_year(data.get("release_date")),
                )
            )
        elif media_type == "person" and data.get("known_for_department") in SEARCHABLE_DEPARTMENTS:
            shaped.append(
                SearchPerson(
                    id=data.get("id"),
                    name=data.get("name"),
                    photo=get_profile_url(data.get("profile_path")),
                )
            )
    logger.debug("Search results: kept %d of %d", len(shaped), len(results))
    return shaped


def filter_movies(results: Sequence[Mapping[str, Any]]) -> list[MovieCard]:
    """Shape ``/discover/movie`` and list results."""

    return [
        MovieCard(
            id=data.get("id"),
            title=data.get("title"),
            poster=get_poster_url(data.get("poster_path")),
            backdrop=get_backdrop_url(data.get("backdrop_path")),
            rate=data.get("vote_average"),
            vote=data.get("vote_count"),
            release_year=get_year(data.get("release_date")),
        )
        for data in _require_list(results, "movie")
    ]


def filter_persons(results: Sequence[Mapping[str, Any]]) -> list[PersonCard]:
    """People without a profile picture are left out."""

    return [
        PersonCard(
            id=data.get("id"),
            name=data.get("name"),
            photo=get_profile_url(data.get("profile_path")),
        )
        for data in _require_list(results, "person")
        if data.get("profile_path")
    ]


def get_trailer(videos: Iterable[Mapping[str, Any]]) -> str:
    for video in _objects(videos):
        if video.get("type") == "Trailer" and video.get("site") == "YouTube":
            return get_youtube_url(video.get("key"))
    return ""


def get_director(crew: Iterable[Mapping[str, Any]]) -> Director:
    for member in _objects(crew):
        if member.get("job") == "Director":
            return Director(id=member.get("id"), name=member.get("name"))
    return Director()


def get_top_cast(cast: Iterable[Mapping[str, Any]]) -> list[CastMember]:
    return [
        CastMember(
            id=member.get("id"),
            name=member.get("name"),
            character=member.get("character"),
            photo=get_profile_url(member.get("profile_path")),
        )
        for member in _objects(cast)
        if member.get("profile_path")
    ]


def _social_links(payload: Mapping[str, Any]) -> dict[str, Any]:
    social = dict(_section(payload, "external_ids"))
    social["homepage"] = payload.get("homepage") or None
    return social


def filter_movie(payload: Mapping[str, Any]) -> MovieDetail:
    """Shape a ``/movie/{id}`` payload fetched with credits, videos, images
    and external_ids appended."""

    payload = _require_mapping(payload, "movie")
    credits = _section(payload, "credits")
    videos = _objects(_section(payload, "videos").get("results"))
    images = _section(payload, "images")
    genres = list(payload.get("genres") or [])
    budget = payload.get("budget")
    revenue = payload.get("revenue")

    return MovieDetail(
        id=payload.get("id"),
        title=payload.get("title"),
        overview=payload.get("overview"),
        poster=get_poster_url(payload.get("poster_path")),
        backdrop=get_backdrop_url(payload.get("backdrop_path")),
        rate=payload.get("vote_average"),
        vote=payload.get("vote_count"),
        genres=genres,
        short_genre=get_short_genre(genres),
        release=format_full_date(payload.get("release_date")),
        release_year=get_year(payload.get("release_date")),
        productions=production_list(payload.get("production_companies")),
        budget=handle_null(budget, "?", format_currency(budget)),
        revenue=handle_null(revenue, "?", format_currency(revenue)),
        duration=format_minutes(payload.get("runtime")),
        director=get_director(credits.get("crew") or []),
        cast=get_top_cast(credits.get("cast") or []),
        trailer=get_trailer(videos),
        social=_social_links(payload),
        backdrops=list(images.get("backdrops") or []),
        posters=list(images.get("posters") or []),
        videos=videos,
    )


def _birthday_label(birthday: str | None) -> str:
    age = get_age(birthday)
    if age is None:
        return ""
    return f"{format_full_date(birthday)} (age {age})"


def filter_person(payload: Mapping[str, Any]) -> PersonDetail:
    """Shape a ``/person/{id}`` payload fetched with movie_credits, images
    and external_ids appended."""

    payload = _require_mapping(payload, "person")
    movie_credits = _section(payload, "movie_credits")
    combined = [*_objects(movie_credits.get("crew")), *_objects(movie_credits.get("cast"))]
    movies, credits = normalize_credits(combined)

    return PersonDetail(
        id=payload.get("id"),
        name=payload.get("name"),
        photo=get_profile_url(payload.get("profile_path")),
        biography=payload.get("biography"),
        known_for=payload.get("known_for_department"),
        birthday=_birthday_label(payload.get("birthday")),
        place_birth=payload.get("place_of_birth"),
        social=_social_links(payload),
        photos=list(_section(payload, "images").get("profiles") or []),
        movies=movies,
        credits=credits,
    )


def with_more_link(records: Sequence[Any], url: str) -> list[Any]:
    """Return ``records`` followed by a "see more" tile pointing at ``url``."""

    return [*records, MoreLink(more=url)]
