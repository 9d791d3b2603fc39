"""De-duplicate and rank a person's combined movie credits."""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Mapping, Sequence

from movieshelf.services.formatting import get_year
from movieshelf.services.models import Credit
from movieshelf.services.tmdb import TMDbPayloadError, get_poster_url


logger = logging.getLogger(__name__)

# Credits without a release date sort ahead of every real year.
UNKNOWN_YEAR = 5000
KEPT_CREW_JOBS = ("Director", "Producer")
UNKNOWN_ROLE = "?"


def _compare_credits(a: Mapping[str, Any], b: Mapping[str, Any]) -> int:
    # Never returns 0: equal years compare as "a after b", which sorted()
    # only ever asks about via __lt__, so equal years keep input order.
    year_a = get_year(a.get("release_date")) or UNKNOWN_YEAR
    year_b = get_year(b.get("release_date")) or UNKNOWN_YEAR
    if year_a > year_b:
        return -1
    return 1


def sort_credits(credits: Sequence[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    """Newest release year first, undated credits at the very top.

    Entries that are not objects are left out.
    """

    return sorted(
        (entry for entry in credits if isinstance(entry, Mapping)),
        key=cmp_to_key(_compare_credits),
    )


def _to_credit(entry: Mapping[str, Any], release_year: int) -> Credit | None:
    as_crew = "job" in entry
    if as_crew and entry.get("job") not in KEPT_CREW_JOBS:
        return None
    role = entry.get("job") if as_crew else entry.get("character")
    return Credit(
        id=entry.get("id"),
        title=entry.get("title"),
        poster=get_poster_url(entry.get("poster_path")),
        rate=entry.get("vote_average"),
        release_year=release_year,
        role=role or UNKNOWN_ROLE,
    )


def normalize_credits(
    credits: Sequence[Mapping[str, Any]],
) -> tuple[list[Credit], list[Credit]]:
    """Return ``(movies, credits)`` for a person's combined crew and cast list.

    ``credits`` holds every credit in sorted order that has a release year,
    keeping crew entries only for directors and producers. ``movies`` keeps
    the first of those per movie id, so someone who both directed and acted
    in a film is listed once under whichever role sorted first.
    """

    if not isinstance(credits, (list, tuple)):
        raise TMDbPayloadError(
            f"credits must be a list, got {type(credits).__name__}"
        )

    movies: list[Credit] = []
    kept: list[Credit] = []
    seen_ids: list[Any] = []
    for entry in sort_credits(credits):
        release_year = get_year(entry.get("release_date"))
        if release_year is None:
            continue
        credit = _to_credit(entry, release_year)
        if credit is None:
            continue
        kept.append(credit)
        if credit.id in seen_ids:
            continue
        seen_ids.append(credit.id)
        movies.append(credit)

    logger.debug(
        "Normalized %d raw credits into %d credits across %d movies",
        len(credits),
        len(kept),
        len(movies),
    )
    return movies, kept
