"""FastAPI entrypoint that shapes already-fetched TMDb payloads into view records."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from fastapi import Body, FastAPI, HTTPException, Query, Request, status

from movieshelf.services.credits import normalize_credits
from movieshelf.services.models import MovieDetail, PersonCard, PersonDetail
from movieshelf.services.records import (
    filter_movie,
    filter_movies,
    filter_person,
    filter_persons,
    filter_search_results,
    with_more_link,
)
from movieshelf.services.tmdb import (
    TMDbConfigurationError,
    TMDbError,
    TMDbPayloadError,
    request_headers,
    request_url,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = FastAPI(title="Movie Shelf")


def _shape(shaper: Callable[..., T], *args: Any) -> T:
    """Run a shaper and translate TMDb errors into HTTP errors."""

    try:
        return shaper(*args)
    except TMDbPayloadError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except TMDbConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="TMDb is not configured on this server.",
        ) from exc
    except TMDbError as exc:
        logger.warning("TMDb shaping failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Movie data could not be processed.",
        ) from exc


@app.post("/search", response_model=None)
def shape_search(payload: dict[str, Any] = Body(...)) -> list[Any]:
    """Shape a ``/search/multi`` response."""

    return _shape(filter_search_results, payload.get("results"))


@app.post("/movies", response_model=None)
def shape_movies(
    payload: dict[str, Any] = Body(...),
    more: str | None = Query(default=None, description="URL for a trailing 'see more' tile"),
) -> list[Any]:
    movies = _shape(filter_movies, payload.get("results"))
    if more:
        return with_more_link(movies, more)
    return movies


@app.post("/movie", response_model=MovieDetail)
def shape_movie(payload: dict[str, Any] = Body(...)) -> MovieDetail:
    return _shape(filter_movie, payload)


@app.post("/persons", response_model=list[PersonCard])
def shape_persons(payload: dict[str, Any] = Body(...)) -> list[PersonCard]:
    return _shape(filter_persons, payload.get("results"))


@app.post("/person", response_model=PersonDetail)
def shape_person(payload: dict[str, Any] = Body(...)) -> PersonDetail:
    return _shape(filter_person, payload)


@app.post("/person/credits", response_model=None)
def shape_person_credits(payload: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Rank a ``{"crew": [...], "cast": [...]}`` body, crew first."""

    crew = payload.get("crew") or []
    cast = payload.get("cast") or []
    if not isinstance(crew, list) or not isinstance(cast, list):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="crew and cast must be lists",
        )
    movies, credits = _shape(normalize_credits, [*crew, *cast])
    return {"movies": movies, "credits": credits}


@app.get("/request-url")
def build_request_url(
    request: Request,
    endpoint: str = Query(..., description="TMDb path such as /discover/movie"),
) -> dict[str, Any]:
    """Return the TMDb URL for ``endpoint``; other query params are forwarded."""

    extra = [(key, value) for key, value in request.query_params.multi_items() if key != "endpoint"]
    url = _shape(request_url, endpoint, dict(extra))
    return {"url": url, "headers": request_headers()}
