"""Request and image URL helpers for the TMDb v3 API."""

from __future__ import annotations

from typing import Any, Mapping

import logging

import httpx

from movieshelf.core.config import get_settings


logger = logging.getLogger(__name__)

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed"
YOUTUBE_THUMBNAIL_BASE = "https://img.youtube.com/vi"


class TMDbError(Exception):
    """Base exception for TMDb-related failures."""


class TMDbPayloadError(TMDbError):
    """Raised when a TMDb payload does not have the expected top-level shape."""


class TMDbConfigurationError(TMDbError):
    """Raised when the TMDb API key is missing."""


def request_url(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """Build a TMDb request URL.

    A query already on ``endpoint`` is kept ahead of ``params``. Extra
    ``params`` keep their order; the API key and the
    ``include_adult``/``include_video`` flags are always appended.
    """

    settings = get_settings()
    if not settings.tmdb_api_key:
        raise TMDbConfigurationError("TMDB_API_KEY is not configured")
    query: list[tuple[str, Any]] = list((params or {}).items())
    query.append(("api_key", settings.tmdb_api_key))
    query.append(("include_adult", settings.tmdb_include_adult))
    query.append(("include_video", settings.tmdb_include_video))
    url = httpx.URL(f"{settings.tmdb_base_url.rstrip('/')}{endpoint}").copy_merge_params(query)
    logger.debug("TMDb request url built for %s", endpoint)
    return str(url)


def request_headers() -> dict[str, str]:
    return {"Accept": "application/json"}


def get_parameter(url_or_query: str | None, key: str) -> str | None:
    """Return a query-string value from a URL or raw query, None when absent."""

    if not url_or_query:
        return None
    query = url_or_query.split("?", 1)[1] if "?" in url_or_query else url_or_query
    return httpx.QueryParams(query).get(key) or None


def _image_url(base: str, path: str | None) -> str | None:
    if not path:
        return None
    return f"{base.rstrip('/')}{path}"


def get_backdrop_url(path: str | None) -> str | None:
    return _image_url(get_settings().tmdb_backdrop_base, path)


def get_poster_url(path: str | None) -> str | None:
    return _image_url(get_settings().tmdb_poster_base, path)


def get_profile_url(path: str | None) -> str | None:
    return _image_url(get_settings().tmdb_profile_base, path)


def get_youtube_url(key: str) -> str:
    return f"{YOUTUBE_EMBED_BASE}/{key}?autoplay=1&enablejsapi=1&version=3"


def get_video_thumbnail(video_id: str) -> str:
    return f"{YOUTUBE_THUMBNAIL_BASE}/{video_id}/mqdefault.jpg"
