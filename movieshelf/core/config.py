"""Application configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    tmdb_api_key: str | None = Field(default=None, alias="TMDB_API_KEY")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3")
    tmdb_backdrop_base: str = Field(default="https://image.tmdb.org/t/p/w1280")
    tmdb_poster_base: str = Field(default="https://image.tmdb.org/t/p/w500")
    tmdb_profile_base: str = Field(default="https://image.tmdb.org/t/p/h632")
    tmdb_include_adult: bool = Field(default=False)
    tmdb_include_video: bool = Field(default=False)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
