import pytest

from movieshelf.core.config import get_settings


@pytest.fixture(autouse=True)
def tmdb_env(monkeypatch):
    # Settings are cached per process; rebuild them from a known environment
    monkeypatch.setenv("TMDB_API_KEY", "test-key")
    for name in ("TMDB_BASE_URL", "TMDB_POSTER_BASE", "TMDB_BACKDROP_BASE", "TMDB_PROFILE_BASE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
