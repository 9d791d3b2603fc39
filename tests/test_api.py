import pytest
from fastapi.testclient import TestClient

from movieshelf.core.config import get_settings
from movieshelf.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_person_credits_endpoint(client):
    body = {
        "crew": [{"id": 1, "title": "A", "release_date": "2020-01-01", "job": "Director"}],
        "cast": [
            {"id": 1, "title": "A", "release_date": "2020-01-01", "character": "Hero"},
            {"id": 2, "title": "B", "release_date": None, "character": "X"},
        ],
    }

    resp = client.post("/person/credits", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert [c["role"] for c in data["credits"]] == ["Director", "Hero"]
    assert len(data["movies"]) == 1
    assert data["movies"][0]["id"] == 1
    assert data["movies"][0]["release_year"] == 2020


def test_person_credits_rejects_non_list(client):
    resp = client.post("/person/credits", json={"crew": {"id": 1}, "cast": []})
    assert resp.status_code == 422


def test_person_endpoint(client):
    body = {
        "id": 5,
        "name": "Someone",
        "birthday": None,
        "movie_credits": {
            "cast": [{"id": 7, "title": "C", "release_date": "2011-02-03", "character": ""}],
        },
    }

    resp = client.post("/person", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data["birthday"] == ""
    assert data["movies"] == [
        {"id": 7, "title": "C", "poster": None, "rate": None, "release_year": 2011, "role": "?"}
    ]


def test_movie_endpoint(client):
    resp = client.post("/movie", json={"id": 603, "title": "The Matrix", "runtime": 136})

    assert resp.status_code == 200
    data = resp.json()
    assert data["duration"] == "2h 16m"
    assert data["director"] == {"id": "", "name": "?"}


def test_movies_endpoint_with_more_link(client):
    body = {"results": [{"id": 1, "title": "Alien", "release_date": "1979-05-25"}]}

    resp = client.post("/movies", params={"more": "/discover?page=2"}, json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert data[0]["release_year"] == 1979
    assert data[-1] == {"more": "/discover?page=2", "id": "00"}


def test_search_endpoint(client):
    body = {
        "results": [
            {"media_type": "person", "id": 2, "name": "Ridley Scott", "known_for_department": "Directing"},
            {"media_type": "tv", "id": 3, "name": "Show"},
        ]
    }

    resp = client.post("/search", json=body)

    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 2, "name": "Ridley Scott", "photo": None, "character": "", "media_type": "person"}
    ]


def test_search_without_results_is_unprocessable(client):
    resp = client.post("/search", json={"page": 1})
    assert resp.status_code == 422


def test_persons_endpoint(client):
    body = {"results": [{"id": 1, "name": "A", "profile_path": "/a.jpg"}, {"id": 2, "name": "B"}]}

    resp = client.post("/persons", json=body)

    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()] == [1]


def test_request_url_endpoint(client):
    resp = client.get("/request-url", params={"endpoint": "/discover/movie", "page": "2"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["url"] == (
        "https://api.themoviedb.org/3/discover/movie"
        "?page=2&api_key=test-key&include_adult=false&include_video=false"
    )
    assert data["headers"] == {"Accept": "application/json"}


def test_request_url_endpoint_without_api_key(client, monkeypatch):
    monkeypatch.delenv("TMDB_API_KEY", raising=False)
    monkeypatch.chdir("/")
    get_settings.cache_clear()

    resp = client.get("/request-url", params={"endpoint": "/discover/movie"})

    assert resp.status_code == 503


def test_person_credits_skips_entries_that_are_not_objects(client):
    body = {
        "crew": [1, None],
        "cast": [{"id": 3, "title": "C", "release_date": 2020, "character": "X"},
                 {"id": 4, "title": "D", "release_date": "2021-01-01", "character": "Y"}],
    }

    resp = client.post("/person/credits", json=body)

    assert resp.status_code == 200
    data = resp.json()
    assert [c["id"] for c in data["credits"]] == [4]
    assert [m["id"] for m in data["movies"]] == [4]
