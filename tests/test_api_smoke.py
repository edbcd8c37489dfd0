"""
Smoke tests for the Movies Backend API.

These tests run the FastAPI app against a fake TMDb session; no network is used.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api import deps
from api.main import app
from movies_backend.gateway.service import MovieGateway

DEFINED_PATHS = [
    "/api/genres",
    "/api/movies/search",
    "/api/movies/discover",
    "/api/movies/550",
    "/api/movies/popular",
    "/api/movies/550/credits",
    "/api/movies/550/recommendations",
    "/api/person/287",
    "/api/configuration",
]


@pytest.fixture
def client(gateway_config, fake_session):  # noqa: ANN001
    """Create a test client whose gateway talks to the fake session."""
    gateway = MovieGateway(gateway_config, session=fake_session)
    app.dependency_overrides[deps.get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Test health check endpoints."""

    def test_root_returns_ok(self, client: TestClient):
        """Root endpoint returns status ok."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["service"] == "movies-backend"

    def test_health_returns_healthy(self, client: TestClient):
        """Health endpoint returns healthy status."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestMethodNotAllowed:
    @pytest.mark.parametrize("path", DEFINED_PATHS)
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    def test_non_get_yields_405(self, client: TestClient, fake_session, path: str, method: str):  # noqa: ANN001
        response = client.request(method, path)
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert fake_session.calls == []

    @pytest.mark.parametrize("path", DEFINED_PATHS)
    def test_head_yields_405(self, client: TestClient, fake_session, path: str):  # noqa: ANN001
        # HEAD responses carry no body, so only the status is observable.
        response = client.head(path)
        assert response.status_code == 405
        assert fake_session.calls == []


class TestSearch:
    def test_missing_query_is_400(self, client: TestClient, fake_session):  # noqa: ANN001
        response = client.get("/api/movies/search")
        assert response.status_code == 400
        assert "query" in response.json()["error"]
        assert fake_session.calls == []

    def test_search_returns_paginated_results(self, client: TestClient, fake_session, tmdb_fixture):  # noqa: ANN001
        fake_session.queue(200, body=tmdb_fixture("search_spider.json"))

        response = client.get("/api/movies/search", params={"query": "spider"})

        assert response.status_code == 200
        data = response.json()
        assert {"page", "results", "total_results", "total_pages"} <= set(data)
        assert isinstance(data["results"], list)
        call = fake_session.calls[0]
        assert call["url"] == "https://tmdb.test/3/search/movie"
        assert call["params"] == {"query": "spider", "page": 1}


class TestGenres:
    def test_genres_are_passed_through(self, client: TestClient, fake_session, tmdb_fixture):  # noqa: ANN001
        fake_session.queue(200, body=tmdb_fixture("genres.json"))

        response = client.get("/api/genres")

        assert response.status_code == 200
        genres = response.json()["genres"]
        assert len(genres) == 19
        assert genres[0] == {"id": 28, "name": "Action"}
        assert fake_session.calls[0]["url"] == "https://tmdb.test/3/genre/movie/list"


class TestMovies:
    def test_popular_dispatches_with_api_key(self, client: TestClient, fake_session):  # noqa: ANN001
        fake_session.queue(200, body={"page": 2, "results": [], "total_pages": 500, "total_results": 10000})

        response = client.get("/api/movies/popular", params={"page": "2"})

        assert response.status_code == 200
        call = fake_session.calls[0]
        assert call["params"] == {"page": 2, "api_key": "legacy-key"}
        assert "Authorization" not in call["headers"]

    def test_movie_details_dispatches_with_bearer(self, client: TestClient, fake_session, tmdb_fixture):  # noqa: ANN001
        fake_session.queue(200, body=tmdb_fixture("movie_550.json"))

        response = client.get("/api/movies/550")

        assert response.status_code == 200
        assert response.json()["videos"]["results"][0]["site"] == "YouTube"
        call = fake_session.calls[0]
        assert call["params"] == {"append_to_response": "videos"}
        assert call["headers"]["Authorization"] == "Bearer bearer-secret"

    def test_recommendations_default_page(self, client: TestClient, fake_session):  # noqa: ANN001
        client.get("/api/movies/550/recommendations")
        assert fake_session.calls[0]["params"] == {"page": 1}

    def test_upstream_404_is_passed_through(self, client: TestClient, fake_session):  # noqa: ANN001
        fake_session.queue(404, text="not found")
        fake_session.queue(404, text="not found")

        first = client.get("/api/movies/not-a-movie")
        second = client.get("/api/movies/not-a-movie")

        assert first.status_code == second.status_code == 404
        assert "not found" in first.json()["error"]
        assert first.json() == second.json()

    def test_empty_upstream_body_becomes_empty_object(self, client: TestClient, fake_session):  # noqa: ANN001
        fake_session.queue(200, text="")

        response = client.get("/api/person/287")

        assert response.status_code == 200
        assert response.json() == {}

    def test_non_finite_upstream_number_is_internal_error(self, client: TestClient, fake_session):  # noqa: ANN001
        fake_session.queue(200, text='{"genres": [], "vote_average": NaN}')

        response = client.get("/api/genres")

        assert response.status_code == 500
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"error": "Internal server error"}

    def test_unknown_endpoint_is_400(self, client: TestClient, fake_session):  # noqa: ANN001
        response = client.get("/api/tv/1399")
        assert response.status_code == 400
        assert "Unknown endpoint" in response.json()["error"]
        assert fake_session.calls == []


class TestCatalog:
    def test_catalog_lists_every_endpoint(self, client: TestClient):
        response = client.get("/api")
        assert response.status_code == 200
        data = response.json()
        assert data["baseUrl"] == "/api"
        paths = [e["path"] for e in data["endpoints"]]
        assert "/api/movies/search" in paths
        assert "/api/movies/{category}" in paths
        search = next(e for e in data["endpoints"] if e["path"] == "/api/movies/search")
        assert search["params"][0]["name"] == "query"
        assert search["params"][0]["in"] == "query"
        assert search["params"][0]["required"] is True


class TestCORSConfiguration:
    """Test CORS is properly configured."""

    def test_cors_preflight_is_answered(self, client: TestClient):
        response = client.options(
            "/api/genres",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )
        assert response.status_code == 200
