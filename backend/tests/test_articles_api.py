"""Tests for the articles API endpoints."""

from collections.abc import Generator

import httpx
import pytest
from fastapi.testclient import TestClient

from topstories.config import Settings
from topstories.main import create_app

from conftest import NEWS_URL, PNG_BYTES, front_page_handler


def make_test_client(handler, **settings_overrides) -> TestClient:
    settings = Settings(news_api_url=NEWS_URL, **settings_overrides)
    return TestClient(create_app(settings=settings, transport=httpx.MockTransport(handler)))


def wait_idle(client: TestClient) -> None:
    """Let the background fetches and image loads finish on the app's loop."""
    client.portal.call(client.app.state.feed.wait_idle)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with make_test_client(front_page_handler) as client:
        wait_idle(client)
        yield client


class TestGetArticles:
    def test_returns_loaded_articles(self, client: TestClient) -> None:
        response = client.get("/api/v1/articles")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["title"] == "Top Stories"
        assert data["version"] == "1.0"
        assert data["search_prompt"] == "Search for articles..."
        assert data["search_text"] == ""
        assert data["error"] is None
        assert [a["title"] for a in data["articles"]] == [
            "Storm hits coast",
            "Markets rally after Storm",
            "Local team wins",
        ]
        assert [a["image_loaded"] for a in data["articles"]] == [True, False, True]
        assert data["articles"][1]["image"] is None

    def test_failed_fetch_stays_loading(self) -> None:
        with make_test_client(lambda request: httpx.Response(500)) as client:
            wait_idle(client)
            data = client.get("/api/v1/articles").json()

        assert data["status"] == "loading"
        assert data["articles"] == []

    def test_failed_fetch_reported_when_enabled(self) -> None:
        with make_test_client(lambda request: httpx.Response(503), surface_fetch_errors=True) as client:
            wait_idle(client)
            data = client.get("/api/v1/articles").json()

        assert data["status"] == "failed"
        assert data["error"] == "503 - Something went wrong"


class TestRefreshAndSearch:
    def test_refresh_returns_loading_then_success(self, client: TestClient) -> None:
        response = client.post("/api/v1/articles/refresh")

        assert response.json()["status"] == "loading"
        wait_idle(client)
        data = client.get("/api/v1/articles").json()
        assert data["status"] == "success"
        assert len(data["articles"]) == 3

    def test_search_filters_by_title(self, client: TestClient) -> None:
        response = client.put("/api/v1/articles/search", json={"text": "Storm"})

        data = response.json()
        assert data["search_text"] == "Storm"
        assert [a["url"] for a in data["articles"]] == ["https://n.example/1", "https://n.example/2"]

    def test_search_is_case_sensitive(self, client: TestClient) -> None:
        data = client.put("/api/v1/articles/search", json={"text": "storm"}).json()

        assert data["status"] == "success"
        assert data["articles"] == []

    def test_clearing_search_reloads(self, client: TestClient) -> None:
        client.put("/api/v1/articles/search", json={"text": "team"})

        data = client.put("/api/v1/articles/search", json={"text": ""}).json()

        assert data["status"] == "loading"
        wait_idle(client)
        assert len(client.get("/api/v1/articles").json()["articles"]) == 3

    def test_long_search_text_is_filtered(self, client: TestClient) -> None:
        response = client.put("/api/v1/articles/search", json={"text": "Storm " * 200})

        assert response.status_code == 200
        assert response.json()["articles"] == []


class TestArticleRows:
    def test_image_bytes(self, client: TestClient) -> None:
        response = client.get("/api/v1/articles/0/image")

        assert response.status_code == 200
        assert response.content == PNG_BYTES
        assert response.headers["content-type"] == "image/png"

    def test_missing_image_is_placeholder(self, client: TestClient) -> None:
        response = client.get("/api/v1/articles/1/image")

        assert response.status_code == 204
        assert response.content == b""

    def test_open_redirects_to_article(self, client: TestClient) -> None:
        response = client.get("/api/v1/articles/2/open", follow_redirects=False)

        assert response.status_code == 307
        assert response.headers["location"] == "https://n.example/3"

    @pytest.mark.parametrize("path", ["/api/v1/articles/9/image", "/api/v1/articles/9/open"])
    def test_unknown_row(self, client: TestClient, path: str) -> None:
        response = client.get(path, follow_redirects=False)

        assert response.status_code == 404
        assert response.json()["detail"] == "Article 9 not found"

    def test_negative_row_is_not_found(self, client: TestClient) -> None:
        response = client.get("/api/v1/articles/-1/open", follow_redirects=False)

        assert response.status_code == 404
        assert response.json()["detail"] == "Article -1 not found"
