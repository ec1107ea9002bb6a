"""Shared fixtures and payloads for the test suite."""

import logging
from collections.abc import AsyncGenerator, Callable, Generator

import httpx
import pytest

NEWS_URL = "https://news.test/news"

STORM_PAYLOAD = {
    "articles": [
        {
            "title": "Storm hits coast",
            "date": "Jan 1",
            "url": "https://n.example/1",
            "source": "Wire",
        }
    ]
}

FRONT_PAGE_PAYLOAD = {
    "articles": [
        {
            "title": "Storm hits coast",
            "date": "Jan 1",
            "url": "https://n.example/1",
            "image": "http://img.test/storm.png",
            "source": "Wire",
        },
        {
            "title": "Markets rally after Storm",
            "date": "Jan 2",
            "url": "https://n.example/2",
            "source": "Ledger",
        },
        {
            "title": "Local team wins",
            "date": "Jan 3",
            "url": "https://n.example/3",
            "image": "https://img.test/team.png",
            "source": "Sports Daily",
        },
    ]
}

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

Handler = Callable[[httpx.Request], httpx.Response]


def front_page_handler(request: httpx.Request) -> httpx.Response:
    """Serve the front page payload and its thumbnails."""
    if request.url.host == "news.test":
        return httpx.Response(200, json=FRONT_PAGE_PAYLOAD)
    if request.url.host == "img.test":
        return httpx.Response(200, content=PNG_BYTES)
    return httpx.Response(404)


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for AsyncClients backed by a MockTransport handler."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
async def front_page_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(front_page_handler))
    yield client
    await client.aclose()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo the logging setup done by the application lifespan."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
