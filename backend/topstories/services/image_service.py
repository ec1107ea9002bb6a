"""Thumbnail loading for article rows.

Each row owns one ``ImageLoader``. There is no shared cache and no retry: a
loader fetches its image once and keeps the bytes for as long as the row
exists. An empty buffer is both the initial and the failed state, so
consumers render a placeholder whenever ``data`` is empty.
"""

import asyncio
from collections.abc import Callable

import httpx
from pydantic import HttpUrl, TypeAdapter, ValidationError

from topstories.utils.logging import get_logger

logger = get_logger("topstories.services.image")

_url_adapter = TypeAdapter(HttpUrl)


def normalize_image_url(image_url: str) -> str:
    """Upgrade a leading ``http://`` to ``https://``; anything else is left as is."""
    if image_url.startswith("http://"):
        return "https://" + image_url[len("http://"):]
    return image_url


class ImageLoader:
    """One-shot fetcher for a single thumbnail."""

    def __init__(
        self,
        image_url: str | None,
        http_client: httpx.AsyncClient,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.image_url = normalize_image_url(image_url or "")
        self.http_client = http_client
        self.on_change = on_change
        self.data = b""

    @property
    def is_loaded(self) -> bool:
        return bool(self.data)

    def start(self) -> asyncio.Task[None]:
        """Schedule the fetch on the running loop and return its task."""
        return asyncio.create_task(self.load())

    async def load(self) -> None:
        """Fetch the image into ``data``; failures only leave the buffer empty."""
        try:
            _url_adapter.validate_python(self.image_url)
        except ValidationError:
            logger.warning("Invalid URL: %r", self.image_url)
            return

        try:
            response = await self.http_client.get(self.image_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Failed to fetch image %s: %s", self.image_url, e)
            return

        if not response.content:
            logger.debug("Empty image body for %s", self.image_url)
            return

        self.data = response.content
        if self.on_change is not None:
            self.on_change()
