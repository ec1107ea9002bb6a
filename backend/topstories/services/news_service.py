"""News service client - retrieves the article list from the news API."""

import httpx
from pydantic import ValidationError

from topstories.errors import DecodingError, ErrorCode, UnknownError
from topstories.schemas.article import NewsResponse
from topstories.state import Failed, Success
from topstories.utils.logging import get_logger

logger = get_logger("topstories.services.news")


class NewsService:
    """Client for the news endpoint, sharing the application's HTTP client."""

    def __init__(self, http_client: httpx.AsyncClient, url: str) -> None:
        self.http_client = http_client
        self.url = url

    async def fetch(self) -> Success | Failed:
        """
        Fetch and decode the article list.

        Every outcome is returned, never raised:

        Returns:
            ``Success`` with the articles in response order, or ``Failed``
            carrying ``UnknownError`` (transport), ``ErrorCode`` (non-2xx
            status) or ``DecodingError`` (unexpected body).
        """
        logger.debug("Fetching articles from %s", self.url)
        try:
            response = await self.http_client.get(self.url)
        except httpx.HTTPError as e:
            logger.warning("Article request to %s failed: %s", self.url, e)
            error = UnknownError()
            error.__cause__ = e
            return Failed(error=error)

        if not response.is_success:
            logger.warning("Article request to %s returned %s", self.url, response.status_code)
            return Failed(error=ErrorCode(response.status_code))

        try:
            news = NewsResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Could not decode articles from %s: %s", self.url, e)
            error = DecodingError()
            error.__cause__ = e
            return Failed(error=error)

        logger.info("Fetched %d articles from %s", len(news.articles), self.url)
        return Success(articles=tuple(news.articles))
