"""Feed service - the view state shared with the rendering layer."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

import httpx

from topstories.schemas.article import ArticleRecord
from topstories.services.image_service import ImageLoader
from topstories.services.news_service import NewsService
from topstories.services.search_service import filter_articles
from topstories.state import Failed, FetchResult, Loading, Success
from topstories.utils.logging import get_logger

logger = get_logger("topstories.services.feed")

ClearSearchPolicy = Literal["refetch", "restore"]


@dataclass
class ArticleRow:
    """A displayed article together with the loader for its thumbnail."""

    article: ArticleRecord
    image: ImageLoader


class NewsFeed:
    """
    Explicit state for the article list screen.

    Holds the current fetch result, the search text and the displayed rows.
    A feed belongs to a single event loop: fetches and image loads run as
    tasks on that loop, so every mutation happens on the loop that serves
    the rendering layer. Fetches are never de-duplicated or cancelled; the
    last one to complete wins.
    """

    def __init__(
        self,
        news_service: NewsService,
        http_client: httpx.AsyncClient,
        surface_fetch_errors: bool = False,
        clear_search_policy: ClearSearchPolicy = "refetch",
    ) -> None:
        self.news_service = news_service
        self.http_client = http_client
        self.surface_fetch_errors = surface_fetch_errors
        self.clear_search_policy = clear_search_policy

        self.result: FetchResult = Loading()
        self.search_text = ""
        self.rows: list[ArticleRow] = []

        self._fetched: tuple[ArticleRecord, ...] | None = None
        self._tasks: set[asyncio.Task] = set()
        self._observers: list[Callable[["NewsFeed"], None]] = []

    @property
    def articles(self) -> tuple[ArticleRecord, ...]:
        """Articles currently displayed; empty unless the feed is ``Success``."""
        if isinstance(self.result, Success):
            return self.result.articles
        return ()

    @property
    def loading(self) -> bool:
        return isinstance(self.result, Loading)

    def subscribe(self, callback: Callable[["NewsFeed"], None]) -> None:
        """Register a callback invoked after every state, search or image change."""
        self._observers.append(callback)

    def load_news(self) -> asyncio.Task:
        """Reset to ``Loading`` and start a fetch without waiting for it."""
        self._apply(Loading())
        return self._track(asyncio.create_task(self._load()))

    def set_search_text(self, text: str) -> None:
        """
        Update the search text.

        A non-empty text narrows the currently displayed articles. Clearing
        it either fetches the list again (``refetch``) or puts back the last
        fetched list (``restore``).
        """
        if text == self.search_text:
            return
        self.search_text = text

        if text:
            if isinstance(self.result, Success):
                self._apply(Success(articles=filter_articles(self.result.articles, text)))
            else:
                self._notify()
        elif self.clear_search_policy == "restore" and self._fetched is not None:
            self._apply(Success(articles=self._fetched))
        else:
            self.load_news()

    def get_row(self, index: int) -> ArticleRow:
        """Return the displayed row at ``index``; negative positions are rejected."""
        if not 0 <= index < len(self.rows):
            raise IndexError(f"Article {index} not found")
        return self.rows[index]

    def select_article(self, index: int) -> ArticleRecord:
        """Return the article whose URL is handed to the browser view."""
        article = self.get_row(index).article
        logger.info("Opening %s", article.url)
        return article

    async def wait_idle(self) -> None:
        """Wait until every in-flight fetch and image load has finished."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def close(self) -> None:
        """Cancel in-flight work at shutdown."""
        for task in list(self._tasks):
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()

    async def _load(self) -> None:
        result = await self.news_service.fetch()
        if isinstance(result, Failed):
            if not self.surface_fetch_errors:
                logger.warning("Dropping failed fetch, feed stays loading: %s", result.error)
                return
            logger.error("Article fetch failed: %s", result.error)
        else:
            self._fetched = result.articles
        self._apply(result)

    def _apply(self, result: FetchResult) -> None:
        self.result = result
        self.rows = [self._make_row(article) for article in self.articles]
        self._notify()

    def _make_row(self, article: ArticleRecord) -> ArticleRow:
        loader = ImageLoader(article.image, self.http_client, on_change=self._notify)
        self._track(loader.start())
        return ArticleRow(article=article, image=loader)

    def _track(self, task: asyncio.Task) -> asyncio.Task:
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error("Background task failed", exc_info=task.exception())

    def _notify(self) -> None:
        for callback in self._observers:
            callback(self)
