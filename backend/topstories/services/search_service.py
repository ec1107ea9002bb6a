"""Local title search over the articles currently held in memory."""

from collections.abc import Iterable

from topstories.schemas.article import ArticleRecord


def filter_articles(articles: Iterable[ArticleRecord], term: str) -> tuple[ArticleRecord, ...]:
    """
    Keep the articles whose title contains ``term``.

    Matching is a literal, case-sensitive substring test and the input order
    is preserved. An empty term matches every article; clearing the search is
    handled by the feed, not here.
    """
    return tuple(article for article in articles if term in article.title)
