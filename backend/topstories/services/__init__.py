"""Services package - fetching, filtering and feed state."""

from topstories.services.feed_service import ArticleRow, NewsFeed
from topstories.services.image_service import ImageLoader, normalize_image_url
from topstories.services.news_service import NewsService
from topstories.services.search_service import filter_articles

__all__ = [
    "ArticleRow",
    "NewsFeed",
    "ImageLoader",
    "normalize_image_url",
    "NewsService",
    "filter_articles",
]
