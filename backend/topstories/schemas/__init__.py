"""Schemas package - pydantic models for the news payload and API responses."""

from topstories.schemas.article import ArticleRecord, NewsResponse
from topstories.schemas.feed import ArticleResponse, FeedStateResponse, SearchRequest

__all__ = ["ArticleRecord", "NewsResponse", "ArticleResponse", "FeedStateResponse", "SearchRequest"]
