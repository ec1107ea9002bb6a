"""Outcome of an article list retrieval.

Exactly one of ``Loading``, ``Success`` or ``Failed`` describes the feed at
any time. A new fetch resets the feed to ``Loading``; the fetch completion
moves it to ``Success`` or ``Failed``.
"""

from dataclasses import dataclass, field

from topstories.errors import APIError
from topstories.schemas.article import ArticleRecord


@dataclass(frozen=True)
class Loading:
    """Initial state and state while a fetch is in flight."""

    status = "loading"


@dataclass(frozen=True)
class Success:
    """Articles in the order the service returned them."""

    articles: tuple[ArticleRecord, ...] = field(default_factory=tuple)

    status = "success"


@dataclass(frozen=True)
class Failed:
    """The fetch attempt ended with an error."""

    error: APIError

    status = "failed"


FetchResult = Loading | Success | Failed
