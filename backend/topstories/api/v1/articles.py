"""Articles API endpoints - the presentation boundary of the feed."""

import filetype
from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import RedirectResponse

from topstories.api.deps import get_app_settings, get_feed
from topstories.config import Settings
from topstories.schemas.feed import ArticleResponse, FeedStateResponse, SearchRequest
from topstories.services.feed_service import ArticleRow, NewsFeed
from topstories.state import Failed

router = APIRouter()


def build_state_response(feed: NewsFeed, settings: Settings) -> FeedStateResponse:
    """Snapshot the feed for the rendering layer."""
    return FeedStateResponse(
        title=settings.app_name,
        version=settings.app_version,
        status=feed.result.status,
        articles=[
            ArticleResponse(
                index=index,
                title=row.article.title,
                date=row.article.date,
                url=row.article.url,
                image=row.article.image,
                source=row.article.source,
                image_loaded=row.image.is_loaded,
            )
            for index, row in enumerate(feed.rows)
        ],
        error=feed.result.error.description if isinstance(feed.result, Failed) else None,
        search_text=feed.search_text,
        search_prompt=settings.search_prompt,
    )


def _get_row(feed: NewsFeed, index: int) -> ArticleRow:
    try:
        return feed.get_row(index)
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get("", response_model=FeedStateResponse)
async def get_articles(
    feed: NewsFeed = Depends(get_feed),
    settings: Settings = Depends(get_app_settings),
) -> FeedStateResponse:
    """Current feed state: loading, the displayed articles, or the failure."""
    return build_state_response(feed, settings)


@router.post("/refresh", response_model=FeedStateResponse)
async def refresh_articles(
    feed: NewsFeed = Depends(get_feed),
    settings: Settings = Depends(get_app_settings),
) -> FeedStateResponse:
    """
    Fetch the article list again.

    Returns immediately with the feed in the loading state; the new list
    shows up once the fetch completes.
    """
    feed.load_news()
    return build_state_response(feed, settings)


@router.put("/search", response_model=FeedStateResponse)
async def search_articles(
    search_in: SearchRequest,
    feed: NewsFeed = Depends(get_feed),
    settings: Settings = Depends(get_app_settings),
) -> FeedStateResponse:
    """
    Update the search text.

    - Non-empty text narrows the displayed articles by title (case-sensitive)
    - Empty text clears the search according to the configured policy
    """
    feed.set_search_text(search_in.text)
    return build_state_response(feed, settings)


@router.get("/{index}/image")
async def get_article_image(index: int, feed: NewsFeed = Depends(get_feed)) -> Response:
    """Thumbnail bytes for a row, or 204 when a placeholder should be shown."""
    row = _get_row(feed, index)
    if not row.image.is_loaded:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    media_type = filetype.guess_mime(row.image.data) or "application/octet-stream"
    return Response(content=row.image.data, media_type=media_type)


@router.get("/{index}/open")
async def open_article(index: int, feed: NewsFeed = Depends(get_feed)) -> RedirectResponse:
    """Hand the article URL over to the browser."""
    try:
        article = feed.select_article(index)
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return RedirectResponse(url=article.url)
