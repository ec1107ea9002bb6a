"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from topstories.api.v1.router import api_router
from topstories.config import Settings, get_settings
from topstories.services.feed_service import NewsFeed
from topstories.services.news_service import NewsService
from topstories.utils.logging import configure_logging, get_logger

logger = get_logger("topstories.main")


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-derived ones
        transport: Optional httpx transport for the shared HTTP client

    Returns:
        The application; the feed is created and loaded during startup
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager for startup/shutdown events."""
        # Startup
        configure_logging(settings.log_level, settings.log_format)
        logger.info("Starting %s %s in %s mode", settings.app_name, settings.app_version, settings.environment)

        http_client = httpx.AsyncClient(
            timeout=settings.http_timeout,
            headers={"User-Agent": settings.user_agent},
            follow_redirects=True,
            transport=transport,
        )
        feed = NewsFeed(
            news_service=NewsService(http_client, settings.news_api_url),
            http_client=http_client,
            surface_fetch_errors=settings.surface_fetch_errors,
            clear_search_policy=settings.clear_search_policy,
        )
        app.state.settings = settings
        app.state.feed = feed
        feed.load_news()

        yield

        # Shutdown
        logger.info("Shutting down")
        await feed.close()
        await http_client.aclose()

    app = FastAPI(
        title=settings.app_name,
        description="Top news stories with local title search",
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
