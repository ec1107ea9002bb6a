"""Shared FastAPI dependencies."""

from fastapi import Request

from topstories.config import Settings
from topstories.services.feed_service import NewsFeed


def get_feed(request: Request) -> NewsFeed:
    """Dependency returning the feed owned by the running application."""
    return request.app.state.feed


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the application was created with."""
    return request.app.state.settings
