"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from topstories import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    app_name: str = "Top Stories"
    app_version: str = __version__
    environment: str = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    search_prompt: str = "Search for articles..."

    # News API
    news_api_url: str = "https://api.lil.software/news"
    http_timeout: float = 5.0  # httpx default
    user_agent: str = "TopStories/1.0"

    # Feed behaviour
    surface_fetch_errors: bool = False  # False keeps a failed fetch in the loading state
    clear_search_policy: Literal["refetch", "restore"] = "refetch"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
