"""Feed schemas for API request/response validation."""

from typing import Literal

from pydantic import BaseModel, Field


class ArticleResponse(BaseModel):
    """One displayed article row."""

    index: int = Field(..., ge=0, description="Row position, used by the image and open endpoints")
    title: str
    date: str
    url: str
    image: str | None = None
    source: str
    image_loaded: bool = Field(
        default=False,
        description="False means the row should render a placeholder",
    )


class FeedStateResponse(BaseModel):
    """Snapshot of the feed state handed to the rendering layer."""

    title: str
    version: str
    status: Literal["loading", "success", "failed"]
    articles: list[ArticleResponse] = Field(default_factory=list)
    error: str | None = None
    search_text: str = ""
    search_prompt: str


class SearchRequest(BaseModel):
    """Schema for updating the search text."""

    text: str = ""
