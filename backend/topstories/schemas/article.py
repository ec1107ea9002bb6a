"""Article schemas for decoding the news service payload."""

from pydantic import BaseModel, ConfigDict, Field


class ArticleRecord(BaseModel):
    """A single news item as delivered by the news service."""

    model_config = ConfigDict(frozen=True)

    title: str
    date: str = Field(..., description="Display date, kept exactly as delivered")
    url: str = Field(..., description="URL to the original article")
    image: str | None = Field(default=None, description="Thumbnail URL")
    source: str = Field(..., description="Publisher name")


class NewsResponse(BaseModel):
    """Envelope returned by the news service."""

    articles: list[ArticleRecord]
