"""API v1 main router - aggregates all endpoint routers."""

from fastapi import APIRouter

from topstories.api.v1 import articles

api_router = APIRouter()

api_router.include_router(articles.router, prefix="/articles", tags=["articles"])
