"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from ask.config import Settings
from ask.domain.service import IndexedSearchClient

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    search_configured: bool
    cache_enabled: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    indexed_client: FromDishka[IndexedSearchClient],
) -> HealthResponse:
    """Basic health check endpoint.

    The service stays healthy without an indexed search backend; searches
    are then answered by the database.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        search_configured=indexed_client.is_configured,
        cache_enabled=settings.cache.enabled,
    )
