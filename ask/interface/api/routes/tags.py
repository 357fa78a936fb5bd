"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from ask.application.usecase.feed import (
    GetTrendingTagsUseCase,
    TrendingTagsRequest,
    TrendingTagsResponse,
)

router = APIRouter(prefix="/tags", tags=["tags"], route_class=DishkaRoute)


@router.get("/trending", response_model=TrendingTagsResponse)
async def trending_tags(
    use_case: FromDishka[GetTrendingTagsUseCase],
    limit: int = Query(default=20, ge=1, le=100),
) -> TrendingTagsResponse:
    """Tags used most across live questions and solutions.

    Example:
        GET /tags/trending?limit=3

        Response:
        {"tags": [{"name": "python", "count": 12}, ...]}
    """
    return await use_case.execute(TrendingTagsRequest(limit=limit))
