"""Search routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from ask.application.usecase.search import (
    SearchAllRequest,
    SearchAllResponse,
    SearchAllUseCase,
    SearchContentRequest,
    SearchContentResponse,
    SearchContentUseCase,
)
from ask.domain.value import ContentType

router = APIRouter(prefix="/search", tags=["search"], route_class=DishkaRoute)


@router.get("", response_model=SearchAllResponse)
async def search_all(
    search_all_use_case: FromDishka[SearchAllUseCase],
    q: str = Query(default="", max_length=200),
    limit: int | None = Query(default=None, ge=1),
) -> SearchAllResponse:
    """Live search across solutions and questions.

    An empty query returns empty lists.

    Example:
        GET /search?q=postgres%20index&limit=5
    """
    return await search_all_use_case.execute(SearchAllRequest(term=q, limit=limit))


@router.get("/{content_type}", response_model=SearchContentResponse)
async def search_content(
    content_type: ContentType,
    search_content_use_case: FromDishka[SearchContentUseCase],
    q: str = Query(default="", max_length=200),
    limit: int | None = Query(default=None, ge=1),
) -> SearchContentResponse:
    """Search one content type.

    The response reports which backend answered (`path`) and whether the
    indexed backend failed and the fallback was used (`degraded`).
    """
    return await search_content_use_case.execute(
        SearchContentRequest(content_type=content_type, term=q, limit=limit)
    )
