"""Solution routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel, Field

from ask.application.usecase.content import (
    CreateSolutionRequest,
    CreateSolutionUseCase,
    GetSolutionRequest,
    GetSolutionUseCase,
    SolutionResponse,
    SolutionStepInput,
)
from ask.application.usecase.feed import (
    GetPopularSolutionsUseCase,
    ListingRequest,
    SolutionListingResponse,
)
from ask.domain.service import SessionService
from ask.domain.value import DurationType
from ask.interface.api.auth import require_user_id

router = APIRouter(prefix="/solutions", tags=["solutions"], route_class=DishkaRoute)


class CreateSolutionAPIRequest(BaseModel):
    """API request for publishing a solution."""

    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    duration: int = 0
    duration_type: DurationType = DurationType.MINUTES
    steps: list[SolutionStepInput] = Field(default_factory=list)


@router.post("", response_model=SolutionResponse, status_code=201)
async def create_solution(
    request: CreateSolutionAPIRequest,
    create_solution_use_case: FromDishka[CreateSolutionUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> SolutionResponse:
    """Publish a step-by-step solution. Requires authentication."""
    user_id = require_user_id(sessions, auth_token)

    return await create_solution_use_case.execute(
        CreateSolutionRequest(author_id=user_id, **request.model_dump())
    )


@router.get("/popular", response_model=SolutionListingResponse)
async def popular_solutions(
    use_case: FromDishka[GetPopularSolutionsUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> SolutionListingResponse:
    """Most liked, then most discussed solutions."""
    return await use_case.execute(ListingRequest(limit=limit))


@router.get("/{solution_id}", response_model=SolutionResponse)
async def get_solution(
    solution_id: UUID,
    use_case: FromDishka[GetSolutionUseCase],
) -> SolutionResponse:
    """A solution with its steps in order."""
    return await use_case.execute(GetSolutionRequest(solution_id=str(solution_id)))
