"""Question and answer routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel, Field

from ask.application.usecase.answer import (
    ToggleAcceptanceRequest,
    ToggleAcceptanceResponse,
    ToggleAcceptanceUseCase,
)
from ask.application.usecase.content import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from ask.application.usecase.feed import (
    GetPopularQuestionsUseCase,
    GetRecentQuestionsUseCase,
    ListingRequest,
    QuestionListingResponse,
)
from ask.domain.service import SessionService
from ask.interface.api.auth import require_user_id

router = APIRouter(tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str


@router.post("/questions", response_model=CreateQuestionResponse, status_code=201)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a question. Requires authentication."""
    user_id = require_user_id(sessions, auth_token)

    return await create_question_use_case.execute(
        CreateQuestionRequest(
            author_id=user_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
    )


@router.get("/questions/popular", response_model=QuestionListingResponse)
async def popular_questions(
    use_case: FromDishka[GetPopularQuestionsUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> QuestionListingResponse:
    """Most answered, then most liked questions."""
    return await use_case.execute(ListingRequest(limit=limit))


@router.get("/questions/recent", response_model=QuestionListingResponse)
async def recent_questions(
    use_case: FromDishka[GetRecentQuestionsUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> QuestionListingResponse:
    """Newest questions first."""
    return await use_case.execute(ListingRequest(limit=limit))


@router.post(
    "/questions/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=201,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question. Requires authentication."""
    user_id = require_user_id(sessions, auth_token)

    return await create_answer_use_case.execute(
        CreateAnswerRequest(
            author_id=user_id, question_id=str(question_id), content=request.content
        )
    )


@router.post(
    "/answers/{answer_id}/acceptance", response_model=ToggleAcceptanceResponse
)
async def toggle_acceptance(
    answer_id: UUID,
    toggle_acceptance_use_case: FromDishka[ToggleAcceptanceUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleAcceptanceResponse:
    """Accept an answer, or un-accept it if it is already accepted.

    Only the author of the question may call this. Accepting an answer
    un-accepts any other answer of the same question.
    """
    user_id = require_user_id(sessions, auth_token)

    return await toggle_acceptance_use_case.execute(
        ToggleAcceptanceRequest(answer_id=str(answer_id), user_id=user_id)
    )
