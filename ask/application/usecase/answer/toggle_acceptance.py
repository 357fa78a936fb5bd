"""Toggle answer acceptance use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import AcceptanceService
from ask.domain.value import AnswerId, UserId


class ToggleAcceptanceRequest(BaseModel):
    """Toggle acceptance request."""

    answer_id: str  # UUID string
    user_id: str  # From authenticated user


class ToggleAcceptanceResponse(BaseModel):
    """Toggle acceptance response."""

    answer_id: str
    question_id: str
    is_accepted: bool
    updated_at: datetime


class ToggleAcceptanceUseCase:
    """Use case for accepting or un-accepting an answer.

    Only the author of the question may do this, and at most one answer of a
    question is accepted at any time.
    """

    def __init__(self, acceptance_service: AcceptanceService) -> None:
        self.acceptance_service = acceptance_service

    async def execute(self, request: ToggleAcceptanceRequest) -> ToggleAcceptanceResponse:
        answer = await self.acceptance_service.toggle_acceptance(
            AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
        )
        return ToggleAcceptanceResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            is_accepted=answer.is_accepted,
            updated_at=answer.updated_at,
        )
