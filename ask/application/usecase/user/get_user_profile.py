"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.model import (
    AnswerSummary,
    QuestionSummary,
    SolutionSummary,
    UserProfileStats,
)
from ask.domain.service import AggregateQueryService
from ask.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    handle: str
    name: str | None
    bio: str | None
    avatar_url: str | None
    created_at: datetime
    latest_questions: list[QuestionSummary]
    latest_solutions: list[SolutionSummary]
    latest_answers: list[AnswerSummary]
    stats: UserProfileStats


class GetUserProfileUseCase:
    """Use case for a user's public profile page."""

    def __init__(self, aggregate_service: AggregateQueryService) -> None:
        """Initialize get user profile use case.

        Args:
            aggregate_service: Cached aggregate views service
        """
        self.aggregate_service = aggregate_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        profile = await self.aggregate_service.user_profile(
            UserId(UUID(request.user_id))
        )
        user = profile.user

        return GetUserProfileResponse(
            user_id=str(user.id),
            handle=user.handle.root,
            name=user.name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            latest_questions=profile.latest_questions,
            latest_solutions=profile.latest_solutions,
            latest_answers=profile.latest_answers,
            stats=profile.stats,
        )
