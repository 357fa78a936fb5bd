"""Update user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import UserService
from ask.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Only fields that were explicitly set are changed; setting one to None
    clears it.
    """

    user_id: str  # From authenticated user
    name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    handle: str
    name: str | None
    bio: str | None
    avatar_url: str | None
    updated_at: datetime


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile.

    Users can update their name, bio and avatar URL. The handle cannot be
    changed through this endpoint.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If user not found
            ValidationError: If a field is invalid
        """
        changes = request.model_dump(
            include={"name", "bio", "avatar_url"}, exclude_unset=True
        )
        user = await self.user_service.update_profile(
            UserId(UUID(request.user_id)), **changes
        )

        return UpdateUserProfileResponse(
            user_id=str(user.id),
            handle=user.handle.root,
            name=user.name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            updated_at=user.updated_at,
        )
