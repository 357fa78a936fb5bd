"""User profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from ask.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from ask.domain.service import SessionService
from ask.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    name: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, max_length=500)
    avatar_url: str | None = None


@router.get("/{user_id}/profile", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: UUID,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get a user's profile with their latest content and counts.

    Served from the tagged cache; any content change by the user
    invalidates it.
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=str(user_id))
    )


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update the authenticated user's profile.

    Only fields present in the body are changed.
    """
    user_id = require_user_id(sessions, auth_token)

    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=user_id, **request.model_dump(exclude_unset=True)
        )
    )
