"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from ask.domain.error import NotFoundError, ValidationError
from ask.domain.model import User
from ask.domain.repository import UserRepository
from ask.domain.value import UserId
from ask.domain.value.types import Handle

from .base import Service
from .cache_service import user_profile_tags
from .effects import MutationEffects

# Sentinel distinguishing "leave unchanged" from "clear"
UNSET = object()


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, effects: MutationEffects
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            effects: Post-commit invalidation of profile views
        """
        self.user_repository = user_repository
        self.effects = effects

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_user_by_handle(self, handle: Handle) -> User | None:
        """Get user by handle."""
        with logfire.span("user_service.get_user_by_handle", handle=handle.root):
            return await self.user_repository.find_by_handle(handle)

    async def create_user(
        self,
        handle: Handle,
        name: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Create a user record for a newly authenticated account.

        Raises:
            ValidationError: If the handle is already taken
        """
        with logfire.span("user_service.create_user", handle=handle.root):
            if await self.user_repository.find_by_handle(handle):
                raise ValidationError(field="handle", message="Handle already taken")

            user = User(
                id=UserId(uuid4()), handle=handle, name=name, avatar_url=avatar_url
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), handle=handle.root)
            return saved

    async def update_profile(
        self,
        user_id: UserId,
        name=UNSET,
        bio=UNSET,
        avatar_url=UNSET,
    ) -> User:
        """Update profile fields; omitted fields stay unchanged.

        Args:
            user_id: User to update
            name: New display name (None clears it)
            bio: New bio, at most 500 characters (None clears it)
            avatar_url: New avatar URL (None clears it)

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If a field is invalid
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            changes = {
                field: value
                for field, value in (
                    ("name", name),
                    ("bio", bio),
                    ("avatar_url", avatar_url),
                )
                if value is not UNSET
            }
            if not changes:
                return user

            try:
                updated = User.model_validate(
                    {**user.model_dump(), **changes, "updated_at": datetime.now()}
                )
            except PydanticValidationError as e:
                error = e.errors()[0]
                raise ValidationError(
                    field=".".join(str(p) for p in error["loc"]), message=error["msg"]
                )

            saved = await self.user_repository.save(updated)
            await self.effects.invalidate(user_profile_tags(user_id))
            logfire.info("Profile updated", user_id=str(user_id), fields=sorted(changes))
            return saved
