"""Set reaction use case."""

from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import ReactionService
from ask.domain.value import ContentRef, ContentType, UserId


class SetReactionRequest(BaseModel):
    """Set reaction request."""

    content_type: ContentType
    content_id: str  # UUID string
    user_id: str  # From authenticated user
    is_like: bool


class SetReactionResponse(BaseModel):
    """Set reaction response.

    `reaction` is the caller's reaction after the toggle: "like",
    "dislike", or None when it was removed.
    """

    content_type: ContentType
    content_id: str
    likes: int
    dislikes: int
    reaction: str | None


class SetReactionUseCase:
    """Use case for liking or disliking any content item."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize set reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: SetReactionRequest) -> SetReactionResponse:
        """Execute reaction toggle.

        Repeating the same reaction removes it; the opposite reaction
        replaces it.

        Raises:
            NotFoundError: If the item is missing or deleted
            StorageConflictError: If a concurrent reaction could not be merged
        """
        user_id = UserId(UUID(request.user_id))
        content_id = UUID(request.content_id)

        counts = await self.reaction_service.set_reaction(
            user_id, request.content_type, content_id, request.is_like
        )
        current = await self.reaction_service.get_user_reaction(
            user_id, ContentRef(content_type=request.content_type, content_id=content_id)
        )

        reaction = None
        if current is not None:
            reaction = "like" if current.is_like else "dislike"

        return SetReactionResponse(
            content_type=request.content_type,
            content_id=request.content_id,
            likes=counts.likes,
            dislikes=counts.dislikes,
            reaction=reaction,
        )
