"""Delete and purge content use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import ContentService
from ask.domain.value import ContentRef, ContentType, UserId


class DeleteContentRequest(BaseModel):
    """Delete content request."""

    content_type: ContentType
    content_id: str  # UUID string
    user_id: str  # From authenticated user


class DeleteContentResponse(BaseModel):
    """Delete content response."""

    content_type: ContentType
    content_id: str
    deleted_at: datetime | None


class DeleteContentUseCase:
    """Use case for soft deleting one's own question, answer or solution."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: DeleteContentRequest) -> DeleteContentResponse:
        """Execute soft delete flow.

        Raises:
            NotFoundError: If the item is missing or already deleted
            ForbiddenError: If the requester does not own the item
        """
        ref = ContentRef(
            content_type=request.content_type, content_id=UUID(request.content_id)
        )
        item = await self.content_service.delete_content(
            ref, UserId(UUID(request.user_id))
        )
        return DeleteContentResponse(
            content_type=request.content_type,
            content_id=request.content_id,
            deleted_at=item.deleted_at,
        )


class PurgeDeletedContentRequest(BaseModel):
    """Purge request. No cutoff means the configured grace period."""

    older_than: datetime | None = None


class PurgeDeletedContentResponse(BaseModel):
    purged_count: int


class PurgeDeletedContentUseCase:
    """Use case for permanently removing content past its soft-delete grace period.

    Run from the maintenance script, not exposed over HTTP.
    """

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(
        self, request: PurgeDeletedContentRequest
    ) -> PurgeDeletedContentResponse:
        purged = await self.content_service.purge_deleted(request.older_than)
        return PurgeDeletedContentResponse(purged_count=purged)
