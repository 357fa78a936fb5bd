"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import CommentService
from ask.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # From authenticated user


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_count: int  # The comment plus all of its replies


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its reply subtree."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the requester is not the author
        """
        deleted = await self.comment_service.delete_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id, deleted_count=deleted
        )
