"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import CommentService
from ask.domain.value import CommentId, ContentType, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content_type: ContentType
    content_id: str  # UUID string
    author_id: str  # From authenticated user
    body: str
    parent_id: str | None = None  # UUID string for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    content_type: ContentType
    content_id: str
    author_id: str
    body: str
    parent_id: str | None
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on an item or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Raises:
            ValidationError: If the body is empty or too long
            NotFoundError: If the item or parent comment does not exist
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.add_comment(
            author_id=UserId(UUID(request.author_id)),
            content_type=request.content_type,
            content_id=UUID(request.content_id),
            body=request.body,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            content_type=comment.content_type,
            content_id=str(comment.content_id),
            author_id=str(comment.author_id),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
