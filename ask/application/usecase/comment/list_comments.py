"""List comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.model import CommentNode
from ask.domain.service import CommentService
from ask.domain.value import ContentType


class CommentItem(BaseModel):
    """Comment with its replies in response."""

    comment_id: str
    author_id: str
    body: str
    parent_id: str | None
    created_at: datetime
    replies: list["CommentItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            author_id=str(comment.author_id),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            replies=[cls.from_node(child) for child in node.children],
        )


class ListCommentsRequest(BaseModel):
    """List comments request."""

    content_type: ContentType
    content_id: str  # UUID string


class ListCommentsResponse(BaseModel):
    """List comments response."""

    content_type: ContentType
    content_id: str
    comments: list[CommentItem]
    total: int  # Including replies


class ListCommentsUseCase:
    """Use case for reading the comment threads of an item."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Threads come newest first, replies oldest first.
        """
        roots = await self.comment_service.list_roots(
            request.content_type, UUID(request.content_id)
        )

        def count(node: CommentNode) -> int:
            return 1 + sum(count(child) for child in node.children)

        return ListCommentsResponse(
            content_type=request.content_type,
            content_id=request.content_id,
            comments=[CommentItem.from_node(root) for root in roots],
            total=sum(count(root) for root in roots),
        )
