"""Comment entity.

Comments are threaded discussions attached to any content item.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import CommentId, ContentRef, ContentType, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a content item or a reply to another comment.
    A reply always targets the same content item as its parent.
    """

    id: CommentId
    author_id: UserId
    content_type: ContentType
    content_id: UUID
    body: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def ref(self) -> ContentRef:
        return ContentRef(content_type=self.content_type, content_id=self.content_id)


class CommentNode(DomainModel):
    """A comment with its replies eagerly attached."""

    comment: Comment
    children: list["CommentNode"] = Field(default_factory=list)
