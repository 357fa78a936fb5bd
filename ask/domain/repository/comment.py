"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ask.domain.model.comment import Comment
from ask.domain.value import CommentId, ContentRef


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_content(self, ref: ContentRef) -> list[Comment]:
        """Find all non-deleted comments on an item, oldest first.

        Args:
            ref: The content item

        Returns:
            Flat list of roots and replies
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Hard delete a comment and every reply beneath it.

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def delete_by_content(self, ref: ContentRef) -> int:
        """Delete every comment on an item.

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def count_by_content(self, ref: ContentRef) -> int:
        """Count non-deleted comments on an item."""
        pass
