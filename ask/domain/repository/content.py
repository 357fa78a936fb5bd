"""Shared repository contract for questions, answers and solutions."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, Optional, TypeVar
from uuid import UUID

from ask.domain.model.content import ContentItem
from ask.domain.value import UserId

T = TypeVar("T", bound=ContentItem)


class ContentRepository(ABC, Generic[T]):
    """Persistence operations common to every content type.

    Soft-deleted items are hidden unless include_deleted is set.
    """

    @abstractmethod
    async def find_by_id(self, item_id: UUID, include_deleted: bool = False) -> Optional[T]:
        """Find an item by ID.

        Args:
            item_id: The item's unique identifier
            include_deleted: Whether soft-deleted items are returned

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, item: T) -> T:
        """Save an item (create or update)."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[T]:
        """Find an author's latest non-deleted items, newest first."""
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count an author's non-deleted items."""
        pass

    @abstractmethod
    async def find_deleted_before(self, cutoff: datetime) -> list[T]:
        """Find items soft-deleted before the cutoff.

        Args:
            cutoff: Items with deleted_at earlier than this are returned

        Returns:
            Items eligible for purging
        """
        pass

    @abstractmethod
    async def delete(self, item_id: UUID) -> None:
        """Permanently delete an item."""
        pass
