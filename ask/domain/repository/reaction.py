"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ask.domain.model.reaction import Reaction
from ask.domain.value import ContentRef, ReactionCounts, ReactionId, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Defines the contract for reaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_content(
        self, user_id: UserId, ref: ContentRef
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific item.

        Args:
            user_id: The user's ID
            ref: The content item

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, reaction: Reaction) -> Reaction:
        """Create a reaction.

        Raises:
            IntegrityError: If the user already reacted to this item
        """
        pass

    @abstractmethod
    async def update(self, reaction: Reaction) -> Reaction:
        """Update an existing reaction in place."""
        pass

    @abstractmethod
    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction."""
        pass

    @abstractmethod
    async def count_by_content(self, ref: ContentRef) -> ReactionCounts:
        """Count likes and dislikes on an item."""
        pass

    @abstractmethod
    async def delete_by_content(self, ref: ContentRef) -> int:
        """Delete every reaction on an item.

        Returns:
            Number of reactions deleted
        """
        pass
