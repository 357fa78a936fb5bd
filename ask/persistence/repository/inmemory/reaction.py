"""In-memory reaction repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from ask.domain.model import Reaction
from ask.domain.repository import ReactionRepository
from ask.domain.value import ContentRef, ReactionCounts, ReactionId, UserId

from .store import InMemoryDatabase


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        self._reactions = self.db.reactions

    def _on(self, ref: ContentRef) -> list[Reaction]:
        return [r for r in self._reactions.values() if r.ref == ref]

    async def find_by_user_and_content(
        self, user_id: UserId, ref: ContentRef
    ) -> Optional[Reaction]:
        for reaction in self._on(ref):
            if reaction.user_id == user_id:
                return reaction
        return None

    async def create(self, reaction: Reaction) -> Reaction:
        """Create a reaction.

        Raises:
            IntegrityError: If the user already reacted to this item
        """
        for existing in self._on(reaction.ref):
            if existing.user_id == reaction.user_id:
                raise IntegrityError(
                    "uq_reaction_user_content", None, Exception("duplicate reaction")
                )
        self._reactions[reaction.id] = reaction
        return reaction

    async def update(self, reaction: Reaction) -> Reaction:
        self._reactions[reaction.id] = reaction
        return reaction

    async def delete(self, reaction_id: ReactionId) -> None:
        self._reactions.pop(reaction_id, None)

    async def count_by_content(self, ref: ContentRef) -> ReactionCounts:
        reactions = self._on(ref)
        likes = sum(1 for r in reactions if r.is_like)
        return ReactionCounts(likes=likes, dislikes=len(reactions) - likes)

    async def delete_by_content(self, ref: ContentRef) -> int:
        doomed = [r.id for r in self._on(ref)]
        for reaction_id in doomed:
            del self._reactions[reaction_id]
        return len(doomed)
