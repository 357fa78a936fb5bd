"""Reaction domain service."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from ask.domain.error import StorageConflictError
from ask.domain.model import Reaction, ReactionChanged
from ask.domain.repository import ReactionRepository
from ask.domain.value import ContentRef, ContentType, ReactionCounts, ReactionId, UserId

from .base import Service
from .cache_service import content_tags
from .effects import MutationEffects
from .content_service import ContentService


class ReactionService(Service):
    """Domain service for likes and dislikes.

    A user holds at most one reaction per content item. Reacting again with
    the same sign removes it; reacting with the other sign flips it.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        content_service: ContentService,
        effects: MutationEffects,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            content_service: Content lookup
            effects: Post-commit cache invalidation and events
        """
        self.reaction_repository = reaction_repository
        self.content_service = content_service
        self.effects = effects

    async def set_reaction(
        self,
        user_id: UserId,
        content_type: ContentType,
        content_id: UUID,
        is_like: bool,
    ) -> ReactionCounts:
        """Toggle a like or dislike.

        Args:
            user_id: Reacting user
            content_type: Type of the reacted item
            content_id: ID of the reacted item
            is_like: True for like, False for dislike

        Returns:
            Like and dislike totals recomputed from storage

        Raises:
            NotFoundError: If the item is missing or deleted
            StorageConflictError: If a concurrent reaction could not be merged
        """
        ref = ContentRef(content_type=content_type, content_id=content_id)
        with logfire.span(
            "reaction_service.set_reaction",
            ref=str(ref),
            user_id=str(user_id),
            is_like=is_like,
        ):
            await self.content_service.get_content(ref)

            await self._apply(user_id, ref, is_like)

            counts = await self.reaction_repository.count_by_content(ref)
            await self.effects.invalidate(content_tags(content_type))
            await self.effects.publish(
                ReactionChanged(
                    content_type=content_type, content_id=content_id, counts=counts
                )
            )
            logfire.info(
                "Reaction updated",
                ref=str(ref),
                likes=counts.likes,
                dislikes=counts.dislikes,
            )
            return counts

    async def get_counts(self, ref: ContentRef) -> ReactionCounts:
        """Get like and dislike totals for an item."""
        return await self.reaction_repository.count_by_content(ref)

    async def get_user_reaction(
        self, user_id: UserId, ref: ContentRef
    ) -> Reaction | None:
        """Get a user's current reaction on an item, if any."""
        return await self.reaction_repository.find_by_user_and_content(user_id, ref)

    async def _apply(self, user_id: UserId, ref: ContentRef, is_like: bool) -> None:
        # Second pass only runs after a lost create race and never un-reacts
        for attempt in range(2):
            existing = await self.reaction_repository.find_by_user_and_content(
                user_id, ref
            )

            if existing is None:
                reaction = Reaction(
                    id=ReactionId(uuid4()),
                    user_id=user_id,
                    content_type=ref.content_type,
                    content_id=ref.content_id,
                    is_like=is_like,
                )
                try:
                    await self.reaction_repository.create(reaction)
                    return
                except IntegrityError:
                    logfire.warn(
                        "Concurrent reaction create, retrying as update",
                        ref=str(ref),
                        user_id=str(user_id),
                        attempt=attempt,
                    )
                    continue

            if existing.is_like == is_like:
                if attempt == 0:
                    await self.reaction_repository.delete(existing.id)
                return

            await self.reaction_repository.update(
                existing.model_copy(
                    update={"is_like": is_like, "updated_at": datetime.now()}
                )
            )
            return

        logfire.error(
            "Reaction conflict could not be resolved", ref=str(ref), user_id=str(user_id)
        )
        raise StorageConflictError("reaction", f"user {user_id} on {ref}")
