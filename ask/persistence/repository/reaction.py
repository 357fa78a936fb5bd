"""PostgreSQL implementation of Reaction repository."""

from typing import Optional

from sqlalchemy import and_, case, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Reaction
from ask.domain.repository import ReactionRepository
from ask.domain.value import ContentRef, ReactionCounts, ReactionId, UserId
from ask.persistence.mappers import reaction_to_dict, row_to_reaction
from ask.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _matches(self, ref: ContentRef):
        return and_(
            reactions_table.c.content_type == ref.content_type.value,
            reactions_table.c.content_id == ref.content_id,
        )

    async def find_by_user_and_content(
        self, user_id: UserId, ref: ContentRef
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific item."""
        stmt = select(reactions_table).where(
            reactions_table.c.user_id == user_id, self._matches(ref)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_reaction(dict(row)) if row else None

    async def create(self, reaction: Reaction) -> Reaction:
        """Insert a reaction inside a savepoint.

        A unique violation only rolls back the savepoint, so the request
        transaction stays usable for the retry.

        Raises:
            IntegrityError: If the user already reacted to this item
        """
        stmt = insert(reactions_table).values(**reaction_to_dict(reaction))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return reaction

    async def update(self, reaction: Reaction) -> Reaction:
        stmt = (
            update(reactions_table)
            .where(reactions_table.c.id == reaction.id)
            .values(is_like=reaction.is_like, updated_at=reaction.updated_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return reaction

    async def delete(self, reaction_id: ReactionId) -> None:
        stmt = delete(reactions_table).where(reactions_table.c.id == reaction_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_content(self, ref: ContentRef) -> ReactionCounts:
        """Count likes and dislikes in one query."""
        stmt = select(
            func.count(case((reactions_table.c.is_like.is_(True), 1))).label("likes"),
            func.count(case((reactions_table.c.is_like.is_(False), 1))).label(
                "dislikes"
            ),
        ).where(self._matches(ref))
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        return ReactionCounts(likes=row["likes"], dislikes=row["dislikes"])

    async def delete_by_content(self, ref: ContentRef) -> int:
        stmt = delete(reactions_table).where(self._matches(ref))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
