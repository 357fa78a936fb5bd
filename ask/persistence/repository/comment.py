"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import and_, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model import Comment
from ask.domain.repository import CommentRepository
from ask.domain.value import CommentId, ContentRef
from ask.persistence.mappers import comment_to_dict, row_to_comment
from ask.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _matches(self, ref: ContentRef):
        return and_(
            comments_table.c.content_type == ref.content_type.value,
            comments_table.c.content_id == ref.content_id,
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_comment(dict(row)) if row else None

    async def find_by_content(self, ref: ContentRef) -> list[Comment]:
        """Find all non-deleted comments on an item, oldest first."""
        stmt = (
            select(comments_table)
            .where(self._matches(ref), comments_table.c.deleted_at.is_(None))
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(dict(row)) for row in result.mappings().all()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Hard delete a comment and its replies.

        The parent_id foreign key cascades as well; the recursive CTE makes the
        returned count cover the whole subtree.
        """
        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .cte(name="subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(comments_table.c.id).where(
                comments_table.c.parent_id == subtree.c.id
            )
        )
        stmt = delete(comments_table).where(
            comments_table.c.id.in_(select(subtree.c.id))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_content(self, ref: ContentRef) -> int:
        stmt = delete(comments_table).where(self._matches(ref))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_by_content(self, ref: ContentRef) -> int:
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(self._matches(ref), comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
