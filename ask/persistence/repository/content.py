"""Shared PostgreSQL implementation for content repositories."""

from datetime import datetime
from typing import Any, Callable, Dict, Generic, Optional, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Table, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model.content import ContentItem
from ask.domain.repository.content import ContentRepository
from ask.domain.value import UserId

T = TypeVar("T", bound=ContentItem)


class PostgresContentRepository(ContentRepository[T], Generic[T]):
    """Queries shared by questions, answers and solutions.

    Subclasses set the table and the row mappers.
    """

    table: Table
    row_to_model: Callable[[Dict[str, Any]], T]
    model_to_dict: Callable[[T], Dict[str, Any]]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _to_model(self, row: Any) -> T:
        return type(self).row_to_model(dict(row))

    async def _hydrate(self, rows: Sequence[Any]) -> list[T]:
        """Build models from rows; subclasses load child rows here."""
        return [self._to_model(row) for row in rows]

    async def find_by_id(self, item_id: UUID, include_deleted: bool = False) -> Optional[T]:
        stmt = select(self.table).where(self.table.c.id == item_id)
        if not include_deleted:
            stmt = stmt.where(self.table.c.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None
        return (await self._hydrate([row]))[0]

    async def save(self, item: T) -> T:
        """Save an item (create or update)."""
        existing = await self.find_by_id(item.id, include_deleted=True)

        item_dict = type(self).model_to_dict(item)

        if existing:
            stmt = (
                self.table.update()
                .where(self.table.c.id == item.id)
                .values(**item_dict)
            )
        else:
            stmt = self.table.insert().values(**item_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return item

    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[T]:
        stmt = (
            select(self.table)
            .where(
                self.table.c.author_id == author_id,
                self.table.c.deleted_at.is_(None),
            )
            .order_by(self.table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def count_by_author(self, author_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(self.table)
            .where(
                self.table.c.author_id == author_id,
                self.table.c.deleted_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_deleted_before(self, cutoff: datetime) -> list[T]:
        stmt = select(self.table).where(
            self.table.c.deleted_at.is_not(None),
            self.table.c.deleted_at < cutoff,
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def delete(self, item_id: UUID) -> None:
        stmt = delete(self.table).where(self.table.c.id == item_id)
        await self.session.execute(stmt)
        await self.session.flush()
