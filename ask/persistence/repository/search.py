"""PostgreSQL full-text fallback matcher."""

from typing import Any, Callable

from sqlalchemy import ColumnElement, String, Table, func, literal_column, select
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model.content import ContentItem
from ask.domain.repository import FallbackMatcher, term_prefixes
from ask.domain.value import ContentType
from ask.persistence.mappers import row_to_question, row_to_solution
from ask.persistence.tables import questions_table, solutions_table

# Rendered inline so the expression matches the GIN index
EMPTY = literal_column("''", String)
SPACE = literal_column("' '", String)
SIMPLE = literal_column("'simple'::regconfig")


def _document(table: Table, include_tags: bool) -> ColumnElement:
    """Searchable text of a row, mirroring the GIN index expression."""
    text = (
        func.coalesce(table.c.title, EMPTY)
        + SPACE
        + func.coalesce(table.c.description, EMPTY)
    )
    if include_tags:
        text = text + SPACE + func.array_to_string(table.c.tags, SPACE)
    return func.to_tsvector(SIMPLE, text)


# Content types with searchable columns; answers have none
_SEARCHABLE: dict[ContentType, tuple[Table, Callable[[dict[str, Any]], ContentItem], bool]] = {
    ContentType.QUESTION: (questions_table, row_to_question, False),
    ContentType.SOLUTION: (solutions_table, row_to_solution, True),
}


def to_tsquery_text(term: str) -> str:
    """Boolean prefix query for to_tsquery: "+data* +base*" -> "data:* & base:*"."""
    return " & ".join(f"{prefix}:*" for prefix in term_prefixes(term))


class PostgresFallbackMatcher(FallbackMatcher):
    """FallbackMatcher on PostgreSQL to_tsvector / to_tsquery."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize matcher with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def match(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[tuple[ContentItem, float]]:
        if content_type not in _SEARCHABLE:
            return []
        query_text = to_tsquery_text(term)
        if not query_text:
            return []

        table, row_to_model, include_tags = _SEARCHABLE[content_type]
        document = _document(table, include_tags)
        query = func.to_tsquery(SIMPLE, query_text)
        score = func.ts_rank(document, query).label("score")

        stmt = (
            select(table, score)
            .where(table.c.deleted_at.is_(None), document.op("@@")(query))
            .order_by(score.desc(), table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        matches = []
        for row in result.mappings().all():
            data = dict(row)
            relevance = float(data.pop("score"))
            matches.append((row_to_model(data), relevance))
        return matches
