"""PostgreSQL queries behind the aggregate views."""

from sqlalchemy import desc, func, select, union_all
from sqlalchemy.ext.asyncio import AsyncSession

from ask.domain.model.view import (
    AnswerSummary,
    QuestionSummary,
    SolutionSummary,
    TagCount,
)
from ask.domain.repository import AggregateRepository
from ask.domain.value import ContentType, UserId
from ask.persistence.tables import (
    answers_table,
    comments_table,
    questions_table,
    reactions_table,
    solutions_table,
)


def _likes_count(content_type: ContentType, id_column):
    return (
        select(func.count())
        .select_from(reactions_table)
        .where(
            reactions_table.c.content_type == content_type.value,
            reactions_table.c.content_id == id_column,
            reactions_table.c.is_like.is_(True),
        )
        .scalar_subquery()
    )


def _answers_count():
    return (
        select(func.count())
        .select_from(answers_table)
        .where(
            answers_table.c.question_id == questions_table.c.id,
            answers_table.c.deleted_at.is_(None),
        )
        .scalar_subquery()
    )


def _comments_count(content_type: ContentType, id_column):
    return (
        select(func.count())
        .select_from(comments_table)
        .where(
            comments_table.c.content_type == content_type.value,
            comments_table.c.content_id == id_column,
            comments_table.c.deleted_at.is_(None),
        )
        .scalar_subquery()
    )


def _question_summaries():
    answers_count = _answers_count().label("answers_count")
    likes_count = _likes_count(ContentType.QUESTION, questions_table.c.id).label(
        "likes_count"
    )
    stmt = select(
        questions_table.c.id,
        questions_table.c.title,
        questions_table.c.author_id,
        questions_table.c.tags,
        questions_table.c.is_solved,
        questions_table.c.created_at,
        answers_count,
        likes_count,
    ).where(questions_table.c.deleted_at.is_(None))
    return stmt, answers_count, likes_count


def _solution_summaries():
    likes_count = _likes_count(ContentType.SOLUTION, solutions_table.c.id).label(
        "likes_count"
    )
    comments_count = _comments_count(ContentType.SOLUTION, solutions_table.c.id).label(
        "comments_count"
    )
    stmt = select(
        solutions_table.c.id,
        solutions_table.c.title,
        solutions_table.c.author_id,
        solutions_table.c.tags,
        solutions_table.c.created_at,
        likes_count,
        comments_count,
    ).where(solutions_table.c.deleted_at.is_(None))
    return stmt, likes_count, comments_count


class PostgresAggregateRepository(AggregateRepository):
    """PostgreSQL implementation of AggregateRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _questions(self, stmt) -> list[QuestionSummary]:
        result = await self.session.execute(stmt)
        return [QuestionSummary(**dict(row)) for row in result.mappings().all()]

    async def _solutions(self, stmt) -> list[SolutionSummary]:
        result = await self.session.execute(stmt)
        return [SolutionSummary(**dict(row)) for row in result.mappings().all()]

    async def popular_questions(self, limit: int) -> list[QuestionSummary]:
        stmt, answers_count, likes_count = _question_summaries()
        stmt = stmt.order_by(
            desc(answers_count), desc(likes_count), questions_table.c.created_at.desc()
        ).limit(limit)
        return await self._questions(stmt)

    async def recent_questions(self, limit: int) -> list[QuestionSummary]:
        stmt, _, _ = _question_summaries()
        stmt = stmt.order_by(questions_table.c.created_at.desc()).limit(limit)
        return await self._questions(stmt)

    async def popular_solutions(self, limit: int) -> list[SolutionSummary]:
        stmt, likes_count, comments_count = _solution_summaries()
        stmt = stmt.order_by(
            desc(likes_count), desc(comments_count), solutions_table.c.created_at.desc()
        ).limit(limit)
        return await self._solutions(stmt)

    async def tag_counts(self, limit: int) -> list[TagCount]:
        all_tags = union_all(
            select(func.unnest(questions_table.c.tags).label("name")).where(
                questions_table.c.deleted_at.is_(None)
            ),
            select(func.unnest(solutions_table.c.tags).label("name")).where(
                solutions_table.c.deleted_at.is_(None)
            ),
        ).subquery("all_tags")
        count = func.count().label("count")
        stmt = (
            select(all_tags.c.name, count)
            .group_by(all_tags.c.name)
            .order_by(desc(count), all_tags.c.name)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [TagCount(name=row["name"], count=row["count"]) for row in result.mappings().all()]

    async def latest_questions_by_author(
        self, author_id: UserId, limit: int
    ) -> list[QuestionSummary]:
        stmt, _, _ = _question_summaries()
        stmt = (
            stmt.where(questions_table.c.author_id == author_id)
            .order_by(questions_table.c.created_at.desc())
            .limit(limit)
        )
        return await self._questions(stmt)

    async def latest_solutions_by_author(
        self, author_id: UserId, limit: int
    ) -> list[SolutionSummary]:
        stmt, _, _ = _solution_summaries()
        stmt = (
            stmt.where(solutions_table.c.author_id == author_id)
            .order_by(solutions_table.c.created_at.desc())
            .limit(limit)
        )
        return await self._solutions(stmt)

    async def latest_answers_by_author(
        self, author_id: UserId, limit: int
    ) -> list[AnswerSummary]:
        stmt = (
            select(
                answers_table.c.id,
                answers_table.c.question_id,
                answers_table.c.content,
                answers_table.c.is_accepted,
                answers_table.c.created_at,
            )
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.deleted_at.is_(None),
            )
            .order_by(answers_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [AnswerSummary(**dict(row)) for row in result.mappings().all()]
