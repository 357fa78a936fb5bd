"""PostgreSQL implementation of Answer repository."""

from sqlalchemy import func, select, update

from ask.domain.model import Answer
from ask.domain.repository import AnswerRepository
from ask.domain.value import AnswerId, QuestionId, UserId
from ask.persistence.mappers import answer_to_dict, row_to_answer
from ask.persistence.tables import answers_table

from .content import PostgresContentRepository


class PostgresAnswerRepository(PostgresContentRepository[Answer], AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    table = answers_table
    row_to_model = staticmethod(row_to_answer)
    model_to_dict = staticmethod(answer_to_dict)

    async def find_by_question(
        self, question_id: QuestionId, include_deleted: bool = False
    ) -> list[Answer]:
        stmt = select(answers_table).where(answers_table.c.question_id == question_id)
        if not include_deleted:
            stmt = stmt.where(answers_table.c.deleted_at.is_(None))
        stmt = stmt.order_by(answers_table.c.created_at.asc())
        result = await self.session.execute(stmt)
        return [row_to_answer(dict(row)) for row in result.mappings().all()]

    async def accept_exclusively(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        """Accept one answer and clear its siblings in one UPDATE.

        A single statement never passes through a state with two accepted
        answers, so the partial unique index holds throughout.
        """
        stmt = (
            update(answers_table)
            .where(answers_table.c.question_id == question_id)
            .values(
                is_accepted=(answers_table.c.id == answer_id),
                updated_at=func.now(),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=accepted, updated_at=func.now())
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_accepted_by_author(self, author_id: UserId) -> int:
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.author_id == author_id,
                answers_table.c.is_accepted.is_(True),
                answers_table.c.deleted_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
