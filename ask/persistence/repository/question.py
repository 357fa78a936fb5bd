"""PostgreSQL implementation of Question repository."""

from typing import Optional

from sqlalchemy import select

from ask.domain.model import Question
from ask.domain.repository import QuestionRepository
from ask.domain.value import QuestionId
from ask.persistence.mappers import question_to_dict, row_to_question
from ask.persistence.tables import questions_table

from .content import PostgresContentRepository


class PostgresQuestionRepository(
    PostgresContentRepository[Question], QuestionRepository
):
    """PostgreSQL implementation of QuestionRepository."""

    table = questions_table
    row_to_model = staticmethod(row_to_question)
    model_to_dict = staticmethod(question_to_dict)

    async def lock_for_update(self, question_id: QuestionId) -> Optional[Question]:
        """Lock the question row with SELECT ... FOR UPDATE.

        The lock is held until the request transaction ends.
        """
        stmt = (
            select(questions_table)
            .where(
                questions_table.c.id == question_id,
                questions_table.c.deleted_at.is_(None),
            )
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_question(dict(row)) if row else None
