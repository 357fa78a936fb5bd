"""Question repository interface."""

from abc import abstractmethod
from typing import Optional

from ask.domain.model.question import Question
from ask.domain.repository.content import ContentRepository
from ask.domain.value import QuestionId


class QuestionRepository(ContentRepository[Question]):
    """Repository for Question aggregate."""

    @abstractmethod
    async def lock_for_update(self, question_id: QuestionId) -> Optional[Question]:
        """Lock the question row for the rest of the transaction.

        Serializes acceptance changes on the same question.

        Args:
            question_id: The question to lock

        Returns:
            The locked question if found, None otherwise
        """
        pass
