"""Answer repository interface."""

from abc import abstractmethod

from ask.domain.model.answer import Answer
from ask.domain.repository.content import ContentRepository
from ask.domain.value import AnswerId, QuestionId, UserId


class AnswerRepository(ContentRepository[Answer]):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_question(
        self, question_id: QuestionId, include_deleted: bool = False
    ) -> list[Answer]:
        """Find all answers to a question, oldest first.

        Args:
            question_id: The question ID
            include_deleted: Whether to include soft-deleted answers

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def accept_exclusively(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        """Accept one answer and clear every sibling in a single statement.

        Args:
            question_id: The question whose answers are updated
            answer_id: The answer that ends up accepted
        """
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        """Set the accepted flag of a single answer."""
        pass

    @abstractmethod
    async def count_accepted_by_author(self, author_id: UserId) -> int:
        """Count an author's accepted, non-deleted answers."""
        pass
