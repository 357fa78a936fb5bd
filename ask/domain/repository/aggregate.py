"""Read-side queries backing the cached aggregate views."""

from abc import ABC, abstractmethod

from ask.domain.model.view import (
    AnswerSummary,
    QuestionSummary,
    SolutionSummary,
    TagCount,
)
from ask.domain.value import UserId


class AggregateRepository(ABC):
    """Queries that join content with reaction, answer and comment counts.

    Soft-deleted content is excluded everywhere.
    """

    @abstractmethod
    async def popular_questions(self, limit: int) -> list[QuestionSummary]:
        """Questions ordered by answer count, then likes, descending."""
        pass

    @abstractmethod
    async def recent_questions(self, limit: int) -> list[QuestionSummary]:
        """Newest questions first, with answer counts."""
        pass

    @abstractmethod
    async def popular_solutions(self, limit: int) -> list[SolutionSummary]:
        """Solutions ordered by likes, then comment count, descending."""
        pass

    @abstractmethod
    async def tag_counts(self, limit: int) -> list[TagCount]:
        """Tag usage across questions and solutions, most used first."""
        pass

    @abstractmethod
    async def latest_questions_by_author(
        self, author_id: UserId, limit: int
    ) -> list[QuestionSummary]:
        pass

    @abstractmethod
    async def latest_solutions_by_author(
        self, author_id: UserId, limit: int
    ) -> list[SolutionSummary]:
        pass

    @abstractmethod
    async def latest_answers_by_author(
        self, author_id: UserId, limit: int
    ) -> list[AnswerSummary]:
        pass
