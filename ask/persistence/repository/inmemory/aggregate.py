"""In-memory aggregate queries for testing."""

from collections import Counter

from ask.domain.model import Question, Solution
from ask.domain.model.view import (
    AnswerSummary,
    QuestionSummary,
    SolutionSummary,
    TagCount,
)
from ask.domain.repository import AggregateRepository
from ask.domain.value import UserId

from .store import InMemoryDatabase


class InMemoryAggregateRepository(AggregateRepository):
    """Computes the aggregate views from the in-memory tables."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    def _likes(self, content_id) -> int:
        return sum(
            1 for r in self.db.reactions.values() if r.content_id == content_id and r.is_like
        )

    def _question_summary(self, question: Question) -> QuestionSummary:
        answers_count = sum(
            1
            for a in self.db.answers.values()
            if a.question_id == question.id and a.deleted_at is None
        )
        return QuestionSummary(
            id=question.id,
            title=question.title,
            author_id=question.author_id,
            tags=question.tags,
            is_solved=question.is_solved,
            answers_count=answers_count,
            likes_count=self._likes(question.id),
            created_at=question.created_at,
        )

    def _solution_summary(self, solution: Solution) -> SolutionSummary:
        comments_count = sum(
            1
            for c in self.db.comments.values()
            if c.content_id == solution.id and c.deleted_at is None
        )
        return SolutionSummary(
            id=solution.id,
            title=solution.title,
            author_id=solution.author_id,
            tags=solution.tags,
            likes_count=self._likes(solution.id),
            comments_count=comments_count,
            created_at=solution.created_at,
        )

    def _live_questions(self) -> list[QuestionSummary]:
        return [
            self._question_summary(q)
            for q in self.db.questions.values()
            if q.deleted_at is None
        ]

    def _live_solutions(self) -> list[SolutionSummary]:
        return [
            self._solution_summary(s)
            for s in self.db.solutions.values()
            if s.deleted_at is None
        ]

    async def popular_questions(self, limit: int) -> list[QuestionSummary]:
        rows = self._live_questions()
        rows.sort(
            key=lambda q: (q.answers_count, q.likes_count, q.created_at), reverse=True
        )
        return rows[:limit]

    async def recent_questions(self, limit: int) -> list[QuestionSummary]:
        rows = self._live_questions()
        rows.sort(key=lambda q: q.created_at, reverse=True)
        return rows[:limit]

    async def popular_solutions(self, limit: int) -> list[SolutionSummary]:
        rows = self._live_solutions()
        rows.sort(
            key=lambda s: (s.likes_count, s.comments_count, s.created_at), reverse=True
        )
        return rows[:limit]

    async def tag_counts(self, limit: int) -> list[TagCount]:
        counter: Counter[str] = Counter()
        for item in [*self.db.questions.values(), *self.db.solutions.values()]:
            if item.deleted_at is None:
                counter.update(item.tags)
        ranked = sorted(counter.items(), key=lambda pair: (-pair[1], pair[0]))
        return [TagCount(name=name, count=count) for name, count in ranked[:limit]]

    async def latest_questions_by_author(
        self, author_id: UserId, limit: int
    ) -> list[QuestionSummary]:
        rows = [q for q in self._live_questions() if q.author_id == author_id]
        rows.sort(key=lambda q: q.created_at, reverse=True)
        return rows[:limit]

    async def latest_solutions_by_author(
        self, author_id: UserId, limit: int
    ) -> list[SolutionSummary]:
        rows = [s for s in self._live_solutions() if s.author_id == author_id]
        rows.sort(key=lambda s: s.created_at, reverse=True)
        return rows[:limit]

    async def latest_answers_by_author(
        self, author_id: UserId, limit: int
    ) -> list[AnswerSummary]:
        answers = [
            a
            for a in self.db.answers.values()
            if a.author_id == author_id and a.deleted_at is None
        ]
        answers.sort(key=lambda a: a.created_at, reverse=True)
        return [
            AnswerSummary(
                id=a.id,
                question_id=a.question_id,
                content=a.content,
                is_accepted=a.is_accepted,
                created_at=a.created_at,
            )
            for a in answers[:limit]
        ]
