"""In-memory content repositories for testing."""

import asyncio
from datetime import datetime
from typing import Generic, Optional, TypeVar
from uuid import UUID

from ask.domain.model import Answer, Question, Solution
from ask.domain.model.content import ContentItem
from ask.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    SolutionRepository,
)
from ask.domain.repository.content import ContentRepository
from ask.domain.value import AnswerId, QuestionId, UserId

from .store import InMemoryDatabase

T = TypeVar("T", bound=ContentItem)


class InMemoryContentRepository(ContentRepository[T], Generic[T]):
    """Dictionary-backed content repository."""

    def __init__(self, items: dict[UUID, T]) -> None:
        self._items = items

    async def find_by_id(self, item_id: UUID, include_deleted: bool = False) -> Optional[T]:
        item = self._items.get(item_id)
        if item is None or (item.deleted_at is not None and not include_deleted):
            return None
        return item

    async def save(self, item: T) -> T:
        self._items[item.id] = item
        return item

    async def find_by_author(self, author_id: UserId, limit: int = 5) -> list[T]:
        items = [
            i
            for i in self._items.values()
            if i.author_id == author_id and i.deleted_at is None
        ]
        items.sort(key=lambda i: i.created_at, reverse=True)
        return items[:limit]

    async def count_by_author(self, author_id: UserId) -> int:
        return sum(
            1
            for i in self._items.values()
            if i.author_id == author_id and i.deleted_at is None
        )

    async def find_deleted_before(self, cutoff: datetime) -> list[T]:
        return [
            i
            for i in self._items.values()
            if i.deleted_at is not None and i.deleted_at < cutoff
        ]

    async def delete(self, item_id: UUID) -> None:
        self._items.pop(item_id, None)


class InMemoryQuestionRepository(
    InMemoryContentRepository[Question], QuestionRepository
):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        super().__init__(self.db.questions)
        self.locked: list[QuestionId] = []

    async def lock_for_update(self, question_id: QuestionId) -> Optional[Question]:
        """Lock the question row for the rest of the calling task."""
        await self.db.lock_row(question_id)
        self.locked.append(question_id)
        await asyncio.sleep(0)
        return await self.find_by_id(question_id)


class InMemoryAnswerRepository(InMemoryContentRepository[Answer], AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        super().__init__(self.db.answers)

    async def find_by_question(
        self, question_id: QuestionId, include_deleted: bool = False
    ) -> list[Answer]:
        answers = [
            a
            for a in self._items.values()
            if a.question_id == question_id
            and (include_deleted or a.deleted_at is None)
        ]
        answers.sort(key=lambda a: a.created_at)
        return answers

    async def accept_exclusively(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> None:
        now = datetime.now()
        for answer in list(self._items.values()):
            if answer.question_id == question_id:
                self._items[answer.id] = answer.model_copy(
                    update={"is_accepted": answer.id == answer_id, "updated_at": now}
                )

    async def set_accepted(self, answer_id: AnswerId, accepted: bool) -> None:
        answer = self._items.get(answer_id)
        if answer is not None:
            self._items[answer_id] = answer.model_copy(
                update={"is_accepted": accepted, "updated_at": datetime.now()}
            )

    async def count_accepted_by_author(self, author_id: UserId) -> int:
        return sum(
            1
            for a in self._items.values()
            if a.author_id == author_id and a.is_accepted and a.deleted_at is None
        )


class InMemorySolutionRepository(
    InMemoryContentRepository[Solution], SolutionRepository
):
    """In-memory implementation of SolutionRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        super().__init__(self.db.solutions)
