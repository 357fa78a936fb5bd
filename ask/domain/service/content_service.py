"""Content lifecycle domain service."""

from datetime import datetime, timedelta
from typing import Any, TypeVar
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from ask.config import ContentSettings
from ask.domain.error import ForbiddenError, NotFoundError, ValidationError
from ask.domain.model import (
    Answer,
    ContentCreated,
    ContentDeleted,
    ContentItem,
    Question,
    Solution,
)
from ask.domain.repository import (
    AnswerRepository,
    CommentRepository,
    ContentRepository,
    QuestionRepository,
    ReactionRepository,
    SolutionRepository,
)
from ask.domain.value import (
    AnswerId,
    ContentRef,
    ContentType,
    DurationType,
    QuestionId,
    SolutionId,
    UserId,
)

from .base import Service
from .cache_service import content_tags
from .effects import MutationEffects
from .search_service import IndexedSearchClient

T = TypeVar("T", bound=ContentItem)


def build_model(model: type[T], **fields: Any) -> T:
    """Construct a content model, reporting bad input as a domain error."""
    try:
        return model(**fields)
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "body"
        raise ValidationError(field=field, message=error["msg"])


class ContentService(Service):
    """Domain service for creating, reading and deleting content."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        solution_repository: SolutionRepository,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        effects: MutationEffects,
        indexed_client: IndexedSearchClient,
        content_settings: ContentSettings,
    ) -> None:
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.solution_repository = solution_repository
        self.reaction_repository = reaction_repository
        self.comment_repository = comment_repository
        self.effects = effects
        self.indexed_client = indexed_client
        self.settings = content_settings

    def repository_for(self, content_type: ContentType) -> ContentRepository:
        """Repository holding items of the given type."""
        return {
            ContentType.QUESTION: self.question_repository,
            ContentType.ANSWER: self.answer_repository,
            ContentType.SOLUTION: self.solution_repository,
        }[content_type]

    async def get_content(
        self, ref: ContentRef, include_deleted: bool = False
    ) -> ContentItem:
        """Get a content item by reference.

        Args:
            ref: Content type and ID
            include_deleted: Whether soft-deleted items are returned

        Returns:
            The content item

        Raises:
            NotFoundError: If the item is missing (or soft-deleted)
        """
        repository = self.repository_for(ref.content_type)
        item = await repository.find_by_id(ref.content_id, include_deleted=include_deleted)
        if item is None:
            logfire.warn("Content not found", ref=str(ref))
            raise NotFoundError(ref.content_type.value.capitalize(), str(ref.content_id))
        return item

    async def get_solution(self, solution_id: SolutionId) -> Solution:
        """Get a live solution with its steps.

        Raises:
            NotFoundError: If the solution is missing or soft-deleted
        """
        solution = await self.solution_repository.find_by_id(solution_id)
        if solution is None:
            raise NotFoundError("Solution", str(solution_id))
        return solution

    async def create_question(
        self,
        author_id: UserId,
        title: str,
        description: str = "",
        tags: list[str] | None = None,
    ) -> Question:
        """Create a question.

        Raises:
            ValidationError: If a field is invalid
        """
        with logfire.span("content_service.create_question", author_id=str(author_id)):
            question = build_model(
                Question,
                id=QuestionId(uuid4()),
                author_id=author_id,
                title=title,
                description=description,
                tags=tags or [],
            )
            saved = await self.question_repository.save(question)
            await self._after_create(saved)
            logfire.info("Question created", question_id=str(saved.id))
            return saved

    async def create_answer(
        self, author_id: UserId, question_id: QuestionId, content: str
    ) -> Answer:
        """Answer a question.

        Raises:
            NotFoundError: If the question is missing or deleted
            ValidationError: If the content is invalid
        """
        with logfire.span(
            "content_service.create_answer",
            author_id=str(author_id),
            question_id=str(question_id),
        ):
            await self.get_content(
                ContentRef(content_type=ContentType.QUESTION, content_id=question_id)
            )
            answer = build_model(
                Answer,
                id=AnswerId(uuid4()),
                author_id=author_id,
                question_id=question_id,
                content=content,
            )
            saved = await self.answer_repository.save(answer)
            await self._after_create(saved)
            logfire.info("Answer created", answer_id=str(saved.id))
            return saved

    async def create_solution(
        self,
        author_id: UserId,
        title: str,
        description: str = "",
        tags: list[str] | None = None,
        duration: int = 0,
        duration_type: DurationType = DurationType.MINUTES,
        steps: list[tuple[str, str]] | None = None,
    ) -> Solution:
        """Publish a step-by-step solution.

        Args:
            steps: (heading, body) pairs, numbered in the order given

        Raises:
            ValidationError: If a field or step is invalid
        """
        with logfire.span("content_service.create_solution", author_id=str(author_id)):
            solution = build_model(
                Solution,
                id=SolutionId(uuid4()),
                author_id=author_id,
                title=title,
                description=description,
                tags=tags or [],
                duration=duration,
                duration_type=duration_type,
                steps=[
                    {"position": position, "heading": heading.strip(), "body": body.strip()}
                    for position, (heading, body) in enumerate(steps or [], start=1)
                ],
            )
            saved = await self.solution_repository.save(solution)
            await self._after_create(saved)
            logfire.info(
                "Solution created", solution_id=str(saved.id), steps=len(saved.steps)
            )
            return saved

    async def delete_content(self, ref: ContentRef, requester_id: UserId) -> ContentItem:
        """Soft delete an item on behalf of its owner.

        The item disappears from reads and search but stays retrievable by id
        until it is purged.

        Args:
            ref: Item to delete
            requester_id: User asking for the deletion

        Returns:
            The soft-deleted item

        Raises:
            NotFoundError: If the item is missing or already deleted
            ForbiddenError: If the requester does not own the item
        """
        with logfire.span(
            "content_service.delete_content", ref=str(ref), requester_id=str(requester_id)
        ):
            item = await self.get_content(ref)
            if item.author_id != requester_id:
                logfire.warn(
                    "Delete attempt by non-owner",
                    ref=str(ref),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "delete", ref.content_type.value, str(ref.content_id), str(requester_id)
                )

            now = datetime.now()
            deleted = await self.repository_for(ref.content_type).save(
                item.model_copy(update={"deleted_at": now, "updated_at": now})
            )

            if isinstance(deleted, Answer) and deleted.is_accepted:
                await self._unsolve(deleted)

            await self.effects.invalidate(content_tags(ref.content_type, item.author_id))
            await self.effects.publish(
                ContentDeleted(content_type=ref.content_type, content_id=ref.content_id)
            )
            await self._remove_from_index(ref)
            logfire.info("Content soft-deleted", ref=str(ref))
            return deleted

    async def purge_deleted(self, older_than: datetime | None = None) -> int:
        """Permanently delete content soft-deleted before the cutoff.

        Purging a question purges all of its answers. Purging any item removes
        its reactions and comments.

        Args:
            older_than: Cutoff, defaults to now minus the grace period

        Returns:
            Number of content items purged
        """
        cutoff = older_than or datetime.now() - timedelta(
            days=self.settings.soft_delete_grace_days
        )
        with logfire.span("content_service.purge_deleted", cutoff=cutoff.isoformat()):
            purged = 0
            for content_type in ContentType:
                repository = self.repository_for(content_type)
                for item in await repository.find_deleted_before(cutoff):
                    if isinstance(item, Question):
                        for answer in await self.answer_repository.find_by_question(
                            item.id, include_deleted=True
                        ):
                            purged += await self._purge(answer)
                    purged += await self._purge(item)

            if purged:
                for content_type in ContentType:
                    await self.effects.invalidate(content_tags(content_type))
            logfire.info("Purged deleted content", count=purged)
            return purged

    async def _purge(self, item: ContentItem) -> int:
        ref = item.ref
        repository = self.repository_for(ref.content_type)
        if await repository.find_by_id(ref.content_id, include_deleted=True) is None:
            # Already gone with its question
            return 0
        await self.reaction_repository.delete_by_content(ref)
        await self.comment_repository.delete_by_content(ref)
        await repository.delete(ref.content_id)
        await self._remove_from_index(ref)
        return 1

    async def _unsolve(self, answer: Answer) -> None:
        await self.answer_repository.set_accepted(answer.id, False)
        question = await self.question_repository.find_by_id(
            answer.question_id, include_deleted=True
        )
        if question is not None and question.is_solved:
            await self.question_repository.save(
                question.model_copy(update={"is_solved": False, "updated_at": datetime.now()})
            )

    async def _after_create(self, item: ContentItem) -> None:
        await self.effects.invalidate(content_tags(item.content_type, item.author_id))
        await self.effects.publish(
            ContentCreated(
                content_type=item.content_type,
                content_id=item.id,
                author_id=item.author_id,
            )
        )
        if self.indexed_client.is_configured:
            try:
                await self.indexed_client.upsert_document(item)
            except Exception as e:
                logfire.warn("Search index update failed", ref=str(item.ref), error=str(e))

    async def _remove_from_index(self, ref: ContentRef) -> None:
        if not self.indexed_client.is_configured:
            return
        try:
            await self.indexed_client.delete_document(ref.content_type, ref.content_id)
        except Exception as e:
            logfire.warn("Search index removal failed", ref=str(ref), error=str(e))
