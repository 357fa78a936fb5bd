"""Answer acceptance domain service."""

from datetime import datetime

import logfire

from ask.domain.error import ForbiddenError, NotFoundError
from ask.domain.model import Answer, AnswerAccepted, AnswerAcceptanceChanged
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.value import AnswerId, ContentType, UserId

from .base import Service
from .cache_service import content_tags
from .effects import MutationEffects


class AcceptanceService(Service):
    """Domain service for accepting answers.

    Each answer is either accepted or not. Accepting one answer of a
    question clears every other answer of that question, so a question never
    has more than one accepted answer. Only the question owner may toggle.
    """

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        effects: MutationEffects,
    ) -> None:
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.effects = effects

    async def toggle_acceptance(self, answer_id: AnswerId, requester_id: UserId) -> Answer:
        """Accept an unaccepted answer, or unaccept an accepted one.

        Runs under a lock on the question row so concurrent toggles on the
        same question are serialized.

        Args:
            answer_id: Answer to toggle
            requester_id: User asking for the change

        Returns:
            The answer after the change

        Raises:
            NotFoundError: If the answer or its question does not exist
            ForbiddenError: If the requester does not own the question
        """
        with logfire.span(
            "acceptance_service.toggle_acceptance",
            answer_id=str(answer_id),
            requester_id=str(requester_id),
        ):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise NotFoundError("Answer", str(answer_id))

            question = await self.question_repository.find_by_id(answer.question_id)
            if not question:
                raise NotFoundError("Question", str(answer.question_id))

            if question.author_id != requester_id:
                logfire.warn(
                    "Acceptance toggle by non-owner",
                    answer_id=str(answer_id),
                    question_id=str(question.id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "accept", "answer", str(answer_id), str(requester_id)
                )

            locked = await self.question_repository.lock_for_update(question.id)
            if not locked:
                raise NotFoundError("Question", str(question.id))

            # Re-read under the lock; another toggle may have won meanwhile
            current = await self.answer_repository.find_by_id(answer_id)
            if not current:
                raise NotFoundError("Answer", str(answer_id))

            accepted = not current.is_accepted
            if accepted:
                await self.answer_repository.accept_exclusively(question.id, answer_id)
            else:
                await self.answer_repository.set_accepted(answer_id, False)

            if locked.is_solved != accepted:
                await self.question_repository.save(
                    locked.model_copy(
                        update={"is_solved": accepted, "updated_at": datetime.now()}
                    )
                )

            updated = await self.answer_repository.find_by_id(answer_id)
            if not updated:
                raise NotFoundError("Answer", str(answer_id))

            await self.effects.invalidate(
                content_tags(ContentType.ANSWER) | content_tags(ContentType.QUESTION)
            )
            await self.effects.publish(
                AnswerAcceptanceChanged(
                    answer_id=answer_id, question_id=question.id, accepted=accepted
                )
            )
            if accepted:
                await self.effects.publish(
                    AnswerAccepted(answer_id=answer_id, question_id=question.id)
                )

            logfire.info(
                "Answer acceptance changed",
                answer_id=str(answer_id),
                question_id=str(question.id),
                accepted=accepted,
            )
            return updated
