"""Unit tests for AcceptanceService."""

import asyncio
from uuid import uuid4

import pytest

from ask.domain.error import ForbiddenError, NotFoundError
from ask.domain.model import AnswerAccepted, AnswerAcceptanceChanged
from ask.domain.repository import AnswerRepository, QuestionRepository
from ask.domain.service import AcceptanceService, ContentService, EventPublisher
from ask.domain.value import AnswerId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def question_with_answers(env, count: int = 2):
    """Create a question and some answers; returns (owner_id, question, answers)."""
    content_service = await env.get(ContentService)
    owner_id = UserId(uuid4())
    question = await content_service.create_question(owner_id, "Why is my bread dense?")
    answers = [
        await content_service.create_answer(
            UserId(uuid4()), question.id, f"Answer number {i}"
        )
        for i in range(count)
    ]
    return owner_id, question, answers


class TestToggleAcceptance:
    """Tests for accepting and unaccepting answers."""

    @pytest.mark.asyncio
    async def test_accept_marks_answer_and_solves_question(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        questions = await unit_env.get(QuestionRepository)
        owner_id, question, answers = await question_with_answers(unit_env)

        # Act
        updated = await service.toggle_acceptance(answers[0].id, owner_id)

        # Assert
        assert updated.is_accepted is True
        stored = await questions.find_by_id(question.id)
        assert stored.is_solved is True

    @pytest.mark.asyncio
    async def test_accepting_another_answer_clears_the_first(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repository = await unit_env.get(AnswerRepository)
        owner_id, question, answers = await question_with_answers(unit_env, count=3)
        await service.toggle_acceptance(answers[0].id, owner_id)

        # Act
        await service.toggle_acceptance(answers[2].id, owner_id)

        # Assert
        stored = await answer_repository.find_by_question(question.id)
        accepted = [a.id for a in stored if a.is_accepted]
        assert accepted == [answers[2].id]

    @pytest.mark.asyncio
    async def test_toggling_accepted_answer_unaccepts_and_unsolves(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        questions = await unit_env.get(QuestionRepository)
        owner_id, question, answers = await question_with_answers(unit_env)
        await service.toggle_acceptance(answers[1].id, owner_id)

        # Act
        updated = await service.toggle_acceptance(answers[1].id, owner_id)

        # Assert
        assert updated.is_accepted is False
        stored = await questions.find_by_id(question.id)
        assert stored.is_solved is False

    @pytest.mark.asyncio
    async def test_non_owner_cannot_accept(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repository = await unit_env.get(AnswerRepository)
        _, _, answers = await question_with_answers(unit_env)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.toggle_acceptance(answers[0].id, UserId(uuid4()))
        stored = await answer_repository.find_by_id(answers[0].id)
        assert stored.is_accepted is False

    @pytest.mark.asyncio
    async def test_answer_author_cannot_accept_own_answer(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        _, _, answers = await question_with_answers(unit_env, count=1)

        with pytest.raises(ForbiddenError):
            await service.toggle_acceptance(answers[0].id, answers[0].author_id)

    @pytest.mark.asyncio
    async def test_non_owner_cannot_unaccept(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        owner_id, _, answers = await question_with_answers(unit_env)
        await service.toggle_acceptance(answers[0].id, owner_id)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await service.toggle_acceptance(answers[0].id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_missing_answer_raises_not_found(self, unit_env):
        service = await unit_env.get(AcceptanceService)

        with pytest.raises(NotFoundError):
            await service.toggle_acceptance(AnswerId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_takes_question_lock(self, unit_env):
        service = await unit_env.get(AcceptanceService)
        questions = await unit_env.get(QuestionRepository)
        owner_id, question, answers = await question_with_answers(unit_env)

        await service.toggle_acceptance(answers[0].id, owner_id)

        assert questions.locked == [question.id]

    @pytest.mark.asyncio
    async def test_events_published(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        publisher = await unit_env.get(EventPublisher)
        owner_id, question, answers = await question_with_answers(unit_env)

        # Act
        await service.toggle_acceptance(answers[0].id, owner_id)
        await service.toggle_acceptance(answers[0].id, owner_id)

        # Assert
        changes = publisher.of_type(AnswerAcceptanceChanged)
        assert [c.accepted for c in changes] == [True, False]
        accepted = publisher.of_type(AnswerAccepted)
        assert len(accepted) == 1
        assert accepted[0].question_id == question.id


class TestConcurrentToggles:
    """Toggles racing on one question are serialized by the question lock."""

    @pytest.mark.asyncio
    async def test_racing_accepts_leave_one_accepted_answer(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repository = await unit_env.get(AnswerRepository)
        questions = await unit_env.get(QuestionRepository)
        owner_id, question, answers = await question_with_answers(unit_env, count=3)

        # Act
        await asyncio.gather(
            service.toggle_acceptance(answers[0].id, owner_id),
            service.toggle_acceptance(answers[1].id, owner_id),
            service.toggle_acceptance(answers[2].id, owner_id),
        )

        # Assert
        stored = await answer_repository.find_by_question(question.id)
        assert [a.id for a in stored if a.is_accepted] == [answers[2].id]
        assert (await questions.find_by_id(question.id)).is_solved is True

    @pytest.mark.asyncio
    async def test_racing_toggles_of_one_answer_cancel_out(self, unit_env):
        # Arrange
        service = await unit_env.get(AcceptanceService)
        answer_repository = await unit_env.get(AnswerRepository)
        questions = await unit_env.get(QuestionRepository)
        owner_id, question, answers = await question_with_answers(unit_env)

        # Act
        results = await asyncio.gather(
            service.toggle_acceptance(answers[0].id, owner_id),
            service.toggle_acceptance(answers[0].id, owner_id),
        )

        # Assert
        assert [r.is_accepted for r in results] == [True, False]
        stored = await answer_repository.find_by_question(question.id)
        assert not any(a.is_accepted for a in stored)
        assert (await questions.find_by_id(question.id)).is_solved is False

