"""Unit tests for the user profile use cases."""

from uuid import uuid4

import pytest

from ask.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from ask.domain.error import NotFoundError
from ask.domain.repository import UserRepository
from ask.domain.service import ContentService
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserProfileUseCase:
    @pytest.mark.asyncio
    async def test_returns_profile(self, unit_env):
        # Arrange
        users = await unit_env.get(UserRepository)
        content_service = await unit_env.get(ContentService)
        use_case = await unit_env.get(GetUserProfileUseCase)
        user = await users.save(make_user("nina"))
        question = await content_service.create_question(user.id, "Nina's question")

        # Act
        response = await use_case.execute(GetUserProfileRequest(user_id=str(user.id)))

        # Assert
        assert response.handle == "nina"
        assert response.name == "Nina"
        assert [q.id for q in response.latest_questions] == [question.id]
        assert response.stats.questions_count == 1

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, unit_env):
        use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetUserProfileRequest(user_id=str(uuid4())))


class TestUpdateUserProfileUseCase:
    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, unit_env):
        # Arrange
        users = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user = await users.save(make_user("omar"))

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), bio="Electrician")
        )

        # Assert
        assert response.bio == "Electrician"
        assert response.name == "Omar"

    @pytest.mark.asyncio
    async def test_explicit_none_clears(self, unit_env):
        users = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateUserProfileUseCase)
        user = await users.save(make_user("pia"))

        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=str(user.id), name=None)
        )

        assert response.name is None
