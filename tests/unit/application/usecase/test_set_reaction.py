"""Unit tests for SetReactionUseCase."""

from uuid import uuid4

import pytest

from ask.application.usecase.reaction import SetReactionRequest, SetReactionUseCase
from ask.domain.error import NotFoundError
from ask.domain.service import ContentService, ReactionService
from ask.domain.value import ContentType, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSetReactionUseCase:
    """Tests for SetReactionUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_dislike_then_dislike(self, unit_env):
        """The response tracks the caller's reaction through each toggle."""
        # Arrange
        content_service = await unit_env.get(ContentService)
        use_case = SetReactionUseCase(
            reaction_service=await unit_env.get(ReactionService)
        )
        solution = await content_service.create_solution(UserId(uuid4()), "Hang a door")
        user_id = str(uuid4())

        def request(is_like: bool) -> SetReactionRequest:
            return SetReactionRequest(
                content_type=ContentType.SOLUTION,
                content_id=str(solution.id),
                user_id=user_id,
                is_like=is_like,
            )

        # Act
        liked = await use_case.execute(request(True))
        flipped = await use_case.execute(request(False))
        removed = await use_case.execute(request(False))

        # Assert
        assert (liked.likes, liked.dislikes, liked.reaction) == (1, 0, "like")
        assert (flipped.likes, flipped.dislikes, flipped.reaction) == (0, 1, "dislike")
        assert (removed.likes, removed.dislikes, removed.reaction) == (0, 0, None)
        assert removed.content_id == str(solution.id)

    @pytest.mark.asyncio
    async def test_unknown_content_raises_not_found(self, unit_env):
        use_case = await unit_env.get(SetReactionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                SetReactionRequest(
                    content_type=ContentType.ANSWER,
                    content_id=str(uuid4()),
                    user_id=str(uuid4()),
                    is_like=True,
                )
            )
