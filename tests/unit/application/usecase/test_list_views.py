"""Unit tests for the cached listing use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError as PydanticValidationError

from ask.application.usecase.feed import (
    GetPopularQuestionsUseCase,
    GetPopularSolutionsUseCase,
    GetRecentQuestionsUseCase,
    GetTrendingTagsUseCase,
    ListingRequest,
    TrendingTagsRequest,
)
from ask.domain.service import ContentService
from ask.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListingUseCases:
    @pytest.mark.asyncio
    async def test_listings_reflect_created_content(self, unit_env):
        # Arrange
        content_service = await unit_env.get(ContentService)
        author_id = UserId(uuid4())
        question = await content_service.create_question(
            author_id, "Fence post rot", tags=["garden"]
        )
        solution = await content_service.create_solution(
            author_id, "Pouring a concrete slab", tags=["garden", "concrete"]
        )

        # Act
        popular = await (await unit_env.get(GetPopularQuestionsUseCase)).execute(
            ListingRequest()
        )
        recent = await (await unit_env.get(GetRecentQuestionsUseCase)).execute(
            ListingRequest(limit=5)
        )
        solutions = await (await unit_env.get(GetPopularSolutionsUseCase)).execute(
            ListingRequest()
        )
        tags = await (await unit_env.get(GetTrendingTagsUseCase)).execute(
            TrendingTagsRequest()
        )

        # Assert
        assert [q.id for q in popular.questions] == [question.id]
        assert [q.id for q in recent.questions] == [question.id]
        assert [s.id for s in solutions.solutions] == [solution.id]
        assert [(t.name, t.count) for t in tags.tags] == [("garden", 2), ("concrete", 1)]

    @pytest.mark.parametrize("limit", [0, 101])
    def test_limit_out_of_range_rejected(self, limit):
        with pytest.raises(PydanticValidationError):
            ListingRequest(limit=limit)
