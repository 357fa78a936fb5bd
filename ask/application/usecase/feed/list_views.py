"""Cached listing use cases: popular, recent and trending."""

from pydantic import BaseModel, Field

from ask.domain.model import QuestionSummary, SolutionSummary, TagCount
from ask.domain.service import AggregateQueryService


class ListingRequest(BaseModel):
    """Listing request."""

    limit: int = Field(default=10, ge=1, le=100)


class QuestionListingResponse(BaseModel):
    questions: list[QuestionSummary]


class SolutionListingResponse(BaseModel):
    solutions: list[SolutionSummary]


class TrendingTagsRequest(BaseModel):
    limit: int = Field(default=20, ge=1, le=100)


class TrendingTagsResponse(BaseModel):
    tags: list[TagCount]


class GetPopularQuestionsUseCase:
    """Use case for the most answered and liked questions."""

    def __init__(self, aggregate_service: AggregateQueryService) -> None:
        self.aggregate_service = aggregate_service

    async def execute(self, request: ListingRequest) -> QuestionListingResponse:
        questions = await self.aggregate_service.popular_questions(request.limit)
        return QuestionListingResponse(questions=questions)


class GetRecentQuestionsUseCase:
    """Use case for the newest questions."""

    def __init__(self, aggregate_service: AggregateQueryService) -> None:
        self.aggregate_service = aggregate_service

    async def execute(self, request: ListingRequest) -> QuestionListingResponse:
        questions = await self.aggregate_service.recent_questions(request.limit)
        return QuestionListingResponse(questions=questions)


class GetPopularSolutionsUseCase:
    """Use case for the most liked solutions."""

    def __init__(self, aggregate_service: AggregateQueryService) -> None:
        self.aggregate_service = aggregate_service

    async def execute(self, request: ListingRequest) -> SolutionListingResponse:
        solutions = await self.aggregate_service.popular_solutions(request.limit)
        return SolutionListingResponse(solutions=solutions)


class GetTrendingTagsUseCase:
    """Use case for the most used tags."""

    def __init__(self, aggregate_service: AggregateQueryService) -> None:
        self.aggregate_service = aggregate_service

    async def execute(self, request: TrendingTagsRequest) -> TrendingTagsResponse:
        tags = await self.aggregate_service.trending_tags(request.limit)
        return TrendingTagsResponse(tags=tags)
