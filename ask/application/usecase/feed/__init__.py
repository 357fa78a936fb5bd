"""Listing use cases served from the tagged cache."""

from .list_views import (
    GetPopularQuestionsUseCase,
    GetPopularSolutionsUseCase,
    GetRecentQuestionsUseCase,
    GetTrendingTagsUseCase,
    ListingRequest,
    QuestionListingResponse,
    SolutionListingResponse,
    TrendingTagsRequest,
    TrendingTagsResponse,
)

__all__ = [
    "GetPopularQuestionsUseCase",
    "GetPopularSolutionsUseCase",
    "GetRecentQuestionsUseCase",
    "GetTrendingTagsUseCase",
    "ListingRequest",
    "QuestionListingResponse",
    "SolutionListingResponse",
    "TrendingTagsRequest",
    "TrendingTagsResponse",
]
