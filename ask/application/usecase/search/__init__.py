"""Search use cases."""

from .search_content import (
    SearchAllRequest,
    SearchAllResponse,
    SearchAllUseCase,
    SearchContentRequest,
    SearchContentResponse,
    SearchContentUseCase,
    SearchHitItem,
)

__all__ = [
    "SearchAllRequest",
    "SearchAllResponse",
    "SearchAllUseCase",
    "SearchContentRequest",
    "SearchContentResponse",
    "SearchContentUseCase",
    "SearchHitItem",
]
