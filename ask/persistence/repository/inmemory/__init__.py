"""In-memory repository implementations for testing."""

from .aggregate import InMemoryAggregateRepository
from .comment import InMemoryCommentRepository
from .content import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemorySolutionRepository,
)
from .reaction import InMemoryReactionRepository
from .search import InMemoryFallbackMatcher
from .store import InMemoryDatabase
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAggregateRepository",
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryFallbackMatcher",
    "InMemoryQuestionRepository",
    "InMemoryReactionRepository",
    "InMemorySolutionRepository",
    "InMemoryUserRepository",
]
