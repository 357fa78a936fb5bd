"""PostgreSQL repository implementations."""

from ask.persistence.repository.aggregate import PostgresAggregateRepository
from ask.persistence.repository.answer import PostgresAnswerRepository
from ask.persistence.repository.comment import PostgresCommentRepository
from ask.persistence.repository.question import PostgresQuestionRepository
from ask.persistence.repository.reaction import PostgresReactionRepository
from ask.persistence.repository.search import PostgresFallbackMatcher
from ask.persistence.repository.solution import PostgresSolutionRepository
from ask.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresSolutionRepository",
    "PostgresReactionRepository",
    "PostgresCommentRepository",
    "PostgresFallbackMatcher",
    "PostgresAggregateRepository",
]
