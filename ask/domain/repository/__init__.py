"""Repository interfaces for the Ask domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ask.domain.repository.aggregate import AggregateRepository
from ask.domain.repository.answer import AnswerRepository
from ask.domain.repository.comment import CommentRepository
from ask.domain.repository.content import ContentRepository
from ask.domain.repository.question import QuestionRepository
from ask.domain.repository.reaction import ReactionRepository
from ask.domain.repository.search import FallbackMatcher, term_prefixes
from ask.domain.repository.solution import SolutionRepository
from ask.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ContentRepository",
    "QuestionRepository",
    "AnswerRepository",
    "SolutionRepository",
    "ReactionRepository",
    "CommentRepository",
    "FallbackMatcher",
    "term_prefixes",
    "AggregateRepository",
]
