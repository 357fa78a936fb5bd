"""Domain value objects for Ask."""

from ask.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    ReactionId,
    SolutionId,
    UserId,
)
from ask.domain.value.types import (
    ContentRef,
    ContentType,
    DurationType,
    Handle,
    ReactionCounts,
    SearchPath,
    TagName,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "SolutionId",
    "ReactionId",
    "CommentId",
    # Types
    "ContentType",
    "ContentRef",
    "DurationType",
    "Handle",
    "ReactionCounts",
    "SearchPath",
    "TagName",
]
