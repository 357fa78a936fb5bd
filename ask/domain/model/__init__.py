"""Domain model entities for Ask."""

from ask.domain.model.answer import Answer
from ask.domain.model.comment import Comment, CommentNode
from ask.domain.model.content import ContentItem, TaggedContentItem
from ask.domain.model.event import (
    AnswerAccepted,
    AnswerAcceptanceChanged,
    CommentAdded,
    ContentCreated,
    ContentDeleted,
    DomainEvent,
    ReactionChanged,
)
from ask.domain.model.question import Question
from ask.domain.model.reaction import Reaction
from ask.domain.model.search import SearchHit, SearchOutcome
from ask.domain.model.solution import Solution, SolutionStep
from ask.domain.model.user import User
from ask.domain.model.view import (
    AnswerSummary,
    QuestionSummary,
    SolutionSummary,
    TagCount,
    UserProfileStats,
    UserProfileView,
)

__all__ = [
    "User",
    "ContentItem",
    "TaggedContentItem",
    "Question",
    "Answer",
    "Solution",
    "SolutionStep",
    "Reaction",
    "Comment",
    "CommentNode",
    # Search
    "SearchHit",
    "SearchOutcome",
    # Views
    "QuestionSummary",
    "SolutionSummary",
    "AnswerSummary",
    "TagCount",
    "UserProfileStats",
    "UserProfileView",
    # Events
    "DomainEvent",
    "ContentCreated",
    "ContentDeleted",
    "AnswerAcceptanceChanged",
    "AnswerAccepted",
    "ReactionChanged",
    "CommentAdded",
]
