"""Derived read views served through the tagged cache.

These are recomputed from canonical storage after invalidation, so they
must stay JSON-compatible.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from ask.domain.model.common import DomainModel
from ask.domain.model.user import User
from ask.domain.value import UserId


class QuestionSummary(DomainModel):
    """Question row for popular and recent listings."""

    id: UUID
    title: str
    author_id: UserId
    tags: list[str]
    is_solved: bool
    answers_count: int = 0
    likes_count: int = 0
    created_at: datetime


class SolutionSummary(DomainModel):
    """Solution row for popular listings."""

    id: UUID
    title: str
    author_id: UserId
    tags: list[str]
    likes_count: int = 0
    comments_count: int = 0
    created_at: datetime


class AnswerSummary(DomainModel):
    """Answer row for a user's profile."""

    id: UUID
    question_id: UUID
    content: str
    is_accepted: bool
    created_at: datetime


class TagCount(DomainModel):
    """How often a tag is used across questions and solutions."""

    name: str
    count: int


class UserProfileStats(DomainModel):
    questions_count: int = 0
    solutions_count: int = 0
    answers_count: int = 0
    accepted_answers_count: int = 0


class UserProfileView(DomainModel):
    """Profile page data: the user, their latest content and counts."""

    user: User
    latest_questions: list[QuestionSummary]
    latest_solutions: list[SolutionSummary]
    latest_answers: list[AnswerSummary]
    stats: UserProfileStats
    computed_at: Optional[datetime] = None
