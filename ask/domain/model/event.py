"""Domain events.

Events are plain data handed to an EventPublisher after a mutation. Delivery
to real-time listeners happens outside this service.
"""

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import (
    AnswerId,
    CommentId,
    ContentType,
    QuestionId,
    ReactionCounts,
    UserId,
)


class DomainEvent(DomainModel):
    """Base class for all domain events."""

    name: ClassVar[str] = "domain_event"

    occurred_at: datetime = Field(default_factory=datetime.now)


class ContentCreated(DomainEvent):
    name: ClassVar[str] = "content_created"

    content_type: ContentType
    content_id: UUID
    author_id: UserId


class ContentDeleted(DomainEvent):
    name: ClassVar[str] = "content_deleted"

    content_type: ContentType
    content_id: UUID


class AnswerAcceptanceChanged(DomainEvent):
    name: ClassVar[str] = "answer_acceptance_changed"

    answer_id: AnswerId
    question_id: QuestionId
    accepted: bool


class AnswerAccepted(DomainEvent):
    """Emitted only when an answer transitions to accepted."""

    name: ClassVar[str] = "answer_accepted"

    answer_id: AnswerId
    question_id: QuestionId


class ReactionChanged(DomainEvent):
    name: ClassVar[str] = "reaction_changed"

    content_type: ContentType
    content_id: UUID
    counts: ReactionCounts


class CommentAdded(DomainEvent):
    name: ClassVar[str] = "comment_added"

    comment_id: CommentId
    content_type: ContentType
    content_id: UUID
