"""Reaction entity.

A like or dislike left by a user on a content item.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from ask.domain.model.common import DomainModel
from ask.domain.value import ContentRef, ContentType, ReactionId, UserId


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - One reaction per user per item (unique constraint in storage)
    - Reacting twice with the same sign removes the reaction
    - Reacting with the opposite sign flips it in place
    """

    id: ReactionId
    user_id: UserId
    content_type: ContentType
    content_id: UUID
    is_like: bool
    parent_id: Optional[UUID] = None  # Stored for nested reactions, not used yet
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def ref(self) -> ContentRef:
        return ContentRef(content_type=self.content_type, content_id=self.content_id)
