"""Search result models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from ask.domain.model.common import DomainModel
from ask.domain.model.content import ContentItem
from ask.domain.value import ContentType, SearchPath, UserId


class SearchHit(DomainModel):
    """Uniform search result, whichever backend produced it."""

    content_type: ContentType
    id: UUID
    title: str
    body: str
    author_id: Optional[UserId] = None
    created_at: Optional[datetime] = None
    score: float = 0.0

    @classmethod
    def from_item(cls, item: ContentItem, score: float = 0.0) -> "SearchHit":
        """Build a hit from a stored content item."""
        return cls(
            content_type=item.content_type,
            id=item.id,
            title=item.search_title,
            body=item.search_body,
            author_id=item.author_id,
            created_at=item.created_at,
            score=score,
        )


class SearchOutcome(DomainModel):
    """Search result together with how it was obtained."""

    path: SearchPath
    degraded: bool
    reason: Optional[str] = None
    hits: list[SearchHit]
