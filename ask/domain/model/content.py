"""Content item base.

Questions, answers and solutions share ownership, soft deletion and the
capability to be reacted to, commented on and searched.
"""

from datetime import datetime
from typing import ClassVar, Optional
from uuid import UUID

from pydantic import Field, field_validator

from ask.domain.model.common import DomainModel
from ask.domain.value import ContentRef, ContentType, TagName, UserId

MAX_TAGS = 5


class ContentItem(DomainModel):
    """Abstract base for user-authored content.

    Subclasses declare their type tag and which fields take part in
    full-text matching.
    """

    content_type: ClassVar[ContentType]
    searchable_fields: ClassVar[tuple[str, ...]] = ()

    id: UUID
    author_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def ref(self) -> ContentRef:
        """Reference used by reactions and comments."""
        return ContentRef(content_type=self.content_type, content_id=self.id)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def search_title(self) -> str:
        """Headline shown in search results."""
        raise NotImplementedError

    @property
    def search_body(self) -> str:
        """Body text shown in search results."""
        raise NotImplementedError

    def searchable_text(self) -> str:
        """Concatenation of the searchable fields (empty when there are none)."""
        parts: list[str] = []
        for name in self.searchable_fields:
            value = getattr(self, name)
            if isinstance(value, list):
                parts.extend(str(v) for v in value)
            elif value:
                parts.append(str(value))
        return " ".join(parts)


class TaggedContentItem(ContentItem):
    """Content item carrying a short list of tags."""

    tags: list[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Normalize tags and drop duplicates, keeping order."""
        normalized: list[str] = []
        for raw in v:
            name = TagName(raw).root
            if name not in normalized:
                normalized.append(name)
        if len(normalized) > MAX_TAGS:
            raise ValueError(f"At most {MAX_TAGS} tags are allowed")
        return normalized
