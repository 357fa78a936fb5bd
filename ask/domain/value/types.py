"""Domain value objects for Ask.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from ask.domain.value.common import RootValueObject, ValueObject


class ContentType(str, Enum):
    """Type tag for content that can be reacted to, commented on and searched."""

    QUESTION = "question"
    ANSWER = "answer"
    SOLUTION = "solution"


class DurationType(str, Enum):
    """Unit of a solution's estimated duration."""

    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"


class SearchPath(str, Enum):
    """Which backend produced a search result."""

    INDEXED = "indexed"
    FALLBACK = "fallback"


class ContentRef(ValueObject):
    """Stable reference to a reactable, commentable content item."""

    content_type: ContentType
    content_id: UUID

    def __str__(self) -> str:
        return f"{self.content_type.value}:{self.content_id}"


class ReactionCounts(ValueObject):
    """Like and dislike totals for one content item."""

    likes: int = 0
    dislikes: int = 0


class TagName(RootValueObject[str]):
    """Tag attached to questions and solutions.

    Lowercase, alphanumeric with hyphens, 1-30 characters.
    Examples: 'python', 'home-repair', 'sql'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name format."""
        v = v.strip().lower()
        if not re.match(r"^[a-z0-9][a-z0-9-]{0,29}$", v):
            raise ValueError(
                "Tag name must be 1-30 characters, lowercase, alphanumeric with hyphens"
            )
        return v


class Handle(RootValueObject[str]):
    """User handle shown on profiles and content."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v
