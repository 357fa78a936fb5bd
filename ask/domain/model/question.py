"""Question aggregate root."""

from typing import ClassVar

from pydantic import Field

from ask.domain.model.content import TaggedContentItem
from ask.domain.value import ContentType, QuestionId


class Question(TaggedContentItem):
    """A question asked by a user.

    is_solved mirrors whether one of its answers is accepted.
    """

    content_type: ClassVar[ContentType] = ContentType.QUESTION
    searchable_fields: ClassVar[tuple[str, ...]] = ("title", "description")

    id: QuestionId
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=10000)
    is_solved: bool = False

    @property
    def search_title(self) -> str:
        return self.title

    @property
    def search_body(self) -> str:
        return self.description
