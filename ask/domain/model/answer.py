"""Answer entity."""

from typing import ClassVar

from pydantic import Field

from ask.domain.model.content import ContentItem
from ask.domain.value import AnswerId, ContentType, QuestionId


class Answer(ContentItem):
    """An answer to a question.

    Business rules:
    - At most one answer per question is accepted (enforced by a partial
      unique index and the acceptance service)
    - Only the question owner can accept or unaccept
    """

    content_type: ClassVar[ContentType] = ContentType.ANSWER
    # Answers are not part of full-text matching
    searchable_fields: ClassVar[tuple[str, ...]] = ()

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=1, max_length=10000)
    is_accepted: bool = False

    @property
    def search_title(self) -> str:
        return self.content[:80]

    @property
    def search_body(self) -> str:
        return self.content
