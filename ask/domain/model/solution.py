"""Solution aggregate root.

Solutions are step-by-step guides with an estimated duration. Steps belong
to the solution: they are written with it and removed with it.
"""

from typing import ClassVar

from pydantic import Field, field_validator

from ask.domain.model.common import DomainModel
from ask.domain.model.content import TaggedContentItem
from ask.domain.value import ContentType, DurationType, SolutionId

MAX_STEPS = 50


class SolutionStep(DomainModel):
    """One numbered step of a solution."""

    position: int = Field(ge=1)
    heading: str = Field(min_length=3, max_length=255)
    body: str = Field(min_length=3, max_length=10000)


class Solution(TaggedContentItem):
    """A step-by-step solution published by a user."""

    content_type: ClassVar[ContentType] = ContentType.SOLUTION
    searchable_fields: ClassVar[tuple[str, ...]] = ("title", "description", "tags")

    id: SolutionId
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(default="", max_length=10000)
    duration: int = Field(default=0, ge=0)
    duration_type: DurationType = DurationType.MINUTES
    steps: list[SolutionStep] = Field(default_factory=list, max_length=MAX_STEPS)

    @field_validator("steps")
    @classmethod
    def order_steps(cls, steps: list[SolutionStep]) -> list[SolutionStep]:
        """Keep steps sorted by position; positions must be unique."""
        positions = [step.position for step in steps]
        if len(set(positions)) != len(positions):
            raise ValueError("Step positions must be unique")
        return sorted(steps, key=lambda step: step.position)

    @property
    def search_title(self) -> str:
        return self.title

    @property
    def search_body(self) -> str:
        return self.description
