"""Solution repository interface."""

from ask.domain.model.solution import Solution
from ask.domain.repository.content import ContentRepository


class SolutionRepository(ContentRepository[Solution]):
    """Repository for Solution aggregate."""
