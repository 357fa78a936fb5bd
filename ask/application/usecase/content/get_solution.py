"""Get solution use case."""

from uuid import UUID

from pydantic import BaseModel

from ask.domain.service import ContentService
from ask.domain.value import SolutionId

from .create_content import SolutionResponse


class GetSolutionRequest(BaseModel):
    """Get solution request."""

    solution_id: str  # UUID string


class GetSolutionUseCase:
    """Use case for reading a solution together with its steps."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: GetSolutionRequest) -> SolutionResponse:
        """Load a live solution.

        Raises:
            NotFoundError: If the solution is missing or soft-deleted
        """
        solution = await self.content_service.get_solution(
            SolutionId(UUID(request.solution_id))
        )
        return SolutionResponse.from_solution(solution)
