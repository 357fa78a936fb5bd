"""Create question, answer and solution use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ask.domain.model import Solution
from ask.domain.service import ContentService
from ask.domain.value import DurationType, QuestionId, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    author_id: str  # From authenticated user
    title: str
    description: str = ""
    tags: list[str] = []


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    author_id: str
    title: str
    description: str
    tags: list[str]
    is_solved: bool
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Raises:
            ValidationError: If a field is invalid
        """
        question = await self.content_service.create_question(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            description=request.description,
            tags=request.tags,
        )
        return CreateQuestionResponse(
            question_id=str(question.id),
            author_id=str(question.author_id),
            title=question.title,
            description=question.description,
            tags=question.tags,
            is_solved=question.is_solved,
            created_at=question.created_at,
        )


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    author_id: str  # From authenticated user
    question_id: str  # UUID string
    content: str


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    author_id: str
    content: str
    is_accepted: bool
    created_at: datetime


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Raises:
            NotFoundError: If the question is missing or deleted
            ValidationError: If the content is invalid
        """
        answer = await self.content_service.create_answer(
            author_id=UserId(UUID(request.author_id)),
            question_id=QuestionId(UUID(request.question_id)),
            content=request.content,
        )
        return CreateAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            author_id=str(answer.author_id),
            content=answer.content,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
        )


class SolutionStepInput(BaseModel):
    """One step as submitted by the author."""

    heading: str
    body: str


class SolutionStepOutput(BaseModel):
    """One numbered step of a solution."""

    position: int
    heading: str
    body: str


class CreateSolutionRequest(BaseModel):
    """Create solution request."""

    author_id: str  # From authenticated user
    title: str
    description: str = ""
    tags: list[str] = []
    duration: int = 0
    duration_type: DurationType = DurationType.MINUTES
    steps: list[SolutionStepInput] = []


class SolutionResponse(BaseModel):
    """A solution with its steps in order."""

    solution_id: str
    author_id: str
    title: str
    description: str
    tags: list[str]
    duration: int
    duration_type: DurationType
    steps: list[SolutionStepOutput]
    created_at: datetime

    @classmethod
    def from_solution(cls, solution: Solution) -> "SolutionResponse":
        return cls(
            solution_id=str(solution.id),
            author_id=str(solution.author_id),
            title=solution.title,
            description=solution.description,
            tags=solution.tags,
            duration=solution.duration,
            duration_type=solution.duration_type,
            steps=[
                SolutionStepOutput(
                    position=step.position, heading=step.heading, body=step.body
                )
                for step in solution.steps
            ],
            created_at=solution.created_at,
        )


class CreateSolutionUseCase:
    """Use case for publishing a step-by-step solution."""

    def __init__(self, content_service: ContentService) -> None:
        self.content_service = content_service

    async def execute(self, request: CreateSolutionRequest) -> SolutionResponse:
        solution = await self.content_service.create_solution(
            author_id=UserId(UUID(request.author_id)),
            title=request.title,
            description=request.description,
            tags=request.tags,
            duration=request.duration,
            duration_type=request.duration_type,
            steps=[(step.heading, step.body) for step in request.steps],
        )
        return SolutionResponse.from_solution(solution)
