"""Content lifecycle use cases."""

from .create_content import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    CreateSolutionRequest,
    CreateSolutionUseCase,
    SolutionResponse,
    SolutionStepInput,
    SolutionStepOutput,
)
from .delete_content import (
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
    PurgeDeletedContentRequest,
    PurgeDeletedContentResponse,
    PurgeDeletedContentUseCase,
)
from .get_solution import GetSolutionRequest, GetSolutionUseCase

__all__ = [
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "CreateSolutionRequest",
    "CreateSolutionUseCase",
    "GetSolutionRequest",
    "GetSolutionUseCase",
    "DeleteContentRequest",
    "DeleteContentResponse",
    "DeleteContentUseCase",
    "PurgeDeletedContentRequest",
    "PurgeDeletedContentResponse",
    "PurgeDeletedContentUseCase",
    "SolutionResponse",
    "SolutionStepInput",
    "SolutionStepOutput",
]
