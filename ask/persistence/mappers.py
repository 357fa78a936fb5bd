"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ask.domain.model import (
    Answer,
    Comment,
    Question,
    Reaction,
    Solution,
    SolutionStep,
    User,
)
from ask.domain.value import (
    AnswerId,
    CommentId,
    ContentType,
    DurationType,
    QuestionId,
    ReactionId,
    SolutionId,
    UserId,
)
from ask.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        name=row.get("name"),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model."""
    return Question(
        id=QuestionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        is_solved=row["is_solved"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    return answer.model_dump()


def row_to_solution(
    row: Dict[str, Any], steps: list[SolutionStep] | None = None
) -> Solution:
    """Convert database row (and its step rows) to Solution domain model."""
    return Solution(
        id=SolutionId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        description=row["description"],
        tags=list(row.get("tags") or []),
        duration=row["duration"],
        duration_type=DurationType(row["duration_type"]),
        steps=steps or [],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def solution_to_dict(solution: Solution) -> Dict[str, Any]:
    """Convert Solution domain model to database dict.

    Enum values are stored as their string value.
    """
    data = solution.model_dump(exclude={"steps"})
    data["duration_type"] = solution.duration_type.value
    return data


def row_to_solution_step(row: Dict[str, Any]) -> SolutionStep:
    return SolutionStep(position=row["position"], heading=row["heading"], body=row["body"])


def solution_step_to_dict(solution_id: UUID, step: SolutionStep) -> Dict[str, Any]:
    return {"solution_id": solution_id, **step.model_dump()}


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content_type=ContentType(row["content_type"]),
        content_id=_uuid(row["content_id"]),
        is_like=row["is_like"],
        parent_id=_optional_uuid(row.get("parent_id")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    data = reaction.model_dump()
    data["content_type"] = reaction.content_type.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content_type=ContentType(row["content_type"]),
        content_id=_uuid(row["content_id"]),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    data = comment.model_dump()
    data["content_type"] = comment.content_type.value
    return data
