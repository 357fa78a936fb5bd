"""Content interaction routes: reactions, comments and deletion."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from ask.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from ask.application.usecase.content import (
    DeleteContentRequest,
    DeleteContentResponse,
    DeleteContentUseCase,
)
from ask.application.usecase.reaction import (
    SetReactionRequest,
    SetReactionResponse,
    SetReactionUseCase,
)
from ask.domain.service import SessionService
from ask.domain.value import ContentType
from ask.interface.api.auth import require_user_id

router = APIRouter(tags=["content"], route_class=DishkaRoute)


class SetReactionAPIRequest(BaseModel):
    """API request for reacting to content."""

    is_like: bool


class CreateCommentAPIRequest(BaseModel):
    """API request for commenting (length is checked per content type)."""

    body: str
    parent_id: UUID | None = None


@router.post(
    "/content/{content_type}/{content_id}/reaction",
    response_model=SetReactionResponse,
)
async def set_reaction(
    content_type: ContentType,
    content_id: UUID,
    request: SetReactionAPIRequest,
    set_reaction_use_case: FromDishka[SetReactionUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> SetReactionResponse:
    """Like or dislike a question, answer or solution.

    Sending the same reaction twice removes it; sending the opposite one
    switches it. Requires authentication.

    Example:
        POST /content/solution/123e4567-e89b-12d3-a456-426614174000/reaction
        {"is_like": true}

        Response:
        {"content_type": "solution", "content_id": "...", "likes": 1,
         "dislikes": 0, "reaction": "like"}
    """
    user_id = require_user_id(sessions, auth_token)

    return await set_reaction_use_case.execute(
        SetReactionRequest(
            content_type=content_type,
            content_id=str(content_id),
            user_id=user_id,
            is_like=request.is_like,
        )
    )


@router.get(
    "/content/{content_type}/{content_id}/comments",
    response_model=ListCommentsResponse,
)
async def list_comments(
    content_type: ContentType,
    content_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """Get comment threads of an item, newest thread first."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(content_type=content_type, content_id=str(content_id))
    )


@router.post(
    "/content/{content_type}/{content_id}/comments",
    response_model=CreateCommentResponse,
    status_code=201,
)
async def create_comment(
    content_type: ContentType,
    content_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an item, or reply to one of its comments.

    Requires authentication.
    """
    user_id = require_user_id(sessions, auth_token)

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            content_type=content_type,
            content_id=str(content_id),
            author_id=user_id,
            body=request.body,
            parent_id=str(request.parent_id) if request.parent_id else None,
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete one's own comment together with all replies beneath it."""
    user_id = require_user_id(sessions, auth_token)

    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
    )


@router.delete(
    "/content/{content_type}/{content_id}", response_model=DeleteContentResponse
)
async def delete_content(
    content_type: ContentType,
    content_id: UUID,
    delete_content_use_case: FromDishka[DeleteContentUseCase],
    sessions: FromDishka[SessionService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteContentResponse:
    """Soft delete one's own question, answer or solution."""
    user_id = require_user_id(sessions, auth_token)

    return await delete_content_use_case.execute(
        DeleteContentRequest(
            content_type=content_type, content_id=str(content_id), user_id=user_id
        )
    )
