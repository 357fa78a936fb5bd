"""Comment domain service."""

from collections import defaultdict
from uuid import UUID, uuid4

import logfire

from ask.config import CommentSettings
from ask.domain.error import ForbiddenError, NotFoundError, ValidationError
from ask.domain.model import Comment, CommentAdded, CommentNode
from ask.domain.repository import CommentRepository
from ask.domain.value import CommentId, ContentRef, ContentType, UserId

from .base import Service
from .cache_service import content_tags
from .effects import MutationEffects
from .content_service import ContentService


class CommentService(Service):
    """Domain service for threaded comments on any content item."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        content_service: ContentService,
        effects: MutationEffects,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_service: Content lookup
            effects: Post-commit cache invalidation and events
            comment_settings: Body length limits
        """
        self.comment_repository = comment_repository
        self.content_service = content_service
        self.effects = effects
        self.settings = comment_settings

    def max_body_length(self, content_type: ContentType) -> int:
        """Longest comment body accepted on the given content type."""
        if content_type == ContentType.ANSWER:
            return self.settings.answer_body_max_length
        return self.settings.body_max_length

    async def add_comment(
        self,
        author_id: UserId,
        content_type: ContentType,
        content_id: UUID,
        body: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Comment on an item or reply to another comment.

        Args:
            author_id: Comment author
            content_type: Type of the commented item
            content_id: ID of the commented item
            body: Comment text
            parent_id: Comment being replied to (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the body length is out of range or the parent
                belongs to another item
            NotFoundError: If the item or the parent comment does not exist
        """
        ref = ContentRef(content_type=content_type, content_id=content_id)
        with logfire.span(
            "comment_service.add_comment",
            ref=str(ref),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            text = body.strip()
            max_length = self.max_body_length(content_type)
            if not text:
                raise ValidationError(field="body", message="Comment cannot be empty")
            if len(text) > max_length:
                raise ValidationError(
                    field="body",
                    message=f"Comment must be at most {max_length} characters",
                )

            await self.content_service.get_content(ref)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.deleted_at is not None:
                    logfire.warn("Reply to missing comment", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))
                if parent.ref != ref:
                    raise ValidationError(
                        field="parent_id",
                        message="Parent comment belongs to a different item",
                    )

            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content_type=content_type,
                content_id=content_id,
                body=text,
                parent_id=parent_id,
            )
            saved = await self.comment_repository.save(comment)

            await self.effects.invalidate(content_tags(content_type))
            await self.effects.publish(
                CommentAdded(
                    comment_id=saved.id, content_type=content_type, content_id=content_id
                )
            )
            logfire.info("Comment added", comment_id=str(saved.id), ref=str(ref))
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.deleted_at is not None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_roots(
        self, content_type: ContentType, content_id: UUID
    ) -> list[CommentNode]:
        """Get the comment threads of an item.

        Roots come newest first; replies at every level come oldest first.

        Raises:
            NotFoundError: If the item is missing or deleted
        """
        ref = ContentRef(content_type=content_type, content_id=content_id)
        with logfire.span("comment_service.list_roots", ref=str(ref)):
            await self.content_service.get_content(ref)
            comments = await self.comment_repository.find_by_content(ref)

            children: dict[CommentId | None, list[Comment]] = defaultdict(list)
            for comment in sorted(comments, key=lambda c: c.created_at):
                children[comment.parent_id].append(comment)

            def build(comment: Comment) -> CommentNode:
                return CommentNode(
                    comment=comment,
                    children=[build(child) for child in children[comment.id]],
                )

            roots = sorted(children[None], key=lambda c: c.created_at, reverse=True)
            return [build(root) for root in roots]

    async def delete_comment(self, comment_id: CommentId, requester_id: UserId) -> int:
        """Delete a comment and all replies beneath it.

        Args:
            comment_id: Comment to delete
            requester_id: User asking for the deletion

        Returns:
            Number of comments removed

        Raises:
            NotFoundError: If comment not found
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.get_comment(comment_id)
            if comment.author_id != requester_id:
                logfire.warn(
                    "Comment delete by non-author",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "delete", "comment", str(comment_id), str(requester_id)
                )

            removed = await self.comment_repository.delete_subtree(comment_id)
            await self.effects.invalidate(content_tags(comment.content_type))
            logfire.info("Comment deleted", comment_id=str(comment_id), removed=removed)
            return removed
