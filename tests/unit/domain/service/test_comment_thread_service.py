"""Unit tests for CommentService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from ask.domain.error import ForbiddenError, NotFoundError, ValidationError
from ask.domain.model import Comment, CommentAdded
from ask.domain.repository import CommentRepository
from ask.domain.service import CommentService, ContentService, EventPublisher
from ask.domain.value import CommentId, ContentRef, ContentType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def create_question(env) -> ContentRef:
    content_service = await env.get(ContentService)
    question = await content_service.create_question(
        author_id=UserId(uuid4()), title="Which flux for copper pipes?"
    )
    return question.ref


class TestAddComment:
    """Tests for adding comments and replies."""

    @pytest.mark.asyncio
    async def test_top_level_comment(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)
        author_id = UserId(uuid4())

        # Act
        comment = await service.add_comment(
            author_id, ref.content_type, ref.content_id, "  Use a water-soluble one  "
        )

        # Assert
        assert comment.body == "Use a water-soluble one"
        assert comment.parent_id is None
        assert comment.ref == ref

    @pytest.mark.asyncio
    async def test_reply_attaches_to_parent(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)
        parent = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Parent"
        )

        # Act
        reply = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Reply", parent.id
        )

        # Assert
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "   ", "\n\t"])
    async def test_blank_body_rejected(self, unit_env, body):
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)

        with pytest.raises(ValidationError) as exc_info:
            await service.add_comment(UserId(uuid4()), ref.content_type, ref.content_id, body)

        assert exc_info.value.field == "body"

    @pytest.mark.asyncio
    async def test_body_limit_depends_on_content_type(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        content_service = await unit_env.get(ContentService)
        ref = await create_question(unit_env)
        answer = await content_service.create_answer(
            UserId(uuid4()), ref.content_id, "Any flux works"
        )
        body = "x" * (service.settings.answer_body_max_length + 1)

        # Act
        on_question = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, body
        )

        # Assert
        assert on_question.body == body
        with pytest.raises(ValidationError):
            await service.add_comment(
                UserId(uuid4()), ContentType.ANSWER, answer.id, body
            )

    @pytest.mark.asyncio
    async def test_body_at_limit_accepted(self, unit_env):
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)
        body = "y" * service.settings.body_max_length

        comment = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, body
        )

        assert len(comment.body) == service.settings.body_max_length

    @pytest.mark.asyncio
    async def test_missing_content_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.add_comment(
                UserId(uuid4()), ContentType.QUESTION, uuid4(), "Hello"
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)

        with pytest.raises(NotFoundError):
            await service.add_comment(
                UserId(uuid4()),
                ref.content_type,
                ref.content_id,
                "Orphan",
                CommentId(uuid4()),
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_item_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        first = await create_question(unit_env)
        second = await create_question(unit_env)
        parent = await service.add_comment(
            UserId(uuid4()), first.content_type, first.content_id, "On the first"
        )

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            await service.add_comment(
                UserId(uuid4()),
                second.content_type,
                second.content_id,
                "Crossing threads",
                parent.id,
            )
        assert exc_info.value.field == "parent_id"

    @pytest.mark.asyncio
    async def test_publishes_comment_added(self, unit_env):
        service = await unit_env.get(CommentService)
        publisher = await unit_env.get(EventPublisher)
        ref = await create_question(unit_env)

        comment = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Noted"
        )

        events = publisher.of_type(CommentAdded)
        assert [e.comment_id for e in events] == [comment.id]


class TestListRoots:
    """Tests for building comment threads."""

    @pytest.mark.asyncio
    async def test_roots_newest_first_replies_oldest_first(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        repository = await unit_env.get(CommentRepository)
        ref = await create_question(unit_env)
        base = datetime.now() - timedelta(hours=1)

        def comment(minutes: int, parent: Comment | None = None) -> Comment:
            return Comment(
                id=CommentId(uuid4()),
                author_id=UserId(uuid4()),
                content_type=ref.content_type,
                content_id=ref.content_id,
                body=f"at {minutes}",
                parent_id=parent.id if parent else None,
                created_at=base + timedelta(minutes=minutes),
            )

        old_root = comment(0)
        new_root = comment(10)
        late_reply = comment(20, old_root)
        early_reply = comment(5, old_root)
        nested = comment(30, early_reply)
        for c in (old_root, new_root, late_reply, early_reply, nested):
            await repository.save(c)

        # Act
        roots = await service.list_roots(ref.content_type, ref.content_id)

        # Assert
        assert [n.comment.id for n in roots] == [new_root.id, old_root.id]
        old_thread = roots[1]
        assert [n.comment.id for n in old_thread.children] == [
            early_reply.id,
            late_reply.id,
        ]
        assert [n.comment.id for n in old_thread.children[0].children] == [nested.id]
        assert roots[0].children == []

    @pytest.mark.asyncio
    async def test_no_comments_gives_empty_list(self, unit_env):
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)

        assert await service.list_roots(ref.content_type, ref.content_id) == []

    @pytest.mark.asyncio
    async def test_missing_content_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.list_roots(ContentType.SOLUTION, uuid4())


class TestDeleteComment:
    """Tests for cascading comment deletion."""

    @pytest.mark.asyncio
    async def test_deletes_comment_and_all_replies(self, unit_env):
        # Arrange
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)
        author_id = UserId(uuid4())
        root = await service.add_comment(author_id, ref.content_type, ref.content_id, "Root")
        reply = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Reply", root.id
        )
        await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Deeper", reply.id
        )
        sibling = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Sibling"
        )

        # Act
        removed = await service.delete_comment(root.id, author_id)

        # Assert
        assert removed == 3
        roots = await service.list_roots(ref.content_type, ref.content_id)
        assert [n.comment.id for n in roots] == [sibling.id]

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        service = await unit_env.get(CommentService)
        ref = await create_question(unit_env)
        comment = await service.add_comment(
            UserId(uuid4()), ref.content_type, ref.content_id, "Mine"
        )

        with pytest.raises(ForbiddenError):
            await service.delete_comment(comment.id, UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await service.delete_comment(CommentId(uuid4()), UserId(uuid4()))
