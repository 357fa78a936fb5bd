"""In-memory comment repository for testing."""

from typing import Optional

from ask.domain.model import Comment
from ask.domain.repository import CommentRepository
from ask.domain.value import CommentId, ContentRef

from .store import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        self._comments = self.db.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_content(self, ref: ContentRef) -> list[Comment]:
        comments = [
            c for c in self._comments.values() if c.ref == ref and c.deleted_at is None
        ]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        self._comments[comment.id] = comment
        return comment

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies, like ON DELETE CASCADE."""
        if comment_id not in self._comments:
            return 0
        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent = frontier.pop()
            for comment in self._comments.values():
                if comment.parent_id == parent and comment.id not in doomed:
                    doomed.add(comment.id)
                    frontier.append(comment.id)
        for doomed_id in doomed:
            del self._comments[doomed_id]
        return len(doomed)

    async def delete_by_content(self, ref: ContentRef) -> int:
        doomed = [c.id for c in self._comments.values() if c.ref == ref]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)

    async def count_by_content(self, ref: ContentRef) -> int:
        return len(await self.find_by_content(ref))
