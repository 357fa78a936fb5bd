"""Shared in-memory tables for the test repositories.

Repositories built on the same store see each other's writes, the way
Postgres repositories sharing a session do.
"""

import asyncio
from collections import defaultdict
from uuid import UUID

from ask.domain.model import Answer, Comment, Question, Reaction, Solution, User


class InMemoryDatabase:
    """Plain dictionaries standing in for the relational tables."""

    def __init__(self) -> None:
        self.users: dict[UUID, User] = {}
        self.questions: dict[UUID, Question] = {}
        self.answers: dict[UUID, Answer] = {}
        self.solutions: dict[UUID, Solution] = {}
        self.reactions: dict[UUID, Reaction] = {}
        self.comments: dict[UUID, Comment] = {}
        self.row_locks: defaultdict[UUID, asyncio.Lock] = defaultdict(asyncio.Lock)
        self.lock_owners: dict[UUID, asyncio.Task] = {}

    async def lock_row(self, row_id: UUID) -> None:
        """Hold a row lock until the calling task finishes.

        A task stands in for a request's transaction, so the lock is released
        when the request ends, like ``SELECT ... FOR UPDATE`` until commit.
        Re-locking a row the task already holds is a no-op.
        """
        task = asyncio.current_task()
        if task is None or self.lock_owners.get(row_id) is task:
            return

        await self.row_locks[row_id].acquire()
        self.lock_owners[row_id] = task
        task.add_done_callback(lambda _: self._unlock_row(row_id))

    def _unlock_row(self, row_id: UUID) -> None:
        self.lock_owners.pop(row_id, None)
        self.row_locks[row_id].release()
