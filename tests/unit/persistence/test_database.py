"""Unit tests for the per-request transaction."""

from uuid import uuid4

import pytest

from ask.domain.model import ContentDeleted
from ask.domain.service import CacheTagStore, EventPublisher, MutationEffects
from ask.domain.value import ContentType
from ask.persistence.database import transaction


class FakeSession:
    def __init__(self, log: list) -> None:
        self.log = log

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.log.append(("close",))
        return False

    async def commit(self) -> None:
        self.log.append(("commit",))

    async def rollback(self) -> None:
        self.log.append(("rollback",))


class RecordingCacheStore(CacheTagStore):
    def __init__(self, log: list) -> None:
        self.log = log

    async def get_or_compute(self, namespace, key, tags, ttl, compute):
        return await compute()

    async def invalidate(self, tags) -> int:
        self.log.append(("invalidate", set(tags)))
        return 0

    async def flush(self) -> None:
        pass


class RecordingPublisher(EventPublisher):
    def __init__(self, log: list) -> None:
        self.log = log

    async def publish(self, event) -> None:
        self.log.append(("publish", event.name))


def make_effects(log: list) -> MutationEffects:
    return MutationEffects(RecordingCacheStore(log), RecordingPublisher(log))


async def mutate(effects: MutationEffects) -> None:
    await effects.invalidate({"questions"})
    await effects.publish(
        ContentDeleted(content_type=ContentType.QUESTION, content_id=uuid4())
    )


class TestTransaction:
    @pytest.mark.asyncio
    async def test_effects_follow_commit(self):
        # Arrange
        log: list = []
        effects = make_effects(log)

        # Act
        async with transaction(lambda: FakeSession(log), effects):
            await mutate(effects)
            assert log == []

        # Assert
        assert log == [
            ("commit",),
            ("close",),
            ("invalidate", {"questions"}),
            ("publish", "content_deleted"),
        ]

    @pytest.mark.asyncio
    async def test_rollback_discards_effects(self):
        log: list = []
        effects = make_effects(log)

        with pytest.raises(RuntimeError):
            async with transaction(lambda: FakeSession(log), effects):
                await mutate(effects)
                raise RuntimeError("constraint violated")

        assert log == [("rollback",), ("close",)]
        assert not effects.pending
