"""Unit tests for RedisCacheTagStore failure handling.

The Redis client is mocked; every failure must degrade to a recompute
rather than reach the caller.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import fakeredis
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from ask.adapter.cache import RedisCacheTagStore
from ask.adapter.error import CacheProviderError


def make_redis():
    """Mock redis.asyncio client with a working pipeline."""
    redis = MagicMock()
    redis.get = AsyncMock(return_value=None)
    redis.smembers = AsyncMock(return_value=set())
    redis.delete = AsyncMock()

    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    redis.pipeline.return_value.__aenter__.return_value = pipe
    return redis, pipe


class TestRead:
    @pytest.mark.asyncio
    async def test_hit_skips_compute(self):
        redis, _ = make_redis()
        redis.get.return_value = json.dumps({"rows": [1]})
        store = RedisCacheTagStore(redis, "t")
        compute = AsyncMock()

        value = await store.get_or_compute("view", "k", {"a"}, 60, compute)

        assert value == {"rows": [1]}
        compute.assert_not_awaited()
        redis.get.assert_awaited_once_with("t:entry:view:k")

    @pytest.mark.asyncio
    async def test_read_failure_recomputes(self):
        redis, _ = make_redis()
        redis.get.side_effect = RedisConnectionError("refused")
        store = RedisCacheTagStore(redis, "t")

        value = await store.get_or_compute(
            "view", "k", {"a"}, 60, AsyncMock(return_value=[1, 2])
        )

        assert value == [1, 2]

    @pytest.mark.asyncio
    async def test_corrupt_entry_recomputes(self):
        redis, _ = make_redis()
        redis.get.return_value = "{not json"
        store = RedisCacheTagStore(redis, "t")

        value = await store.get_or_compute(
            "view", "k", {"a"}, 60, AsyncMock(return_value="fresh")
        )

        assert value == "fresh"


class TestWrite:
    @pytest.mark.asyncio
    async def test_miss_writes_entry_and_tag_index(self):
        # Arrange
        redis, pipe = make_redis()
        store = RedisCacheTagStore(redis, "t")

        # Act
        await store.get_or_compute("view", "k", {"b", "a"}, 60, AsyncMock(return_value=1))

        # Assert
        pipe.set.assert_called_once_with("t:entry:view:k", "1", ex=60)
        pipe.sadd.assert_any_call("t:entry-tags:view:k", "a", "b")
        pipe.sadd.assert_any_call("t:tag:a", "view:k")
        pipe.sadd.assert_any_call("t:tag:b", "view:k")
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_write_failure_still_returns_value(self):
        redis, pipe = make_redis()
        pipe.execute.side_effect = RedisConnectionError("refused")
        store = RedisCacheTagStore(redis, "t")

        value = await store.get_or_compute(
            "view", "k", {"a"}, 60, AsyncMock(return_value={"ok": True})
        )

        assert value == {"ok": True}

    @pytest.mark.asyncio
    async def test_compute_error_propagates(self):
        redis, pipe = make_redis()
        store = RedisCacheTagStore(redis, "t")

        with pytest.raises(RuntimeError):
            await store.get_or_compute(
                "view", "k", {"a"}, 60, AsyncMock(side_effect=RuntimeError("db down"))
            )

        pipe.execute.assert_not_awaited()


class TestInvalidate:
    @pytest.mark.asyncio
    async def test_removes_members_of_every_tag(self):
        # Arrange
        redis, pipe = make_redis()
        index = {
            "t:tag:a": {"view:one"},
            "t:tag:b": {"view:one", "view:two"},
            "t:entry-tags:view:one": {"a", "b"},
            "t:entry-tags:view:two": {"b"},
        }
        redis.smembers.side_effect = lambda key: set(index.get(key, set()))
        store = RedisCacheTagStore(redis, "t")

        # Act
        removed = await store.invalidate({"a", "b"})

        # Assert
        assert removed == 2
        pipe.delete.assert_any_call("t:entry:view:one", "t:entry-tags:view:one")
        pipe.delete.assert_any_call("t:entry:view:two", "t:entry-tags:view:two")
        pipe.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_tags_is_a_no_op(self):
        redis, pipe = make_redis()
        store = RedisCacheTagStore(redis, "t")

        assert await store.invalidate(set()) == 0
        redis.smembers.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self):
        redis, _ = make_redis()
        redis.smembers.side_effect = RedisConnectionError("refused")
        store = RedisCacheTagStore(redis, "t")

        assert await store.invalidate({"a"}) == 0


class TestFlush:
    @pytest.mark.asyncio
    async def test_deletes_prefixed_keys(self):
        redis, _ = make_redis()
        keys = ["t:entry:v:k", "t:tag:a"]

        async def scan(match):
            assert match == "t:*"
            for key in keys:
                yield key

        redis.scan_iter = scan
        store = RedisCacheTagStore(redis, "t")

        await store.flush()

        redis.delete.assert_awaited_once_with(*keys)

    @pytest.mark.asyncio
    async def test_failure_raises_cache_provider_error(self):
        redis, _ = make_redis()

        async def scan(match):
            raise RedisConnectionError("refused")
            yield  # pragma: no cover

        redis.scan_iter = scan
        store = RedisCacheTagStore(redis, "t")

        with pytest.raises(CacheProviderError):
            await store.flush()


def make_fake_store() -> tuple[RedisCacheTagStore, fakeredis.FakeAsyncRedis]:
    redis = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
    return RedisCacheTagStore(redis, "t"), redis


class TestAgainstInMemoryRedis:
    """Behaviour against an in-memory Redis server rather than call mocks."""

    @pytest.mark.asyncio
    async def test_cached_none_is_a_hit(self):
        store, _ = make_fake_store()
        compute = AsyncMock(return_value=None)

        first = await store.get_or_compute("recent", "k", {"questions"}, 60, compute)
        second = await store.get_or_compute("recent", "k", {"questions"}, 60, compute)

        assert first is None
        assert second is None
        compute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_tag_bucket_expires_no_earlier_than_its_entries(self):
        # Arrange
        store, redis = make_fake_store()

        # Act
        await store.get_or_compute("recent", "a", {"questions"}, 30, AsyncMock(return_value=1))
        await store.get_or_compute("recent", "b", {"questions"}, 300, AsyncMock(return_value=2))
        await store.get_or_compute("recent", "c", {"questions"}, 60, AsyncMock(return_value=3))

        # Assert
        bucket_ttl = await redis.ttl("t:tag:questions")
        assert 60 < bucket_ttl <= 300

    @pytest.mark.asyncio
    async def test_entry_written_during_invalidation_stays_invalidatable(self):
        # Arrange
        store, redis = make_fake_store()
        await store.get_or_compute("recent", "old", {"questions"}, 60, AsyncMock(return_value="v"))

        read_members = redis.smembers
        racing = {"done": False}

        async def smembers_with_concurrent_write(key):
            members = await read_members(key)
            if not racing["done"]:
                racing["done"] = True
                await store.get_or_compute(
                    "recent", "k", {"questions"}, 60, AsyncMock(return_value="stale")
                )
            return members

        redis.smembers = smembers_with_concurrent_write

        # Act
        removed = await store.invalidate({"questions"})

        # Assert
        assert removed == 1
        assert "recent:k" in await read_members("t:tag:questions")
        assert "recent:old" not in await read_members("t:tag:questions")

        await store.invalidate({"questions"})
        value = await store.get_or_compute(
            "recent", "k", {"questions"}, 60, AsyncMock(return_value="fresh")
        )
        assert value == "fresh"
