"""Redis-backed tagged cache.

Key layout under the configured prefix:

    {prefix}:entry:{namespace}:{key}       JSON value, expires with the TTL
    {prefix}:entry-tags:{namespace}:{key}  set of the entry's tags
    {prefix}:tag:{tag}                     set of "{namespace}:{key}" members

The cache is disposable: any failure degrades to recomputing from storage.
"""

import json
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

import logfire
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ask.adapter.error import CacheProviderError
from ask.domain.service.cache_service import CacheTagStore

_MISS = object()


class RedisCacheTagStore(CacheTagStore):
    """CacheTagStore on redis.asyncio."""

    def __init__(self, redis: Redis, key_prefix: str = "ask") -> None:
        """Initialize the store.

        Args:
            redis: Client created with decode_responses=True
            key_prefix: Namespace for every key written
        """
        self.redis = redis
        self.key_prefix = key_prefix

    def _entry_key(self, member: str) -> str:
        return f"{self.key_prefix}:entry:{member}"

    def _entry_tags_key(self, member: str) -> str:
        return f"{self.key_prefix}:entry-tags:{member}"

    def _tag_key(self, tag: str) -> str:
        return f"{self.key_prefix}:tag:{tag}"

    async def get_or_compute(
        self,
        namespace: str,
        key: str,
        tags: Iterable[str],
        ttl: int,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        member = f"{namespace}:{key}"

        cached = await self._read(member)
        if cached is not _MISS:
            return cached

        value = await compute()
        await self._write(member, value, sorted(set(tags)), ttl)
        return value

    async def invalidate(self, tags: Iterable[str]) -> int:
        tag_list = sorted(set(tags))
        if not tag_list:
            return 0

        with logfire.span("cache.invalidate", tags=tag_list):
            try:
                members: set[str] = set()
                for tag in tag_list:
                    members |= await self.redis.smembers(self._tag_key(tag))

                entry_tags: dict[str, set[str]] = {}
                for member in members:
                    entry_tags[member] = await self.redis.smembers(
                        self._entry_tags_key(member)
                    )

                # Only the members read above are removed; a bucket is never
                # deleted wholesale, so entries written meanwhile stay indexed.
                async with self.redis.pipeline(transaction=True) as pipe:
                    for member in members:
                        for tag in entry_tags[member] | set(tag_list):
                            pipe.srem(self._tag_key(tag), member)
                        pipe.delete(self._entry_key(member), self._entry_tags_key(member))
                    await pipe.execute()
            except RedisError as e:
                logfire.error("Cache invalidation failed", tags=tag_list, error=str(e))
                return 0

            logfire.debug("Cache invalidated", tags=tag_list, entries=len(members))
            return len(members)

    async def flush(self) -> None:
        """Delete every key under the prefix.

        Raises:
            CacheProviderError: If Redis cannot be reached
        """
        with logfire.span("cache.flush", prefix=self.key_prefix):
            try:
                batch: list[str] = []
                async for cache_key in self.redis.scan_iter(match=f"{self.key_prefix}:*"):
                    batch.append(cache_key)
                    if len(batch) >= 500:
                        await self.redis.delete(*batch)
                        batch = []
                if batch:
                    await self.redis.delete(*batch)
            except RedisError as e:
                logfire.error("Cache flush failed", error=str(e))
                raise CacheProviderError(f"Cache flush failed: {e}")

    async def _read(self, member: str) -> Any:
        """Return the cached value, or ``_MISS`` when there is none usable.

        A stored JSON ``null`` is a hit.
        """
        try:
            raw = await self.redis.get(self._entry_key(member))
        except RedisError as e:
            logfire.warn("Cache read failed, recomputing", entry=member, error=str(e))
            return _MISS

        if raw is None:
            return _MISS
        try:
            return json.loads(raw)
        except ValueError:
            logfire.warn("Cache entry is not valid JSON, recomputing", entry=member)
            return _MISS

    async def _write(self, member: str, value: Any, tags: list[str], ttl: int) -> None:
        try:
            payload = json.dumps(value)
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(self._entry_key(member), payload, ex=ttl)
                pipe.delete(self._entry_tags_key(member))
                if tags:
                    pipe.sadd(self._entry_tags_key(member), *tags)
                    pipe.expire(self._entry_tags_key(member), ttl)
                for tag in tags:
                    tag_key = self._tag_key(tag)
                    pipe.sadd(tag_key, member)
                    # A bucket outlives every entry it indexes, then expires.
                    pipe.expire(tag_key, ttl, nx=True)
                    pipe.expire(tag_key, ttl, gt=True)
                await pipe.execute()
        except (RedisError, TypeError, ValueError) as e:
            logfire.warn("Cache write failed", entry=member, error=str(e))
