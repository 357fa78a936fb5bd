"""In-process tagged cache.

Used when Redis is disabled and in tests. Values are stored as JSON text so
callers never share mutable state with the cache.
"""

import json
import time
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

import logfire

from ask.domain.service.cache_service import CacheTagStore


class InMemoryCacheTagStore(CacheTagStore):
    """CacheTagStore held in dictionaries."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        # (namespace, key) -> (payload, expires_at, tags)
        self._entries: dict[tuple[str, str], tuple[str, float, frozenset[str]]] = {}
        self._tags: dict[str, set[tuple[str, str]]] = {}

    async def get_or_compute(
        self,
        namespace: str,
        key: str,
        tags: Iterable[str],
        ttl: int,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        entry_id = (namespace, key)
        entry = self._entries.get(entry_id)
        if entry is not None:
            payload, expires_at, _ = entry
            if expires_at > self._clock():
                return json.loads(payload)
            self._remove(entry_id)

        value = await compute()
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            logfire.warn("Cache write failed", entry=f"{namespace}:{key}", error=str(e))
            return value

        # Replace on write: drop the old entry's tag memberships first
        self._remove(entry_id)
        tag_set = frozenset(tags)
        self._entries[entry_id] = (payload, self._clock() + ttl, tag_set)
        for tag in tag_set:
            self._tags.setdefault(tag, set()).add(entry_id)
        return value

    async def invalidate(self, tags: Iterable[str]) -> int:
        doomed: set[tuple[str, str]] = set()
        for tag in set(tags):
            doomed |= self._tags.get(tag, set())
        for entry_id in doomed:
            self._remove(entry_id)
        return len(doomed)

    async def flush(self) -> None:
        self._entries.clear()
        self._tags.clear()

    def contains(self, namespace: str, key: str) -> bool:
        """Whether a live entry exists."""
        entry = self._entries.get((namespace, key))
        return entry is not None and entry[1] > self._clock()

    def tag_members(self, tag: str) -> set[tuple[str, str]]:
        """Entries registered under a tag (empty when the bucket is gone)."""
        return set(self._tags.get(tag, set()))

    def _remove(self, entry_id: tuple[str, str]) -> None:
        entry = self._entries.pop(entry_id, None)
        if entry is None:
            return
        for tag in entry[2]:
            bucket = self._tags.get(tag)
            if bucket is None:
                continue
            bucket.discard(entry_id)
            if not bucket:
                del self._tags[tag]
