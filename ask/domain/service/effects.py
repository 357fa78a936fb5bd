"""Side effects of a mutation: cache invalidation and domain events.

Services record effects here instead of calling the cache and the publisher
directly. In deferred mode nothing leaves the process until ``flush`` runs
after the surrounding transaction commits; a rolled back transaction
``discard``s them.
"""

from collections.abc import Iterable

import logfire

from ask.domain.model.event import DomainEvent

from .base import Service
from .cache_service import CacheTagStore
from .event_service import EventPublisher


class MutationEffects(Service):
    """Per-unit-of-work queue of cache tags and domain events."""

    def __init__(
        self,
        cache_store: CacheTagStore,
        event_publisher: EventPublisher,
        deferred: bool = True,
    ) -> None:
        """Initialize the queue.

        Args:
            cache_store: Tagged cache to invalidate
            event_publisher: Event sink
            deferred: Hold effects until ``flush``; otherwise apply at once
        """
        self.cache_store = cache_store
        self.event_publisher = event_publisher
        self.deferred = deferred
        self._tags: set[str] = set()
        self._events: list[DomainEvent] = []

    @property
    def pending(self) -> bool:
        return bool(self._tags or self._events)

    async def invalidate(self, tags: Iterable[str]) -> None:
        if self.deferred:
            self._tags.update(tags)
        else:
            await self.cache_store.invalidate(tags)

    async def publish(self, event: DomainEvent) -> None:
        if self.deferred:
            self._events.append(event)
        else:
            await self.event_publisher.publish(event)

    async def flush(self) -> None:
        """Apply queued effects: one invalidation, then events in order."""
        tags, events = self._tags, self._events
        self._tags, self._events = set(), []

        if tags:
            await self.cache_store.invalidate(tags)
        for event in events:
            try:
                await self.event_publisher.publish(event)
            except Exception as e:
                logfire.error(
                    "Event publish failed after commit",
                    event=type(event).__name__,
                    error=str(e),
                )

    def discard(self) -> None:
        """Drop queued effects of a unit of work that did not commit."""
        if self.pending:
            logfire.debug(
                "Discarding effects of rolled back transaction",
                tags=len(self._tags),
                events=len(self._events),
            )
        self._tags, self._events = set(), []
