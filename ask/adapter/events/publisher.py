"""Event publishers.

The real-time transport lives outside this service; production publishes
events as structured log records that the transport tails.
"""

from typing import TypeVar

import logfire

from ask.domain.model.event import DomainEvent
from ask.domain.service.event_service import EventPublisher

E = TypeVar("E", bound=DomainEvent)


class LogfireEventPublisher(EventPublisher):
    """Publishes each event as a structured Logfire record."""

    async def publish(self, event: DomainEvent) -> None:
        try:
            logfire.info(
                "Domain event {event_name}",
                event_name=event.name,
                payload=event.model_dump(mode="json"),
            )
        except Exception as e:
            logfire.warn("Event publish failed", event_name=event.name, error=str(e))


class InMemoryEventPublisher(EventPublisher):
    """Records published events for inspection in tests."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type[E]) -> list[E]:
        """Published events of one type, in order."""
        return [e for e in self.events if isinstance(e, event_type)]

    def clear(self) -> None:
        self.events.clear()
