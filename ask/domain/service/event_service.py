"""Domain event publishing interface."""

from abc import ABC, abstractmethod

from ask.domain.model.event import DomainEvent


class EventPublisher(ABC):
    """Hands domain events to the real-time transport.

    Publishing is fire-and-forget: implementations must not raise into the
    mutation that produced the event.
    """

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Publish a single event."""
        pass
