"""Mock event providers for testing."""

from dishka import Scope, provide

from ask.adapter.events import InMemoryEventPublisher
from ask.domain.service import EventPublisher
from ask.util.di.infrastructure.events import EventsProvider


class MockEventsProvider(EventsProvider):
    """Mock events provider that records published events."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_event_publisher(self) -> EventPublisher:
        return InMemoryEventPublisher()
