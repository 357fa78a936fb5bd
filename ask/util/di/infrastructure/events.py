"""Domain event infrastructure providers."""

from dishka import Scope, provide

from ask.adapter.events import LogfireEventPublisher
from ask.domain.service import EventPublisher
from ask.util.di.base import ProviderBase


class EventsProvider(ProviderBase):
    """Events component base."""

    __mock_component__ = "events"


class ProdEventsProvider(EventsProvider):
    """Production events provider emitting events through Logfire."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_event_publisher(self) -> EventPublisher:
        return LogfireEventPublisher()
