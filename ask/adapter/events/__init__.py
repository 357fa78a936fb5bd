"""Domain event publisher adapters."""

from .publisher import InMemoryEventPublisher, LogfireEventPublisher

__all__ = ["InMemoryEventPublisher", "LogfireEventPublisher"]
