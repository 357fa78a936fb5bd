"""Mock providers for testing."""

from .cache import MockCacheProvider
from .events import MockEventsProvider
from .persistence import MockPersistenceProvider
from .search import MockSearchProvider
from .container import build_test_container

__all__ = [
    "MockCacheProvider",
    "MockEventsProvider",
    "MockPersistenceProvider",
    "MockSearchProvider",
    "build_test_container",
]
