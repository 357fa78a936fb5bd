"""Infrastructure providers."""

# Import bases
from .cache import CacheProvider
from .events import EventsProvider
from .persistence import PersistenceProvider
from .search import SearchProvider

# Import implementations (needed for __subclasses__())
from .cache import ProdCacheProvider  # noqa: F401
from .events import ProdEventsProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .search import ProdSearchProvider  # noqa: F401

__all__ = [
    "CacheProvider",
    "EventsProvider",
    "PersistenceProvider",
    "ProdCacheProvider",
    "ProdEventsProvider",
    "ProdPersistenceProvider",
    "ProdSearchProvider",
    "SearchProvider",
]
