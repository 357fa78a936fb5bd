"""Mock indexed search providers for testing."""

from dishka import Scope, provide

from ask.adapter.search import MockIndexedSearchClient
from ask.domain.service import IndexedSearchClient
from ask.util.di.infrastructure.search import SearchProvider


class MockSearchProvider(SearchProvider):
    """Mock search provider with an in-process document store."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_indexed_search_client(self) -> IndexedSearchClient:
        """Provide mock indexed search client."""
        return MockIndexedSearchClient()
