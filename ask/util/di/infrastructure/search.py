"""Indexed search infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from ask.adapter.search import MeilisearchClient
from ask.config import SearchSettings
from ask.domain.service import IndexedSearchClient
from ask.util.di.base import ProviderBase
from ask.util.error import ConfigurationError
from ask.util.observability import instrument_httpx


class SearchProvider(ProviderBase):
    """Indexed search component base."""

    __mock_component__ = "search"


class ProdSearchProvider(SearchProvider):
    """Production search provider talking to Meilisearch over HTTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_indexed_search_client(
        self, search_settings: SearchSettings
    ) -> AsyncIterator[IndexedSearchClient]:
        """Provide the indexed search client.

        With no URL configured the client reports itself unconfigured and
        every search is answered by the fallback matcher.

        Raises:
            ConfigurationError: If the limits are inconsistent
        """
        if search_settings.default_limit > search_settings.max_limit:
            raise ConfigurationError(
                "SEARCH__DEFAULT_LIMIT must not exceed SEARCH__MAX_LIMIT"
            )
        if search_settings.url:
            instrument_httpx()
        client = MeilisearchClient(search_settings)
        yield client
        await client.aclose()
