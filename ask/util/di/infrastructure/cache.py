"""Tagged cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from redis.asyncio import Redis

from ask.adapter.cache import InMemoryCacheTagStore, RedisCacheTagStore
from ask.config import CacheSettings
from ask.domain.service import CacheTagStore
from ask.util.di.base import ProviderBase
from ask.util.error import ConfigurationError
from ask.util.observability import instrument_redis


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider backed by Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_cache_store(
        self, cache_settings: CacheSettings
    ) -> AsyncIterator[CacheTagStore]:
        """Provide the shared tagged cache.

        Falls back to a per-process store when the cache is disabled.

        Raises:
            ConfigurationError: If the Redis URL cannot be parsed
        """
        if not cache_settings.enabled:
            logfire.info("Redis cache disabled, using in-process cache store")
            yield InMemoryCacheTagStore()
            return

        instrument_redis()
        try:
            redis = Redis.from_url(cache_settings.redis_url, decode_responses=True)
        except ValueError as e:
            raise ConfigurationError(f"Invalid CACHE__REDIS_URL: {e}") from e

        yield RedisCacheTagStore(redis, key_prefix=cache_settings.key_prefix)
        await redis.aclose()
