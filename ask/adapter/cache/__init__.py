"""Tagged cache store adapters."""

from .memory import InMemoryCacheTagStore
from .redis import RedisCacheTagStore

__all__ = ["InMemoryCacheTagStore", "RedisCacheTagStore"]
