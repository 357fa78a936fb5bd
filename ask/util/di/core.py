"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from ask.config import (
    AuthSettings,
    CacheSettings,
    CommentSettings,
    ContentSettings,
    SearchSettings,
    Settings,
)
from ask.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_search_settings(self, settings: Settings) -> SearchSettings:
        return settings.search

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        return settings.cache

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        return settings.comments

    @provide
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        return settings.content
