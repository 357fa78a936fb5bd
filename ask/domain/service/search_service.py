"""Search domain service.

Queries go to the indexed search service first. When it is disabled,
unreachable, slow or returns garbage, the same query is answered by the
relational fallback matcher with a sanitized term, so callers always get
results of the same shape.
"""

import asyncio
import re
from abc import ABC, abstractmethod
from uuid import UUID

import logfire
from sqlalchemy.exc import InterfaceError, OperationalError

from ask.config import SearchSettings
from ask.domain.error import StorageUnavailableError
from ask.domain.model.content import ContentItem
from ask.domain.model.search import SearchHit, SearchOutcome
from ask.domain.repository import FallbackMatcher
from ask.domain.value import ContentType, SearchPath

from .base import Service

# Operators of the boolean full-text syntax that users must not inject
RESERVED_SYMBOLS = re.compile(r"[-+<>@()~]")


def sanitize_term(term: str) -> str:
    """Turn free text into a safe boolean prefix query.

    Reserved operators are stripped and every remaining word becomes a
    required prefix clause: "data-base (sql)" -> "+database* +sql*".

    Args:
        term: Raw user input

    Returns:
        Sanitized term, empty when nothing searchable remains
    """
    cleaned = RESERVED_SYMBOLS.sub("", term)
    return " ".join(f"+{token}*" for token in cleaned.split())


class IndexedSearchClient(ABC):
    """Client for the external indexed search service."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether an indexed backend is configured at all."""
        pass

    @abstractmethod
    async def search(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[SearchHit]:
        """Search one content type.

        Raises:
            BackendUnavailableError: If the backend is disabled
            SearchProviderError: If the call fails or the response is malformed
        """
        pass

    @abstractmethod
    async def upsert_document(self, item: ContentItem) -> None:
        """Add or replace the search document of an item."""
        pass

    @abstractmethod
    async def delete_document(self, content_type: ContentType, item_id: UUID) -> None:
        """Remove an item's search document."""
        pass


class SearchResolver(Service):
    """Domain service choosing between indexed and fallback search."""

    # Searched by the combined live search, in display order
    SEARCH_ALL_TYPES = (ContentType.SOLUTION, ContentType.QUESTION)

    def __init__(
        self,
        indexed_client: IndexedSearchClient,
        fallback_matcher: FallbackMatcher,
        search_settings: SearchSettings,
    ) -> None:
        """Initialize search resolver.

        Args:
            indexed_client: Indexed search service client
            fallback_matcher: Relational full-text matcher
            search_settings: Timeouts and limits
        """
        self.indexed_client = indexed_client
        self.fallback_matcher = fallback_matcher
        self.settings = search_settings

    async def search(
        self, content_type: ContentType, term: str, limit: int | None = None
    ) -> list[SearchHit]:
        """Search one content type and return only the hits."""
        outcome = await self.resolve(content_type, term, limit)
        return outcome.hits

    async def resolve(
        self, content_type: ContentType, term: str, limit: int | None = None
    ) -> SearchOutcome:
        """Search one content type and report which path answered.

        Failures of the indexed backend never reach the caller. Caller
        cancellation is not a failure and propagates untouched.

        Args:
            content_type: Which content to search
            term: Raw user input
            limit: Maximum number of hits (clamped to the configured range)

        Returns:
            Search outcome with hits, path and degradation flag

        Raises:
            StorageUnavailableError: If the fallback store cannot answer
        """
        limit = self._clamp_limit(limit)

        with logfire.span(
            "search_resolver.resolve", content_type=content_type.value, limit=limit
        ):
            if not self.indexed_client.is_configured:
                hits = await self._fallback(content_type, term, limit)
                return SearchOutcome(
                    path=SearchPath.FALLBACK,
                    degraded=False,
                    reason="indexed search not configured",
                    hits=hits,
                )

            if not term.strip():
                return SearchOutcome(path=SearchPath.INDEXED, degraded=False, hits=[])

            try:
                hits = await asyncio.wait_for(
                    self.indexed_client.search(content_type, term, limit),
                    timeout=self.settings.timeout_seconds,
                )
            except Exception as e:
                # CancelledError is a BaseException and is not caught here
                reason = self._describe_failure(e)
                logfire.debug(
                    "Indexed search failed, using fallback",
                    content_type=content_type.value,
                    reason=reason,
                )
                hits = await self._fallback(content_type, term, limit)
                return SearchOutcome(
                    path=SearchPath.FALLBACK, degraded=True, reason=reason, hits=hits
                )

            return SearchOutcome(
                path=SearchPath.INDEXED, degraded=False, hits=hits[:limit]
            )

    async def search_all(
        self, term: str, limit: int | None = None
    ) -> dict[ContentType, list[SearchHit]]:
        """Search solutions and questions for the live search box.

        Args:
            term: Raw user input
            limit: Maximum number of hits per content type

        Returns:
            Hits keyed by content type (empty lists for an empty term)
        """
        with logfire.span("search_resolver.search_all"):
            results: dict[ContentType, list[SearchHit]] = {}
            for content_type in self.SEARCH_ALL_TYPES:
                if not term.strip():
                    results[content_type] = []
                    continue
                results[content_type] = await self.search(content_type, term, limit)
            return results

    async def _fallback(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[SearchHit]:
        sanitized = sanitize_term(term)
        if not sanitized:
            return []

        try:
            matches = await asyncio.wait_for(
                self.fallback_matcher.match(content_type, sanitized, limit),
                timeout=self.settings.fallback_timeout_seconds,
            )
        except TimeoutError:
            logfire.error("Fallback search timed out", content_type=content_type.value)
            raise StorageUnavailableError("fallback search", "query timed out")
        except (OperationalError, InterfaceError) as e:
            logfire.error(
                "Fallback search storage error",
                content_type=content_type.value,
                error=str(e),
            )
            raise StorageUnavailableError("fallback search", str(e.orig or e))

        return [SearchHit.from_item(item, score) for item, score in matches[:limit]]

    def _clamp_limit(self, limit: int | None) -> int:
        if limit is None:
            return self.settings.default_limit
        return max(1, min(limit, self.settings.max_limit))

    @staticmethod
    def _describe_failure(error: Exception) -> str:
        if isinstance(error, TimeoutError):
            return "indexed search timed out"
        return f"{type(error).__name__}: {error}"
