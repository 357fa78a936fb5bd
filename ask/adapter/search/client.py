"""Meilisearch-compatible indexed search client.

One index per content type, named "{index_prefix}{content_type}". Documents
carry the fields needed to build a SearchHit without touching the database.
"""

import asyncio
from datetime import datetime
from typing import Any
from uuid import UUID

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from ask.adapter.error import SearchProviderError
from ask.config import SearchSettings
from ask.domain.error import BackendUnavailableError
from ask.domain.model.content import ContentItem
from ask.domain.model.search import SearchHit
from ask.domain.service.search_service import IndexedSearchClient
from ask.domain.value import ContentType


def build_document(item: ContentItem) -> dict[str, Any]:
    """Search document for a content item."""
    return {
        "id": str(item.id),
        "title": item.search_title,
        "body": item.search_body,
        "tags": list(getattr(item, "tags", [])),
        "author_id": str(item.author_id),
        "created_at": item.created_at.isoformat(),
    }


class MeilisearchClient(IndexedSearchClient):
    """Indexed search over HTTP with httpx."""

    def __init__(
        self,
        settings: SearchSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize search client.

        Args:
            settings: Search settings (URL, key, index prefix, flag)
            transport: Optional transport override, used by tests
        """
        self.settings = settings
        self._client: httpx.AsyncClient | None = None

        if settings.url:
            headers = {"Content-Type": "application/json"}
            if settings.api_key:
                headers["Authorization"] = f"Bearer {settings.api_key}"
            self._client = httpx.AsyncClient(
                base_url=settings.url,
                headers=headers,
                timeout=settings.timeout_seconds,
                transport=transport,
            )

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def index_uid(self, content_type: ContentType) -> str:
        return f"{self.settings.index_prefix}{content_type.value}"

    async def search(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[SearchHit]:
        """Query the content type's index.

        Raises:
            BackendUnavailableError: If not configured or disabled by flag
            SearchProviderError: If the request fails or the response is malformed
        """
        client = self._require_client()
        uid = self.index_uid(content_type)

        try:
            response = await client.post(
                f"/indexes/{uid}/search",
                json={"q": term, "limit": limit, "showRankingScore": True},
            )
        except httpx.HTTPError as e:
            raise SearchProviderError(f"Search request to {uid} failed: {e}")

        if response.status_code != 200:
            raise SearchProviderError(
                f"Search on {uid} returned {response.status_code}",
                status_code=response.status_code,
            )

        return self._parse_hits(content_type, response)

    async def upsert_document(self, item: ContentItem) -> None:
        """Add or replace an item's document.

        Content types without searchable fields are not indexed.
        """
        if not item.searchable_fields:
            return
        client = self._require_client()
        uid = self.index_uid(item.content_type)

        with logfire.span("search_client.upsert_document", index=uid, id=str(item.id)):
            try:
                response = await client.post(
                    f"/indexes/{uid}/documents", json=[build_document(item)]
                )
            except httpx.HTTPError as e:
                raise SearchProviderError(f"Document upsert to {uid} failed: {e}")
            if response.status_code not in (200, 202):
                raise SearchProviderError(
                    f"Document upsert to {uid} returned {response.status_code}",
                    status_code=response.status_code,
                )

    async def delete_document(self, content_type: ContentType, item_id: UUID) -> None:
        """Remove an item's document; a missing document is not an error."""
        client = self._require_client()
        uid = self.index_uid(content_type)

        with logfire.span("search_client.delete_document", index=uid, id=str(item_id)):
            try:
                response = await client.delete(f"/indexes/{uid}/documents/{item_id}")
            except httpx.HTTPError as e:
                raise SearchProviderError(f"Document removal from {uid} failed: {e}")
            if response.status_code not in (200, 202, 404):
                raise SearchProviderError(
                    f"Document removal from {uid} returned {response.status_code}",
                    status_code=response.status_code,
                )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise BackendUnavailableError("indexed search not configured")
        if not self.settings.enabled:
            raise BackendUnavailableError("indexed search disabled")
        return self._client

    @staticmethod
    def _parse_hits(
        content_type: ContentType, response: httpx.Response
    ) -> list[SearchHit]:
        try:
            payload = response.json()
            raw_hits = payload["hits"]
            if not isinstance(raw_hits, list):
                raise TypeError("hits is not a list")
            return [
                SearchHit(
                    content_type=content_type,
                    id=hit["id"],
                    title=hit.get("title") or "",
                    body=hit.get("body") or "",
                    author_id=hit.get("author_id"),
                    created_at=hit.get("created_at"),
                    score=hit.get("_rankingScore", 0.0),
                )
                for hit in raw_hits
            ]
        except (ValueError, KeyError, TypeError, PydanticValidationError) as e:
            raise SearchProviderError(f"Malformed search response: {e}")


class MockIndexedSearchClient(IndexedSearchClient):
    """In-process indexed search for tests.

    Matches documents whose title, body or tags contain every word of the
    term. Can be switched off, made to fail or made to hang.
    """

    def __init__(
        self,
        configured: bool = True,
        enabled: bool = True,
        fail_with: Exception | None = None,
        delay_seconds: float = 0.0,
    ) -> None:
        self.configured = configured
        self.enabled = enabled
        self.fail_with = fail_with
        self.delay_seconds = delay_seconds
        self.documents: dict[ContentType, dict[str, dict[str, Any]]] = {
            content_type: {} for content_type in ContentType
        }
        self.queries: list[tuple[ContentType, str, int]] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def search(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[SearchHit]:
        """Return matching documents, or fail the way it was told to."""
        self.queries.append((content_type, term, limit))
        if not self.configured:
            raise BackendUnavailableError("indexed search not configured")
        if not self.enabled:
            raise BackendUnavailableError("indexed search disabled")
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_with is not None:
            raise self.fail_with

        words = term.lower().split()
        hits = []
        for doc in self.documents[content_type].values():
            text = " ".join([doc["title"], doc["body"], *doc["tags"]]).lower()
            if words and all(word in text for word in words):
                hits.append(
                    SearchHit(
                        content_type=content_type,
                        id=doc["id"],
                        title=doc["title"],
                        body=doc["body"],
                        author_id=doc["author_id"],
                        created_at=datetime.fromisoformat(doc["created_at"]),
                        score=1.0,
                    )
                )
        return hits[:limit]

    async def upsert_document(self, item: ContentItem) -> None:
        if not item.searchable_fields:
            return
        self.documents[item.content_type][str(item.id)] = build_document(item)

    async def delete_document(self, content_type: ContentType, item_id: UUID) -> None:
        self.documents[content_type].pop(str(item_id), None)
