"""Search content use cases."""

from datetime import datetime

from pydantic import BaseModel

from ask.domain.model import SearchHit
from ask.domain.service import SearchResolver
from ask.domain.value import ContentType, SearchPath


class SearchHitItem(BaseModel):
    """Search hit in response."""

    content_type: ContentType
    id: str
    title: str
    body: str
    author_id: str | None
    created_at: datetime | None
    score: float

    @classmethod
    def from_hit(cls, hit: SearchHit) -> "SearchHitItem":
        return cls(
            content_type=hit.content_type,
            id=str(hit.id),
            title=hit.title,
            body=hit.body,
            author_id=str(hit.author_id) if hit.author_id else None,
            created_at=hit.created_at,
            score=hit.score,
        )


class SearchContentRequest(BaseModel):
    """Search one content type."""

    content_type: ContentType
    term: str = ""
    limit: int | None = None


class SearchContentResponse(BaseModel):
    """Search response for one content type."""

    content_type: ContentType
    path: SearchPath
    degraded: bool
    hits: list[SearchHitItem]
    total: int


class SearchContentUseCase:
    """Use case for searching a single content type."""

    def __init__(self, search_resolver: SearchResolver) -> None:
        self.search_resolver = search_resolver

    async def execute(self, request: SearchContentRequest) -> SearchContentResponse:
        """Execute search flow.

        The indexed backend is tried first; the response has the same shape
        whichever backend answered.

        Raises:
            StorageUnavailableError: If the fallback store cannot answer
        """
        outcome = await self.search_resolver.resolve(
            request.content_type, request.term, request.limit
        )
        hits = [SearchHitItem.from_hit(hit) for hit in outcome.hits]
        return SearchContentResponse(
            content_type=request.content_type,
            path=outcome.path,
            degraded=outcome.degraded,
            hits=hits,
            total=len(hits),
        )


class SearchAllRequest(BaseModel):
    """Live search across solutions and questions."""

    term: str = ""
    limit: int | None = None


class SearchAllResponse(BaseModel):
    """Hits grouped by content type."""

    solutions: list[SearchHitItem]
    questions: list[SearchHitItem]


class SearchAllUseCase:
    """Use case for the combined live search box."""

    def __init__(self, search_resolver: SearchResolver) -> None:
        self.search_resolver = search_resolver

    async def execute(self, request: SearchAllRequest) -> SearchAllResponse:
        results = await self.search_resolver.search_all(request.term, request.limit)
        return SearchAllResponse(
            solutions=[
                SearchHitItem.from_hit(h) for h in results[ContentType.SOLUTION]
            ],
            questions=[
                SearchHitItem.from_hit(h) for h in results[ContentType.QUESTION]
            ],
        )
