"""In-memory fallback matcher for testing."""

import re

from ask.domain.model.content import ContentItem
from ask.domain.repository import FallbackMatcher, term_prefixes
from ask.domain.value import ContentType

from .store import InMemoryDatabase


class InMemoryFallbackMatcher(FallbackMatcher):
    """Word-prefix matching over the in-memory tables.

    Relevance is the number of words hit by any prefix.
    """

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()

    def _items(self, content_type: ContentType) -> list[ContentItem]:
        return list(
            {
                ContentType.QUESTION: self.db.questions,
                ContentType.ANSWER: self.db.answers,
                ContentType.SOLUTION: self.db.solutions,
            }[content_type].values()
        )

    async def match(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[tuple[ContentItem, float]]:
        prefixes = term_prefixes(term)
        if not prefixes:
            return []

        matches: list[tuple[ContentItem, float]] = []
        for item in self._items(content_type):
            if item.deleted_at is not None or not item.searchable_fields:
                continue
            words = re.findall(r"\w+", item.searchable_text().lower())
            if not all(any(w.startswith(p) for w in words) for p in prefixes):
                continue
            relevance = sum(1 for w in words if any(w.startswith(p) for p in prefixes))
            matches.append((item, float(relevance)))

        matches.sort(key=lambda m: (m[1], m[0].created_at), reverse=True)
        return matches[:limit]
