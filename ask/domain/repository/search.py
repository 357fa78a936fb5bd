"""Relational full-text matcher interface."""

import re
from abc import ABC, abstractmethod

from ask.domain.model.content import ContentItem
from ask.domain.value import ContentType


class FallbackMatcher(ABC):
    """Local full-text matching used when the indexed backend is unavailable.

    Terms arrive already sanitized: space-separated "+token*" clauses, each
    required and matched as a case-insensitive word prefix.
    """

    @abstractmethod
    async def match(
        self, content_type: ContentType, term: str, limit: int
    ) -> list[tuple[ContentItem, float]]:
        """Find items matching every clause of the term.

        Soft-deleted items never match. Content types without searchable
        fields and empty terms yield an empty list.

        Args:
            content_type: Which content to search
            term: Sanitized boolean term
            limit: Maximum number of results

        Returns:
            (item, relevance) pairs ordered by relevance, then newest first
        """
        pass


def term_prefixes(term: str) -> list[str]:
    """Split a sanitized term into lowercase word prefixes.

    "+Data* +base*" becomes ["data", "base"]. Non-word characters inside a
    clause separate further prefixes, so every prefix is safe to hand to a
    full-text query parser.
    """
    prefixes: list[str] = []
    for clause in term.split():
        core = clause.removeprefix("+").removesuffix("*")
        for piece in re.findall(r"\w+", core.lower()):
            if piece not in prefixes:
                prefixes.append(piece)
    return prefixes
