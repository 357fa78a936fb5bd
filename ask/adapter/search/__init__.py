"""Indexed search adapters."""

from .client import MeilisearchClient, MockIndexedSearchClient

__all__ = ["MeilisearchClient", "MockIndexedSearchClient"]
