"""Domain services."""

from .acceptance_service import AcceptanceService
from .aggregate_service import AggregateQueryService
from .base import Service
from .cache_service import CacheTagStore
from .comment_service import CommentService
from .content_service import ContentService
from .effects import MutationEffects
from .event_service import EventPublisher
from .reaction_service import ReactionService
from .search_service import IndexedSearchClient, SearchResolver, sanitize_term
from .session_service import SessionService
from .user_service import UserService

__all__ = [
    "AcceptanceService",
    "AggregateQueryService",
    "CacheTagStore",
    "CommentService",
    "ContentService",
    "EventPublisher",
    "IndexedSearchClient",
    "MutationEffects",
    "ReactionService",
    "SearchResolver",
    "Service",
    "SessionService",
    "UserService",
    "sanitize_term",
]
