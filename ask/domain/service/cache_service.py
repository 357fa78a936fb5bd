"""Tagged cache interface and invalidation tag rules."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from ask.domain.value import ContentType, UserId

# Tags shared by derived views
TAG_QUESTIONS = "questions"
TAG_ANSWERS = "answers"
TAG_SOLUTIONS = "solutions"
TAG_USERS = "users"
TAG_POPULAR = "popular"
TAG_RECENT = "recent"
TAG_TRENDING = "trending"
TAG_TAGS = "tags"

_CONTENT_TAGS: dict[ContentType, tuple[str, ...]] = {
    ContentType.QUESTION: (TAG_QUESTIONS, TAG_POPULAR, TAG_RECENT, TAG_TRENDING, TAG_TAGS),
    ContentType.ANSWER: (TAG_ANSWERS, TAG_QUESTIONS, TAG_POPULAR, TAG_RECENT),
    ContentType.SOLUTION: (TAG_SOLUTIONS, TAG_POPULAR, TAG_TRENDING, TAG_TAGS),
}


def user_tag(user_id: UserId) -> str:
    """Tag of every view derived from one user's content."""
    return f"user:{user_id}"


def content_tags(content_type: ContentType, author_id: UserId | None = None) -> set[str]:
    """Tags to flush after a mutation of the given content type.

    The author's tag is included when the mutation changes what the author
    owns (create, delete). Reactions, comments and acceptance pass no author.
    """
    tags = set(_CONTENT_TAGS[content_type])
    if author_id is not None:
        tags.add(user_tag(author_id))
    return tags


def user_profile_tags(user_id: UserId) -> set[str]:
    return {TAG_USERS, user_tag(user_id)}


class CacheTagStore(ABC):
    """Cache of derived views, invalidated by tag.

    Every entry is stored with a set of tags. Invalidating any tag removes
    all entries carrying it. Stored values must be JSON-compatible.
    """

    @abstractmethod
    async def get_or_compute(
        self,
        namespace: str,
        key: str,
        tags: Iterable[str],
        ttl: int,
        compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached value, computing and storing it on a miss.

        Read failures count as a miss. Write failures still return the
        computed value. Errors raised by compute propagate and nothing is
        stored.

        Args:
            namespace: Entry namespace (usually the view name)
            key: Entry key within the namespace
            tags: Tags the entry is registered under
            ttl: Time to live in seconds
            compute: Coroutine factory producing the value

        Returns:
            The cached or freshly computed value
        """
        pass

    @abstractmethod
    async def invalidate(self, tags: Iterable[str]) -> int:
        """Remove every entry carrying any of the tags.

        Never raises; failures are logged.

        Returns:
            Number of entries removed
        """
        pass

    @abstractmethod
    async def flush(self) -> None:
        """Remove every entry and tag index."""
        pass
