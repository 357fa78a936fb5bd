"""Cached aggregate read views.

Each view is computed from canonical storage on a cache miss and stored
under tags that mutations flush. Cached payloads are plain JSON; they are
validated back into models on the way out.
"""

from datetime import datetime

import logfire
from pydantic import TypeAdapter

from ask.config import CacheSettings
from ask.domain.error import NotFoundError
from ask.domain.model import (
    QuestionSummary,
    SolutionSummary,
    TagCount,
    UserProfileStats,
    UserProfileView,
)
from ask.domain.repository import (
    AggregateRepository,
    AnswerRepository,
    QuestionRepository,
    SolutionRepository,
    UserRepository,
)
from ask.domain.value import ContentType, UserId

from .base import Service
from .cache_service import (
    TAG_ANSWERS,
    TAG_POPULAR,
    TAG_QUESTIONS,
    TAG_RECENT,
    TAG_SOLUTIONS,
    TAG_TAGS,
    TAG_TRENDING,
    CacheTagStore,
    content_tags,
    user_profile_tags,
)

QUESTION_LIST = TypeAdapter(list[QuestionSummary])
SOLUTION_LIST = TypeAdapter(list[SolutionSummary])
TAG_LIST = TypeAdapter(list[TagCount])

# Latest items shown per section of a profile
PROFILE_LATEST = 5


class AggregateQueryService(Service):
    """Domain service serving popular, recent, trending and profile views."""

    def __init__(
        self,
        aggregate_repository: AggregateRepository,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        solution_repository: SolutionRepository,
        cache_store: CacheTagStore,
        cache_settings: CacheSettings,
    ) -> None:
        self.aggregate_repository = aggregate_repository
        self.user_repository = user_repository
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.solution_repository = solution_repository
        self.cache_store = cache_store
        self.settings = cache_settings

    async def popular_questions(self, limit: int = 10) -> list[QuestionSummary]:
        """Questions with the most answers, then likes."""
        with logfire.span("aggregate_service.popular_questions", limit=limit):

            async def compute():
                rows = await self.aggregate_repository.popular_questions(limit)
                return QUESTION_LIST.dump_python(rows, mode="json")

            data = await self.cache_store.get_or_compute(
                "popular_questions",
                f"limit:{limit}",
                {TAG_QUESTIONS, TAG_POPULAR},
                self.settings.popular_ttl,
                compute,
            )
            return QUESTION_LIST.validate_python(data)

    async def recent_questions(self, limit: int = 10) -> list[QuestionSummary]:
        """Newest questions with their answer counts."""
        with logfire.span("aggregate_service.recent_questions", limit=limit):

            async def compute():
                rows = await self.aggregate_repository.recent_questions(limit)
                return QUESTION_LIST.dump_python(rows, mode="json")

            data = await self.cache_store.get_or_compute(
                "recent_questions",
                f"limit:{limit}",
                {TAG_QUESTIONS, TAG_RECENT},
                self.settings.recent_ttl,
                compute,
            )
            return QUESTION_LIST.validate_python(data)

    async def popular_solutions(self, limit: int = 10) -> list[SolutionSummary]:
        """Solutions with the most likes, then comments."""
        with logfire.span("aggregate_service.popular_solutions", limit=limit):

            async def compute():
                rows = await self.aggregate_repository.popular_solutions(limit)
                return SOLUTION_LIST.dump_python(rows, mode="json")

            data = await self.cache_store.get_or_compute(
                "popular_solutions",
                f"limit:{limit}",
                {TAG_SOLUTIONS, TAG_POPULAR},
                self.settings.popular_ttl,
                compute,
            )
            return SOLUTION_LIST.validate_python(data)

    async def trending_tags(self, limit: int = 20) -> list[TagCount]:
        """Most used tags across questions and solutions."""
        with logfire.span("aggregate_service.trending_tags", limit=limit):

            async def compute():
                rows = await self.aggregate_repository.tag_counts(limit)
                return TAG_LIST.dump_python(rows, mode="json")

            data = await self.cache_store.get_or_compute(
                "trending_tags",
                f"limit:{limit}",
                {TAG_TAGS, TAG_TRENDING},
                self.settings.trending_ttl,
                compute,
            )
            return TAG_LIST.validate_python(data)

    async def user_profile(self, user_id: UserId) -> UserProfileView:
        """Profile of a user with their latest content and counts.

        Raises:
            NotFoundError: If the user does not exist (nothing is cached)
        """
        with logfire.span("aggregate_service.user_profile", user_id=str(user_id)):

            async def compute():
                user = await self.user_repository.find_by_id(user_id)
                if not user:
                    logfire.warn("Profile requested for unknown user", user_id=str(user_id))
                    raise NotFoundError("User", str(user_id))

                repo = self.aggregate_repository
                view = UserProfileView(
                    user=user,
                    latest_questions=await repo.latest_questions_by_author(
                        user_id, PROFILE_LATEST
                    ),
                    latest_solutions=await repo.latest_solutions_by_author(
                        user_id, PROFILE_LATEST
                    ),
                    latest_answers=await repo.latest_answers_by_author(
                        user_id, PROFILE_LATEST
                    ),
                    stats=UserProfileStats(
                        questions_count=await self.question_repository.count_by_author(
                            user_id
                        ),
                        solutions_count=await self.solution_repository.count_by_author(
                            user_id
                        ),
                        answers_count=await self.answer_repository.count_by_author(
                            user_id
                        ),
                        accepted_answers_count=await self.answer_repository.count_accepted_by_author(
                            user_id
                        ),
                    ),
                    computed_at=datetime.now(),
                )
                return view.model_dump(mode="json")

            data = await self.cache_store.get_or_compute(
                "user_profile",
                str(user_id),
                # Summaries embed answer, like and comment counts changed by other users
                user_profile_tags(user_id) | {TAG_QUESTIONS, TAG_ANSWERS, TAG_SOLUTIONS},
                self.settings.profile_ttl,
                compute,
            )
            return UserProfileView.model_validate(data)

    async def clear_all(self) -> None:
        """Drop every cached view."""
        with logfire.span("aggregate_service.clear_all"):
            await self.cache_store.flush()
            logfire.info("All cached views cleared")

    async def clear_content_type(self, content_type: ContentType) -> int:
        """Drop the cached views derived from one content type."""
        with logfire.span(
            "aggregate_service.clear_content_type", content_type=content_type.value
        ):
            return await self.cache_store.invalidate(content_tags(content_type))
