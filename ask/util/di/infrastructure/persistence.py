"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ask.config import Settings
from ask.domain.repository import (
    AggregateRepository,
    AnswerRepository,
    CommentRepository,
    FallbackMatcher,
    QuestionRepository,
    ReactionRepository,
    SolutionRepository,
    UserRepository,
)
from ask.domain.service import CacheTagStore, EventPublisher, MutationEffects
from ask.persistence.database import create_engine, create_session_factory, transaction
from ask.persistence.repository import (
    PostgresAggregateRepository,
    PostgresAnswerRepository,
    PostgresCommentRepository,
    PostgresFallbackMatcher,
    PostgresQuestionRepository,
    PostgresReactionRepository,
    PostgresSolutionRepository,
    PostgresUserRepository,
)
from ask.util.di.base import ProviderBase
from ask.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed on shutdown."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_mutation_effects(
        self, cache_store: CacheTagStore, event_publisher: EventPublisher
    ) -> MutationEffects:
        """Provide the effects queue, flushed once the request commits."""
        return MutationEffects(cache_store, event_publisher, deferred=True)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        effects: MutationEffects,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Queued cache invalidation
        and events are applied only after the commit.
        """
        async with transaction(session_factory, effects) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_solution_repository(self, session: AsyncSession) -> SolutionRepository:
        return PostgresSolutionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, session: AsyncSession) -> ReactionRepository:
        return PostgresReactionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_fallback_matcher(self, session: AsyncSession) -> FallbackMatcher:
        """Provide the full-text matcher used when indexed search is unavailable."""
        return PostgresFallbackMatcher(session)

    @provide(scope=Scope.REQUEST)
    def get_aggregate_repository(self, session: AsyncSession) -> AggregateRepository:
        return PostgresAggregateRepository(session)
