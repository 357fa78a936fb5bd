"""Domain layer DI providers."""

from dishka import Scope, provide

from ask.config import (
    AuthSettings,
    CacheSettings,
    CommentSettings,
    ContentSettings,
    SearchSettings,
)
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
from ask.domain.service import (
    AcceptanceService,
    AggregateQueryService,
    CacheTagStore,
    CommentService,
    ContentService,
    IndexedSearchClient,
    MutationEffects,
    ReactionService,
    SearchResolver,
    SessionService,
    UserService,
)
from ask.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_session_service(self, auth_settings: AuthSettings) -> SessionService:
        """Provide session identification service."""
        return SessionService(auth_settings=auth_settings)

    @provide
    def get_search_resolver(
        self,
        indexed_client: IndexedSearchClient,
        fallback_matcher: FallbackMatcher,
        search_settings: SearchSettings,
    ) -> SearchResolver:
        """Provide search resolver."""
        return SearchResolver(
            indexed_client=indexed_client,
            fallback_matcher=fallback_matcher,
            search_settings=search_settings,
        )

    @provide
    def get_content_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        solution_repository: SolutionRepository,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
        effects: MutationEffects,
        indexed_client: IndexedSearchClient,
        content_settings: ContentSettings,
    ) -> ContentService:
        """Provide content lifecycle domain service."""
        return ContentService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            solution_repository=solution_repository,
            reaction_repository=reaction_repository,
            comment_repository=comment_repository,
            effects=effects,
            indexed_client=indexed_client,
            content_settings=content_settings,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        content_service: ContentService,
        effects: MutationEffects,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            content_service=content_service,
            effects=effects,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        content_service: ContentService,
        effects: MutationEffects,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            content_service=content_service,
            effects=effects,
            comment_settings=comment_settings,
        )

    @provide
    def get_acceptance_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        effects: MutationEffects,
    ) -> AcceptanceService:
        """Provide answer acceptance domain service."""
        return AcceptanceService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            effects=effects,
        )

    @provide
    def get_aggregate_query_service(
        self,
        aggregate_repository: AggregateRepository,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        solution_repository: SolutionRepository,
        cache_store: CacheTagStore,
        cache_settings: CacheSettings,
    ) -> AggregateQueryService:
        """Provide cached aggregate views service."""
        return AggregateQueryService(
            aggregate_repository=aggregate_repository,
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            solution_repository=solution_repository,
            cache_store=cache_store,
            cache_settings=cache_settings,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, effects: MutationEffects
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, effects=effects)
