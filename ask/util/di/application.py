"""Application layer DI providers."""

from dishka import Scope, provide

from ask.application.usecase.answer import ToggleAcceptanceUseCase
from ask.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
)
from ask.application.usecase.content import (
    CreateAnswerUseCase,
    CreateQuestionUseCase,
    CreateSolutionUseCase,
    DeleteContentUseCase,
    GetSolutionUseCase,
    PurgeDeletedContentUseCase,
)
from ask.application.usecase.feed import (
    GetPopularQuestionsUseCase,
    GetPopularSolutionsUseCase,
    GetRecentQuestionsUseCase,
    GetTrendingTagsUseCase,
)
from ask.application.usecase.reaction import SetReactionUseCase
from ask.application.usecase.search import SearchAllUseCase, SearchContentUseCase
from ask.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from ask.domain.service import (
    AcceptanceService,
    AggregateQueryService,
    CommentService,
    ContentService,
    ReactionService,
    SearchResolver,
    UserService,
)
from ask.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Search use cases
    @provide
    def get_search_content_use_case(
        self, search_resolver: SearchResolver
    ) -> SearchContentUseCase:
        """Provide single content type search use case."""
        return SearchContentUseCase(search_resolver=search_resolver)

    @provide
    def get_search_all_use_case(self, search_resolver: SearchResolver) -> SearchAllUseCase:
        """Provide combined live search use case."""
        return SearchAllUseCase(search_resolver=search_resolver)

    # Interaction use cases
    @provide
    def get_set_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> SetReactionUseCase:
        """Provide set reaction use case."""
        return SetReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_toggle_acceptance_use_case(
        self, acceptance_service: AcceptanceService
    ) -> ToggleAcceptanceUseCase:
        """Provide answer acceptance use case."""
        return ToggleAcceptanceUseCase(acceptance_service=acceptance_service)

    # Content use cases
    @provide
    def get_create_question_use_case(
        self, content_service: ContentService
    ) -> CreateQuestionUseCase:
        return CreateQuestionUseCase(content_service=content_service)

    @provide
    def get_create_answer_use_case(
        self, content_service: ContentService
    ) -> CreateAnswerUseCase:
        return CreateAnswerUseCase(content_service=content_service)

    @provide
    def get_create_solution_use_case(
        self, content_service: ContentService
    ) -> CreateSolutionUseCase:
        return CreateSolutionUseCase(content_service=content_service)

    @provide
    def get_get_solution_use_case(
        self, content_service: ContentService
    ) -> GetSolutionUseCase:
        return GetSolutionUseCase(content_service=content_service)

    @provide
    def get_delete_content_use_case(
        self, content_service: ContentService
    ) -> DeleteContentUseCase:
        return DeleteContentUseCase(content_service=content_service)

    @provide
    def get_purge_deleted_content_use_case(
        self, content_service: ContentService
    ) -> PurgeDeletedContentUseCase:
        return PurgeDeletedContentUseCase(content_service=content_service)

    # Listing use cases
    @provide
    def get_popular_questions_use_case(
        self, aggregate_service: AggregateQueryService
    ) -> GetPopularQuestionsUseCase:
        return GetPopularQuestionsUseCase(aggregate_service=aggregate_service)

    @provide
    def get_recent_questions_use_case(
        self, aggregate_service: AggregateQueryService
    ) -> GetRecentQuestionsUseCase:
        return GetRecentQuestionsUseCase(aggregate_service=aggregate_service)

    @provide
    def get_popular_solutions_use_case(
        self, aggregate_service: AggregateQueryService
    ) -> GetPopularSolutionsUseCase:
        return GetPopularSolutionsUseCase(aggregate_service=aggregate_service)

    @provide
    def get_trending_tags_use_case(
        self, aggregate_service: AggregateQueryService
    ) -> GetTrendingTagsUseCase:
        return GetTrendingTagsUseCase(aggregate_service=aggregate_service)

    # User use cases
    @provide
    def get_get_user_profile_use_case(
        self, aggregate_service: AggregateQueryService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(aggregate_service=aggregate_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)
