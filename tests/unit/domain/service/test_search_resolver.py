"""Unit tests for SearchResolver."""

import asyncio
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from ask.adapter.error import SearchProviderError
from ask.adapter.search import MockIndexedSearchClient
from ask.config import SearchSettings
from ask.domain.error import StorageUnavailableError
from ask.domain.model import Answer, Question, Solution
from ask.domain.service import SearchResolver
from ask.domain.value import (
    AnswerId,
    ContentType,
    QuestionId,
    SearchPath,
    SolutionId,
    UserId,
)
from ask.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryFallbackMatcher,
)

AUTHOR = UserId(uuid4())


def make_question(title: str, description: str = "", **fields) -> Question:
    return Question(
        id=QuestionId(uuid4()),
        author_id=AUTHOR,
        title=title,
        description=description,
        **fields,
    )


def make_solution(title: str, description: str = "", tags=None) -> Solution:
    return Solution(
        id=SolutionId(uuid4()),
        author_id=AUTHOR,
        title=title,
        description=description,
        tags=tags or [],
    )


class SlowMatcher(InMemoryFallbackMatcher):
    async def match(self, content_type, term, limit):
        await asyncio.sleep(1)
        return []


class BrokenMatcher(InMemoryFallbackMatcher):
    async def match(self, content_type, term, limit):
        raise OperationalError("SELECT ...", {}, Exception("connection refused"))


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def settings():
    return SearchSettings(
        url="http://search.test",
        timeout_seconds=0.05,
        fallback_timeout_seconds=0.2,
        default_limit=5,
        max_limit=50,
    )


async def seed(db: InMemoryDatabase, client: MockIndexedSearchClient, *items) -> None:
    """Store items and index them, the way content creation does."""
    for item in items:
        table = {
            ContentType.QUESTION: db.questions,
            ContentType.ANSWER: db.answers,
            ContentType.SOLUTION: db.solutions,
        }[item.content_type]
        table[item.id] = item
        await client.upsert_document(item)


class TestResolvePaths:
    """Which backend answers, and how it is reported."""

    @pytest.mark.asyncio
    async def test_healthy_backend_answers_on_indexed_path(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient()
        question = make_question("How to tune postgres", "shared buffers")
        await seed(db, client, question)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        outcome = await resolver.resolve(ContentType.QUESTION, "postgres")

        # Assert
        assert outcome.path == SearchPath.INDEXED
        assert outcome.degraded is False
        assert [hit.id for hit in outcome.hits] == [question.id]

    @pytest.mark.asyncio
    async def test_unconfigured_backend_uses_fallback_without_degradation(
        self, db, settings
    ):
        # Arrange
        client = MockIndexedSearchClient(configured=False)
        question = make_question("How to tune postgres")
        await seed(db, client, question)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        outcome = await resolver.resolve(ContentType.QUESTION, "postgres")

        # Assert
        assert outcome.path == SearchPath.FALLBACK
        assert outcome.degraded is False
        assert outcome.reason == "indexed search not configured"
        assert [hit.id for hit in outcome.hits] == [question.id]
        assert client.queries == []

    @pytest.mark.asyncio
    async def test_disabled_backend_degrades_to_fallback(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient(enabled=False)
        question = make_question("How to tune postgres")
        await seed(db, client, question)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        outcome = await resolver.resolve(ContentType.QUESTION, "postgres")

        # Assert
        assert outcome.path == SearchPath.FALLBACK
        assert outcome.degraded is True
        assert [hit.id for hit in outcome.hits] == [question.id]

    @pytest.mark.asyncio
    async def test_failing_backend_degrades_to_fallback(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient(
            fail_with=SearchProviderError("index missing", status_code=404)
        )
        question = make_question("How to tune postgres")
        await seed(db, client, question)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        outcome = await resolver.resolve(ContentType.QUESTION, "postgres")

        # Assert
        assert outcome.path == SearchPath.FALLBACK
        assert outcome.degraded is True
        assert "index missing" in outcome.reason
        assert [hit.id for hit in outcome.hits] == [question.id]

    @pytest.mark.asyncio
    async def test_slow_backend_times_out_and_degrades(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient(delay_seconds=1.0)
        question = make_question("How to tune postgres")
        await seed(db, client, question)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        outcome = await resolver.resolve(ContentType.QUESTION, "postgres")

        # Assert
        assert outcome.path == SearchPath.FALLBACK
        assert outcome.degraded is True
        assert outcome.reason == "indexed search timed out"
        assert [hit.id for hit in outcome.hits] == [question.id]


class TestContractEquivalence:
    """Enabled, disabled and failing backends return the same items."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "client_kwargs",
        [
            {},
            {"configured": False},
            {"enabled": False},
            {"fail_with": SearchProviderError("boom", status_code=500)},
        ],
    )
    async def test_same_hits_whichever_backend_answers(
        self, db, settings, client_kwargs
    ):
        # Arrange
        client = MockIndexedSearchClient(**client_kwargs)
        matching = [
            make_solution("Fix a leaking tap", "washer replacement", ["plumbing"]),
            make_solution("Leaking roof tap water", "gutters"),
        ]
        other = make_solution("Paint a fence", "brushes")
        await seed(db, client, *matching, other)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        hits = await resolver.search(ContentType.SOLUTION, "leaking tap")

        # Assert
        assert {hit.id for hit in hits} == {item.id for item in matching}
        for hit in hits:
            assert hit.content_type == ContentType.SOLUTION
            assert hit.title
            assert hit.author_id == AUTHOR


class TestResolveEdgeCases:
    """Empty terms, limits and unsearchable content."""

    @pytest.mark.asyncio
    async def test_empty_term_returns_no_hits_without_querying(self, db, settings):
        client = MockIndexedSearchClient()
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        outcome = await resolver.resolve(ContentType.QUESTION, "   ")

        assert outcome.hits == []
        assert outcome.degraded is False
        assert client.queries == []

    @pytest.mark.asyncio
    async def test_operator_only_term_on_fallback_returns_no_hits(self, db, settings):
        client = MockIndexedSearchClient(configured=False)
        await seed(db, client, make_question("anything"))
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        hits = await resolver.search(ContentType.QUESTION, "+-()~")

        assert hits == []

    @pytest.mark.asyncio
    async def test_limit_is_clamped_to_configured_maximum(self, db, settings):
        client = MockIndexedSearchClient()
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        await resolver.search(ContentType.QUESTION, "tap", limit=1000)

        assert client.queries == [(ContentType.QUESTION, "tap", 50)]

    @pytest.mark.asyncio
    async def test_missing_limit_uses_default(self, db, settings):
        client = MockIndexedSearchClient(configured=False)
        questions = [make_question(f"tap question {i}") for i in range(8)]
        await seed(db, client, *questions)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        hits = await resolver.search(ContentType.QUESTION, "tap")

        assert len(hits) == settings.default_limit

    @pytest.mark.asyncio
    async def test_answers_are_not_searchable_on_fallback(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient(configured=False)
        question = make_question("Question about taps")
        answer = Answer(
            id=AnswerId(uuid4()),
            author_id=AUTHOR,
            question_id=question.id,
            content="Replace the tap washer",
        )
        await seed(db, client, question, answer)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        hits = await resolver.search(ContentType.ANSWER, "washer")

        # Assert
        assert hits == []

    @pytest.mark.asyncio
    async def test_soft_deleted_items_never_match_on_fallback(self, db, settings):
        client = MockIndexedSearchClient(configured=False)
        live = make_question("tap live")
        gone = make_question("tap gone", deleted_at=datetime.now())
        await seed(db, client, live, gone)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        hits = await resolver.search(ContentType.QUESTION, "tap")

        assert [hit.id for hit in hits] == [live.id]

    @pytest.mark.asyncio
    async def test_fallback_orders_by_relevance_then_newest(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient(configured=False)
        now = datetime.now()
        older = make_question("tap", created_at=now - timedelta(days=2))
        newer = make_question("tap", created_at=now - timedelta(days=1))
        best = make_question("tap tap", "tap", created_at=now - timedelta(days=3))
        await seed(db, client, older, newer, best)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        hits = await resolver.search(ContentType.QUESTION, "tap")

        # Assert
        assert [hit.id for hit in hits] == [best.id, newer.id, older.id]


class TestFallbackFailures:
    """The fallback store is the last resort; its failures surface."""

    @pytest.mark.asyncio
    async def test_fallback_timeout_raises_storage_unavailable(self, db, settings):
        client = MockIndexedSearchClient(configured=False)
        resolver = SearchResolver(client, SlowMatcher(db), settings)

        with pytest.raises(StorageUnavailableError):
            await resolver.search(ContentType.QUESTION, "tap")

    @pytest.mark.asyncio
    async def test_fallback_database_error_raises_storage_unavailable(
        self, db, settings
    ):
        client = MockIndexedSearchClient(enabled=False)
        resolver = SearchResolver(client, BrokenMatcher(db), settings)

        with pytest.raises(StorageUnavailableError, match="connection refused"):
            await resolver.search(ContentType.QUESTION, "tap")


class TestCancellation:
    """Caller cancellation is not a backend failure."""

    @pytest.mark.asyncio
    async def test_cancellation_propagates_without_fallback(self, db):
        # Arrange
        settings = SearchSettings(url="http://search.test", timeout_seconds=30)
        client = MockIndexedSearchClient(delay_seconds=10)
        resolver = SearchResolver(client, SlowMatcher(db), settings)

        # Act
        task = asyncio.create_task(resolver.resolve(ContentType.QUESTION, "tap"))
        await asyncio.sleep(0.01)
        task.cancel()

        # Assert
        with pytest.raises(asyncio.CancelledError):
            await task


class TestSearchAll:
    """Tests for the combined live search."""

    @pytest.mark.asyncio
    async def test_returns_solutions_and_questions(self, db, settings):
        # Arrange
        client = MockIndexedSearchClient()
        question = make_question("Why does my tap drip")
        solution = make_solution("Fix a dripping tap")
        await seed(db, client, question, solution)
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        # Act
        results = await resolver.search_all("tap")

        # Assert
        assert [h.id for h in results[ContentType.SOLUTION]] == [solution.id]
        assert [h.id for h in results[ContentType.QUESTION]] == [question.id]
        assert ContentType.ANSWER not in results

    @pytest.mark.asyncio
    async def test_empty_term_returns_empty_lists(self, db, settings):
        client = MockIndexedSearchClient()
        resolver = SearchResolver(client, InMemoryFallbackMatcher(db), settings)

        results = await resolver.search_all("")

        assert results == {ContentType.SOLUTION: [], ContentType.QUESTION: []}
        assert client.queries == []
