"""End-to-end scenario: a question's whole life through the API.

Every read after a write must reflect that write, whether it is served
from search, from the cache or from storage.
"""

import pytest
from fastapi.testclient import TestClient

from ask.interface.api.app import create_app
from ask.persistence.repository.inmemory import InMemoryDatabase
from ask.util.di.container import setup_di
from tests.conftest import auth_cookies, make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container):
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, container)
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def users(client, container):
    db = client.portal.call(container.get, InMemoryDatabase)
    asker, helper, bystander = make_user("asker"), make_user("helper"), make_user("by")
    for user in (asker, helper, bystander):
        db.users[user.id] = user
    return asker, helper, bystander


class TestQuestionLifecycle:
    def test_question_answer_accept_delete(self, client, users):
        asker, helper, bystander = users

        # Warm every cached view while nothing exists
        assert client.get("/questions/recent").json()["questions"] == []
        assert client.get("/questions/popular").json()["questions"] == []
        assert client.get("/tags/trending").json()["tags"] == []
        helper_profile = client.get(f"/users/{helper.id}/profile").json()
        assert helper_profile["stats"]["answers_count"] == 0

        # Ask
        question = client.post(
            "/questions",
            json={"title": "Radiator cold at the top", "tags": ["heating"]},
            cookies=auth_cookies(asker),
        ).json()
        question_id = question["question_id"]

        recent = client.get("/questions/recent").json()["questions"]
        assert [q["id"] for q in recent] == [question_id]
        assert client.get("/tags/trending").json()["tags"] == [
            {"name": "heating", "count": 1}
        ]
        hits = client.get("/search/question", params={"q": "radiator"}).json()["hits"]
        assert [h["id"] for h in hits] == [question_id]

        # Answer
        answer = client.post(
            f"/questions/{question_id}/answers",
            json={"content": "Bleed it with a radiator key"},
            cookies=auth_cookies(helper),
        )
        assert answer.status_code == 201
        answer_id = answer.json()["answer_id"]
        popular = client.get("/questions/popular").json()["questions"]
        assert popular[0]["answers_count"] == 1
        helper_profile = client.get(f"/users/{helper.id}/profile").json()
        assert helper_profile["stats"]["answers_count"] == 1

        # React and comment
        liked = client.post(
            f"/content/question/{question_id}/reaction",
            json={"is_like": True},
            cookies=auth_cookies(bystander),
        )
        assert liked.json()["likes"] == 1
        popular = client.get("/questions/popular").json()["questions"]
        assert popular[0]["likes_count"] == 1
        client.post(
            f"/content/answer/{answer_id}/comments",
            json={"body": "Worked for me"},
            cookies=auth_cookies(bystander),
        )
        comments = client.get(f"/content/answer/{answer_id}/comments").json()
        assert comments["total"] == 1

        # Only the asker may accept
        forbidden = client.post(
            f"/answers/{answer_id}/acceptance", cookies=auth_cookies(helper)
        )
        assert forbidden.status_code == 403
        accepted = client.post(
            f"/answers/{answer_id}/acceptance", cookies=auth_cookies(asker)
        )
        assert accepted.json()["is_accepted"] is True
        recent = client.get("/questions/recent").json()["questions"]
        assert recent[0]["is_solved"] is True
        helper_profile = client.get(f"/users/{helper.id}/profile").json()
        assert helper_profile["stats"]["accepted_answers_count"] == 1

        # Delete
        deleted = client.delete(
            f"/content/question/{question_id}", cookies=auth_cookies(asker)
        )
        assert deleted.status_code == 200
        assert client.get("/questions/recent").json()["questions"] == []
        assert client.get("/tags/trending").json()["tags"] == []
        hits = client.get("/search/question", params={"q": "radiator"}).json()["hits"]
        assert hits == []
