"""End-to-end tests for reaction, comment and delete endpoints."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from ask.interface.api.app import create_app
from ask.util.di.container import setup_di
from tests.conftest import auth_cookies, make_user
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    setup_di(app_instance, build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def alice():
    return make_user("alice")


@pytest.fixture
def bob():
    return make_user("bob")


def create_solution(client, user, title="Unblock a sink") -> str:
    response = client.post(
        "/solutions", json={"title": title}, cookies=auth_cookies(user)
    )
    assert response.status_code == 201
    return response.json()["solution_id"]


class TestReactionEndpoint:
    """End-to-end tests for POST /content/{type}/{id}/reaction."""

    def test_requires_authentication(self, client):
        response = client.post(
            f"/content/solution/{uuid4()}/reaction", json={"is_like": True}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Not authenticated"

    def test_invalid_token_rejected(self, client):
        response = client.post(
            f"/content/solution/{uuid4()}/reaction",
            json={"is_like": True},
            cookies={"auth_token": "invalid-token"},
        )

        assert response.status_code == 401

    def test_unknown_content_type_is_422(self, client, alice):
        response = client.post(
            f"/content/comment/{uuid4()}/reaction",
            json={"is_like": True},
            cookies=auth_cookies(alice),
        )

        assert response.status_code == 422

    def test_malformed_id_is_422(self, client, alice):
        response = client.post(
            "/content/solution/not-a-uuid/reaction",
            json={"is_like": True},
            cookies=auth_cookies(alice),
        )

        assert response.status_code == 422

    def test_missing_content_is_404(self, client, alice):
        response = client.post(
            f"/content/question/{uuid4()}/reaction",
            json={"is_like": True},
            cookies=auth_cookies(alice),
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Question not found"

    def test_toggle_sequence(self, client, alice, bob):
        # Arrange
        solution_id = create_solution(client, alice)
        url = f"/content/solution/{solution_id}/reaction"

        # Act
        first = client.post(url, json={"is_like": True}, cookies=auth_cookies(bob))
        second = client.post(url, json={"is_like": False}, cookies=auth_cookies(bob))
        third = client.post(url, json={"is_like": False}, cookies=auth_cookies(bob))

        # Assert
        assert first.status_code == 200
        assert first.json()["likes"] == 1
        assert first.json()["reaction"] == "like"
        assert second.json()["likes"] == 0
        assert second.json()["dislikes"] == 1
        assert second.json()["reaction"] == "dislike"
        assert third.json()["dislikes"] == 0
        assert third.json()["reaction"] is None


class TestCommentEndpoints:
    """End-to-end tests for comment creation, listing and deletion."""

    def test_comment_and_reply(self, client, alice, bob):
        # Arrange
        solution_id = create_solution(client, alice)
        url = f"/content/solution/{solution_id}/comments"

        # Act
        root = client.post(url, json={"body": "Try a plunger"}, cookies=auth_cookies(bob))
        reply = client.post(
            url,
            json={"body": "Tried it", "parent_id": root.json()["comment_id"]},
            cookies=auth_cookies(alice),
        )
        listing = client.get(url)

        # Assert
        assert root.status_code == 201
        assert reply.status_code == 201
        data = listing.json()
        assert data["total"] == 2
        assert data["comments"][0]["body"] == "Try a plunger"
        assert data["comments"][0]["replies"][0]["body"] == "Tried it"

    def test_blank_comment_is_422_with_field(self, client, alice):
        solution_id = create_solution(client, alice)

        response = client.post(
            f"/content/solution/{solution_id}/comments",
            json={"body": "   "},
            cookies=auth_cookies(alice),
        )

        assert response.status_code == 422
        assert response.json()["field"] == "body"

    def test_only_author_deletes_comment(self, client, alice, bob):
        # Arrange
        solution_id = create_solution(client, alice)
        comment = client.post(
            f"/content/solution/{solution_id}/comments",
            json={"body": "Mine"},
            cookies=auth_cookies(bob),
        ).json()

        # Act
        forbidden = client.delete(
            f"/comments/{comment['comment_id']}", cookies=auth_cookies(alice)
        )
        allowed = client.delete(
            f"/comments/{comment['comment_id']}", cookies=auth_cookies(bob)
        )

        # Assert
        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["deleted_count"] == 1


class TestDeleteContentEndpoint:
    def test_owner_deletes_and_content_disappears(self, client, alice, bob):
        # Arrange
        solution_id = create_solution(client, alice)
        url = f"/content/solution/{solution_id}"

        # Act
        forbidden = client.delete(url, cookies=auth_cookies(bob))
        deleted = client.delete(url, cookies=auth_cookies(alice))
        react = client.post(
            f"{url}/reaction", json={"is_like": True}, cookies=auth_cookies(bob)
        )

        # Assert
        assert forbidden.status_code == 403
        assert deleted.status_code == 200
        assert deleted.json()["deleted_at"] is not None
        assert react.status_code == 404
