"""Test configuration and helpers."""

from uuid import uuid4

from ask.config import Settings
from ask.domain.model import User
from ask.domain.value import UserId
from ask.domain.value.types import Handle
from ask.util.jwt import encode_session


def make_user(handle: str = "alice") -> User:
    """Build a user with a fresh ID.

    Args:
        handle: User handle

    Returns:
        Unsaved User entity
    """
    return User(id=UserId(uuid4()), handle=Handle(root=handle), name=handle.title())


def auth_cookies(user: User) -> dict[str, str]:
    """Cookies authenticating the given user against a test app.

    Tokens are signed with the same environment-loaded settings the test
    container uses.
    """
    token = encode_session(str(user.id), user.handle.root, Settings().auth)
    return {"auth_token": token}
