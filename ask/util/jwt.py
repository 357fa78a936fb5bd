"""Session token encoding.

Session tokens are HS256 JWTs carrying ``user_id``, ``handle`` and ``exp``.
They are minted by the login collaborator outside this service; the API
only decodes them to identify the acting user.
"""

from datetime import UTC, datetime, timedelta

import jwt
from pydantic import BaseModel, ValidationError

from ask.config import AuthSettings


class SessionClaims(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    handle: str
    exp: datetime


class SessionTokenError(Exception):
    """Session token could not be decoded.

    ``reason`` is ``"expired"`` or ``"invalid"``.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Session token {reason}")
        self.reason = reason


def encode_session(
    user_id: str,
    handle: str,
    settings: AuthSettings,
    issued_at: datetime | None = None,
) -> str:
    """Sign a session token that expires ``jwt_expiry_days`` after issue."""
    issued_at = issued_at or datetime.now(UTC)
    claims = {
        "user_id": user_id,
        "handle": handle,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session(token: str, settings: AuthSettings) -> SessionClaims:
    """Verify a session token's signature and expiry.

    Raises:
        SessionTokenError: If the token is expired, malformed, or lacks claims
    """
    try:
        raw = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as e:
        raise SessionTokenError("expired") from e
    except jwt.InvalidTokenError as e:
        raise SessionTokenError("invalid") from e

    try:
        return SessionClaims.model_validate(raw)
    except ValidationError as e:
        raise SessionTokenError("invalid") from e
