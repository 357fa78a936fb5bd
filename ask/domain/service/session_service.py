"""Session identification service."""

import logfire

from ask.config import AuthSettings
from ask.domain.model import User
from ask.util.jwt import SessionTokenError, decode_session, encode_session

from .base import Service


class SessionService(Service):
    """Identifies the acting user from a session token.

    Login happens elsewhere; this service only needs to mint tokens for
    that collaborator and for tests.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue(self, user: User) -> str:
        """Mint a session token for ``user``."""
        logfire.debug("Session token issued", user_id=str(user.id))
        return encode_session(str(user.id), user.handle.root, self.auth_settings)

    def identify(self, token: str | None) -> str | None:
        """Resolve the user ID a session token belongs to.

        Args:
            token: Raw token from the ``auth_token`` cookie, if any

        Returns:
            User ID, or None when the token is missing, expired or forged
        """
        if not token:
            return None

        with logfire.span("session_service.identify"):
            try:
                claims = decode_session(token, self.auth_settings)
            except SessionTokenError as e:
                logfire.debug("Session rejected", reason=e.reason)
                return None
            return claims.user_id
