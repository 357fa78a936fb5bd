"""Authentication helpers shared by routes."""

from fastapi import HTTPException, status

from ask.domain.service import SessionService


def require_user_id(sessions: SessionService, auth_token: str | None) -> str:
    """Resolve the caller from the auth_token cookie.

    Args:
        sessions: Session service identifying the caller
        auth_token: Session token from cookie

    Returns:
        Authenticated user ID

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = sessions.identify(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id
