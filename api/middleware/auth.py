"""
Session authentication middleware.

Resolves the bearer token of a request to the current session.
"""

from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from modules.sessions.interfaces import IAuthenticationService
from modules.sessions.models import AuthenticatedSession

from ..dependencies import get_authentication_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    service: IAuthenticationService = Depends(get_authentication_service),
) -> AuthenticatedSession:
    """
    Dependency that requires an active session.

    Use this for endpoints that need the session's claims as well as the
    user, such as log-out.
    """
    if credentials is None:
        raise AuthError("Missing authorization header")

    try:
        return await service.authenticate(credentials.credentials)
    except AuthenticationError as e:
        raise AuthError(e.message)


async def get_current_user(
    session: AuthenticatedSession = Depends(get_current_session),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return session.user

