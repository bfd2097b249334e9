"""
Sessions module.

Handles log-on, session token issuing and verification, and log-out.

Public API:
- IAuthenticationService: Interface for session operations
- ITokenIssuer: Token signing collaborator interface
- SessionClaims, LogOnInfo, LogOnResult, AuthenticatedSession: Data models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthenticationService, ITokenIssuer
from .models import AuthenticatedSession, LogOnInfo, LogOnResult, SessionClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    RevokedTokenError,
    UserNotFoundError,
    TokenSigningError,
    LogOutError,
)

__all__ = [
    # Interfaces
    "IAuthenticationService",
    "ITokenIssuer",
    # Models
    "AuthenticatedSession",
    "LogOnInfo",
    "LogOnResult",
    "SessionClaims",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "RevokedTokenError",
    "UserNotFoundError",
    "TokenSigningError",
    "LogOutError",
]
