"""
Sessions module interfaces.

Routes and middleware depend on IAuthenticationService, not the concrete
implementation. ITokenIssuer is the signing collaborator it is built on.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthenticatedSession, LogOnInfo, LogOnResult, SessionClaims


@runtime_checkable
class ITokenIssuer(Protocol):
    """Interface for signing, verifying and revoking session tokens."""

    async def sign(self, claims: dict[str, Any], ttl_seconds: int) -> str:
        """
        Sign a session token.

        Args:
            claims: Claims to embed; at minimum "sub"
            ttl_seconds: Lifetime of the token

        Raises:
            TokenSigningError: If the token cannot be signed
        """
        ...

    async def verify(self, token: Optional[str]) -> SessionClaims:
        """
        Verify a session token and return its claims.

        Raises:
            MissingTokenError, InvalidTokenError, ExpiredTokenError
        """
        ...

    async def revoke(self, claims: SessionClaims) -> None:
        """Revoke the session the claims belong to until it expires."""
        ...

    async def is_revoked(self, jti: str) -> bool:
        """Whether the session with this ID has been revoked."""
        ...


@runtime_checkable
class IAuthenticationService(Protocol):
    """
    Interface for session operations.

    Log-on failures of every kind are reported as None so callers cannot
    tell an unknown e-mail from a wrong password.
    """

    async def log_on(self, info: LogOnInfo) -> Optional[LogOnResult]:
        """Check credentials and issue a session token."""
        ...

    async def authenticate(self, token: Optional[str]) -> AuthenticatedSession:
        """
        Resolve a session token to the user it belongs to.

        Raises:
            AuthenticationError: If the token is missing, invalid, expired,
                revoked, or its profile is gone or deactivated
        """
        ...

    async def log_out(self, user: AuthenticatedUser, auth_info: SessionClaims) -> bool:
        """
        Revoke the session described by auth_info.

        Returns:
            True if the session is revoked, False if it is not the user's

        Raises:
            LogOutError: On unexpected failure
        """
        ...
