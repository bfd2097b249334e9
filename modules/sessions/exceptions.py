"""
Sessions module exceptions.

These exceptions are raised by the sessions module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ExternalServiceError, GatehouseError


class InvalidTokenError(AuthenticationError):
    """Raised when a session token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a session token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class RevokedTokenError(AuthenticationError):
    """Raised when a session token belongs to a logged-out session."""

    def __init__(self, message: str = "Session has been logged out"):
        super().__init__(message, code="TOKEN_REVOKED")


class UserNotFoundError(AuthenticationError):
    """Raised when the session's profile no longer exists or is deactivated."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class TokenSigningError(ExternalServiceError):
    """Raised when session tokens cannot be signed or checked."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, service="token_issuer", code="TOKEN_SIGNING_ERROR")


class LogOutError(GatehouseError):
    """Raised when a session could not be revoked because of an unexpected failure."""

    def __init__(self, message: str):
        super().__init__(message, code="LOG_OUT_FAILED")
