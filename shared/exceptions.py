"""
Base exception classes for the Gatehouse backend.

Expected profile outcomes are reported as FailureReason values and failed
log-ons as None; these classes cover infrastructure and authentication
failures. Module exceptions subclass them, and each class carries the
HTTP status the API answers with when one escapes a route.
"""

from typing import Optional, Any


class GatehouseError(Exception):
    """Root of every Gatehouse exception."""

    status_code = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(GatehouseError):
    status_code = 404


class ConflictError(GatehouseError):
    """Write rejected because it collides with existing state."""

    status_code = 409


class ValidationError(GatehouseError):
    status_code = 400


class AuthenticationError(GatehouseError):
    """Missing, invalid, expired or revoked session credentials."""

    status_code = 401


class ExternalServiceError(GatehouseError):
    """A collaborator (database, hasher, token signer) failed or is not configured."""

    status_code = 503

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
