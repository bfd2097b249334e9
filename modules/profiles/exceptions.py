"""
Profiles module exceptions.

Raised by the credential store and password hasher. The profile service
turns them into FailureReason values; they never reach controllers from
profile operations.
"""

from typing import Optional

from shared.exceptions import ConflictError, ExternalServiceError


class DuplicateEmailError(ConflictError):
    """Raised when a write would give two profiles the same e-mail."""

    def __init__(self, email: str):
        super().__init__(
            "A profile with this e-mail address already exists",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class CredentialStoreError(ExternalServiceError):
    """Raised when the credential store fails unexpectedly."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="credential_store",
            code="CREDENTIAL_STORE_ERROR",
            details={"original_error": original_error},
        )


class PasswordHashingError(ExternalServiceError):
    """Raised when a password cannot be hashed or verified."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message, service="password_hasher", code="PASSWORD_HASHING_ERROR")
