"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.profiles.interfaces import ICredentialStore, IPasswordHasher, IProfileService
    from modules.sessions.interfaces import IAuthenticationService, ITokenIssuer


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self._credential_store: "ICredentialStore | None" = None
        self._password_hasher: "IPasswordHasher | None" = None
        self._token_issuer: "ITokenIssuer | None" = None
        self._profile_service: "IProfileService | None" = None
        self._authentication_service: "IAuthenticationService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def credential_store(self) -> "ICredentialStore":
        """Get the credential store selected by settings."""
        if self._credential_store is None:
            if self.settings.credential_store == "supabase":
                from modules.profiles.store import SupabaseCredentialStore
                from shared.database import get_supabase_client
                self._credential_store = SupabaseCredentialStore(
                    get_supabase_client(self.settings),
                    table=self.settings.profiles_table,
                )
            else:
                from modules.profiles.store import InMemoryCredentialStore
                self._credential_store = InMemoryCredentialStore()
        return self._credential_store

    @property
    def password_hasher(self) -> "IPasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.profiles.hashing import Argon2PasswordHasher
            self._password_hasher = Argon2PasswordHasher()
        return self._password_hasher

    @property
    def token_issuer(self) -> "ITokenIssuer":
        """Get the session token issuer instance."""
        if self._token_issuer is None:
            from modules.sessions.tokens import JWTTokenIssuer
            self._token_issuer = JWTTokenIssuer(
                secret=self.settings.jwt_secret,
                algorithm=self.settings.jwt_algorithm,
                audience=self.settings.jwt_audience,
                issuer=self.settings.jwt_issuer,
            )
        return self._token_issuer

    @property
    def profiles(self) -> "IProfileService":
        """Get the profile service instance."""
        if self._profile_service is None:
            from modules.profiles.service import ProfileService
            self._profile_service = ProfileService(
                store=self.credential_store,
                hasher=self.password_hasher,
            )
        return self._profile_service

    @property
    def sessions(self) -> "IAuthenticationService":
        """Get the authentication service instance."""
        if self._authentication_service is None:
            from modules.sessions.service import AuthenticationService
            self._authentication_service = AuthenticationService(
                store=self.credential_store,
                hasher=self.password_hasher,
                issuer=self.token_issuer,
                settings=self.settings,
            )
        return self._authentication_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._credential_store = None
        self._password_hasher = None
        self._token_issuer = None
        self._profile_service = None
        self._authentication_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_profile_service() -> "IProfileService":
    """FastAPI dependency for profile service."""
    return get_container().profiles


def get_authentication_service() -> "IAuthenticationService":
    """FastAPI dependency for authentication service."""
    return get_container().sessions
