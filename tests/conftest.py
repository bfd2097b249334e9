"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import asyncio
from datetime import date

import pytest
import pytest_asyncio
from argon2 import PasswordHasher
from fastapi.testclient import TestClient

from shared.config import Settings
from api import create_app
from api.dependencies import get_authentication_service, get_profile_service
from modules.profiles.hashing import Argon2PasswordHasher
from modules.profiles.models import FailureReason, NewProfile, Profile
from modules.profiles.service import ProfileService
from modules.profiles.store import InMemoryCredentialStore
from modules.sessions.service import AuthenticationService
from modules.sessions.tokens import JWTTokenIssuer


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


class ProfileFixtures:
    """
    Seeds the canonical profiles used across tests.

    One instance per test; it owns no global state. Every persistence step
    is awaited before the next one starts, and a failed step raises.
    """

    valid_password = "P@ssw0rd"
    confirmed_valid_user = "someone@somewhere.com"
    unconfirmed_valid_user = "someone-else@somewhere.com"
    inactive_valid_user = "someone-not-anymore@somewhere.com"
    inactive_unconfirmed_valid_user = "someone-else-not-anymore@somewhere.com"

    def __init__(self, store: InMemoryCredentialStore, service: ProfileService):
        self.store = store
        self.service = service

    async def seed(self) -> None:
        await self._create(self.confirmed_valid_user, "Confirmed User", date(2000, 1, 1))
        await self._create(self.unconfirmed_valid_user, "Unconfirmed User", date(2000, 1, 2))
        await self._create(self.inactive_valid_user, "Inactive User", date(2000, 1, 3))
        await self._create(
            self.inactive_unconfirmed_valid_user, "Inactive Unconfirmed User", date(2000, 1, 4)
        )

        await self._set_flags(self.confirmed_valid_user, is_email_confirmed=True)
        await self._set_flags(self.inactive_valid_user, is_deactivated=True, is_email_confirmed=True)
        await self._set_flags(self.inactive_unconfirmed_valid_user, is_deactivated=True)

    async def reset(self) -> None:
        await self.store.clear()

    async def get(self, email: str) -> Profile:
        profile = await self.store.find_by_email(email)
        if profile is None:
            raise LookupError(f"Fixture profile missing: {email}")
        return profile

    async def _create(self, email: str, full_name: str, birthday: date) -> None:
        reasons = await self.service.create_new_profile(
            NewProfile(
                email=email,
                password=self.valid_password,
                full_name=full_name,
                birthday=birthday,
            )
        )
        if reasons != [FailureReason.NONE]:
            raise RuntimeError(f"Could not create fixture profile {email}: {reasons}")

    async def _set_flags(self, email: str, **flags: bool) -> None:
        profile = await self.get(email)
        if await self.store.update(profile.id, flags) is None:
            raise RuntimeError(f"Could not update fixture profile {email}")


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a signing secret and the in-memory store."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        credential_store="memory",
        session_ttl_seconds=3600,
        require_confirmed_email=True,
    )


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def password_hasher() -> Argon2PasswordHasher:
    """Argon2 with cheap parameters to keep the suite fast."""
    return Argon2PasswordHasher(PasswordHasher(time_cost=1, memory_cost=1024, parallelism=1))


@pytest.fixture
def token_issuer(test_settings: Settings) -> JWTTokenIssuer:
    return JWTTokenIssuer(
        secret=test_settings.jwt_secret,
        audience=test_settings.jwt_audience,
        issuer=test_settings.jwt_issuer,
    )


@pytest.fixture
def profile_service(credential_store, password_hasher) -> ProfileService:
    return ProfileService(store=credential_store, hasher=password_hasher)


@pytest.fixture
def auth_service(credential_store, password_hasher, token_issuer, test_settings) -> AuthenticationService:
    return AuthenticationService(
        store=credential_store,
        hasher=password_hasher,
        issuer=token_issuer,
        settings=test_settings,
    )


@pytest_asyncio.fixture
async def profile_fixtures(credential_store, profile_service):
    """Seeded canonical profiles, removed again after the test."""
    fixtures = ProfileFixtures(credential_store, profile_service)
    await fixtures.seed()
    yield fixtures
    await fixtures.reset()


@pytest.fixture
def seeded_profiles(credential_store, profile_service):
    """Seeded canonical profiles for synchronous API tests."""
    fixtures = ProfileFixtures(credential_store, profile_service)
    asyncio.run(fixtures.seed())
    yield fixtures
    asyncio.run(fixtures.reset())


@pytest.fixture
def client(profile_service, auth_service) -> TestClient:
    """Test client whose routes use the fixture services."""
    app = create_app()
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_authentication_service] = lambda: auth_service
    return TestClient(app)
