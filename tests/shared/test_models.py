"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        user = AuthenticatedUser(id="profile-123", email="someone@somewhere.com")
        assert user.id == "profile-123"
        assert user.email == "someone@somewhere.com"

    def test_default_values(self):
        user = AuthenticatedUser(id="profile-123", email="someone@somewhere.com")
        assert user.full_name == ""
        assert user.email_verified is False

    def test_immutability(self):
        """Should be frozen/immutable."""
        user = AuthenticatedUser(id="profile-123", email="someone@somewhere.com")
        with pytest.raises(ValidationError):
            user.id = "new-id"

    def test_extra_fields_ignored(self):
        user = AuthenticatedUser(
            id="profile-123",
            email="someone@somewhere.com",
            password_hash="never-exposed",  # type: ignore
        )
        assert not hasattr(user, "password_hash")
