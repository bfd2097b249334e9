import pytest

from modules.sessions.models import LogOnRequest, SessionClaims


class TestSessionClaims:
    def test_parse_claims(self):
        """Should parse a decoded token payload."""
        claims = SessionClaims(**{
            "sub": "profile-123",
            "jti": "session-1",
            "exp": 1704067200,
            "iat": 1704063600,
            "email": "someone@somewhere.com",
        })
        assert claims.sub == "profile-123"
        assert claims.aud == "gatehouse"
        assert claims.iss == "gatehouse-api"

    def test_extra_claims_ignored(self):
        claims = SessionClaims(sub="p", jti="j", exp=2, iat=1, nbf=1)  # type: ignore
        assert not hasattr(claims, "nbf")

    def test_claims_are_immutable(self):
        claims = SessionClaims(sub="p", jti="j", exp=2, iat=1)
        with pytest.raises(Exception):  # Pydantic ValidationError
            claims.sub = "other"

    def test_jti_is_required(self):
        with pytest.raises(Exception):
            SessionClaims(sub="p", exp=2, iat=1)


class TestLogOnRequest:
    def test_fields_are_optional(self):
        """Missing credentials reach the service instead of failing validation."""
        request = LogOnRequest()
        assert request.email_address is None
        assert request.password is None
