"""
Sessions module data models.

A session is not stored as a row: it is a signed token whose claims are
modelled by SessionClaims.
"""

from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser


class SessionClaims(BaseModel):
    """Decoded and verified session token payload."""

    sub: str = Field(..., description="Subject (profile ID)")
    jti: str = Field(..., description="Session ID, the unit of revocation")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")
    email: Optional[str] = Field(None, description="Profile e-mail at issue time")
    aud: str = Field(default="gatehouse", description="Audience")
    iss: str = Field(default="gatehouse-api", description="Issuer")

    model_config = {"frozen": True, "extra": "ignore"}


class LogOnInfo(BaseModel):
    """Credentials presented at log-on."""

    email: Optional[str] = None
    password: Optional[str] = None


class LogOnResult(BaseModel):
    """Successful log-on."""

    token: str
    profile_id: str


class AuthenticatedSession(BaseModel):
    """The user behind a request together with the claims that authenticated it."""

    user: AuthenticatedUser
    claims: SessionClaims


class SessionInfo(BaseModel):
    """Description of the current session returned to clients."""

    profile_id: str
    email: str
    full_name: str


class LogOnRequest(BaseModel):
    """Body of a log-on request."""

    email_address: Optional[str] = None
    password: Optional[str] = None
