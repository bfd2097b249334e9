"""
Profiles module data models.

These models define the persisted profile record, the signup and update
payloads, the client-safe projection and the failure reason taxonomy.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class FailureReason(str, Enum):
    """
    Outcome codes for profile operations.

    Creation may report several of these at once; every other operation
    reports exactly one.
    """

    NONE = "none"
    DUPLICATE_EMAIL = "duplicate_email"
    INACTIVE_PROFILE = "inactive_profile"
    UNCONFIRMED_EMAIL = "unconfirmed_email"
    MISSING_REQUIRED = "missing_required"
    NON_EXISTENT_PROFILE = "non_existent_profile"
    UNKNOWN = "unknown"


class Profile(BaseModel):
    """
    A persisted user profile.

    Holds credentials and metadata. Never returned to clients as-is;
    use ProfileService.clean_profile_for_client.
    """

    id: str = Field(..., description="Profile ID (UUID)")
    email: str = Field(..., description="Normalized e-mail address")
    password_hash: str = Field(..., description="Password hash")
    full_name: str = Field(..., description="Full name")
    birthday: date = Field(..., description="Date of birth")
    is_email_confirmed: bool = Field(default=False)
    is_deactivated: bool = Field(default=False)
    email_confirmation_token: Optional[str] = Field(
        None, description="One-time e-mail confirmation secret, cleared once used"
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NewProfile(BaseModel):
    """
    Signup candidate.

    Every field is optional here so that a missing field surfaces as
    FailureReason.MISSING_REQUIRED instead of a request validation error.
    """

    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    birthday: Optional[date] = None


class ProfileChanges(BaseModel):
    """Partial update; only the fields explicitly set are applied."""

    email: Optional[str] = None
    password: Optional[str] = None
    full_name: Optional[str] = None
    birthday: Optional[date] = None


class ClientProfile(BaseModel):
    """Client-safe projection of a profile (no password hash, no token)."""

    id: str
    email: str
    full_name: str
    birthday: date
    is_email_confirmed: bool
    is_deactivated: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ConfirmEmailRequest(BaseModel):
    """Body of an e-mail confirmation request."""

    email_address: Optional[str] = None
    confirmation_token: Optional[str] = None
