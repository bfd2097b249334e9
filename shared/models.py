"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Resolved from a verified session token plus the profile it points to,
    and made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="Profile ID")
    email: str = Field(..., description="Normalized e-mail address")
    full_name: str = Field(default="", description="Display name")
    email_verified: bool = Field(default=False, description="Whether email is confirmed")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
