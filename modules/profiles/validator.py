"""
Profile validation rules.

Pure functions: they look only at the candidate and at the existing
record the caller already fetched.
"""

from typing import Optional

from .models import FailureReason, NewProfile, Profile, ProfileChanges

REQUIRED_FIELDS = ("email", "password", "full_name", "birthday")


def normalize_email(email: Optional[str]) -> str:
    """E-mail addresses are compared and stored case-insensitively."""
    return (email or "").strip().lower()


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def missing_required_fields(candidate: NewProfile) -> list[str]:
    """Names of the required signup fields that are absent or blank."""
    return [name for name in REQUIRED_FIELDS if _is_blank(getattr(candidate, name))]


def blanked_required_fields(changes: ProfileChanges) -> list[str]:
    """Names of required fields an update explicitly sets to a blank value."""
    return [
        name
        for name in REQUIRED_FIELDS
        if name in changes.model_fields_set and _is_blank(getattr(changes, name))
    ]


def classify_existing_profile(existing: Profile) -> list[FailureReason]:
    """
    Reasons a signup collides with an existing profile.

    Always starts with DUPLICATE_EMAIL, followed by INACTIVE_PROFILE and
    UNCONFIRMED_EMAIL when they apply, in that order.
    """
    reasons = [FailureReason.DUPLICATE_EMAIL]
    if existing.is_deactivated:
        reasons.append(FailureReason.INACTIVE_PROFILE)
    if not existing.is_email_confirmed:
        reasons.append(FailureReason.UNCONFIRMED_EMAIL)
    return reasons


def validate_new_profile(
    candidate: NewProfile,
    existing: Optional[Profile],
) -> list[FailureReason]:
    """
    Evaluate a signup candidate against the profile already holding its e-mail.

    Returns an empty list when the profile may be created.
    """
    if missing_required_fields(candidate):
        return [FailureReason.MISSING_REQUIRED]
    if existing is not None:
        return classify_existing_profile(existing)
    return []

