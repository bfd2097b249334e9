"""
Profile service implementation.

Registers profiles, confirms e-mail addresses, applies updates and
deactivations. Every operation reports its outcome as FailureReason
values; infrastructure failures are logged and reported as UNKNOWN.
"""

import logging
import secrets
from typing import Any, Optional

from shared.exceptions import GatehouseError

from .exceptions import DuplicateEmailError
from .interfaces import ICredentialStore, IPasswordHasher, IProfileService
from .models import (
    ClientProfile,
    FailureReason,
    NewProfile,
    Profile,
    ProfileChanges,
)
from .validator import (
    blanked_required_fields,
    missing_required_fields,
    normalize_email,
    validate_new_profile,
)

logger = logging.getLogger(__name__)


def generate_confirmation_token() -> str:
    return secrets.token_urlsafe(32)


class ProfileService(IProfileService):
    """
    Implementation of the profile service.

    Depends only on the credential store and password hasher interfaces.
    """

    def __init__(self, store: ICredentialStore, hasher: IPasswordHasher):
        self._store = store
        self._hasher = hasher

    async def create_new_profile(self, candidate: NewProfile) -> list[FailureReason]:
        """
        Register a new profile.

        Checks run in a fixed order: required fields first (no lookup when
        one is missing), then the profile already holding the e-mail. A
        duplicate reports DUPLICATE_EMAIL followed by INACTIVE_PROFILE and
        UNCONFIRMED_EMAIL when they apply to the existing profile.
        """
        if missing_required_fields(candidate):
            return [FailureReason.MISSING_REQUIRED]

        email = normalize_email(candidate.email)
        try:
            existing = await self._store.find_by_email(email)
            reasons = validate_new_profile(candidate, existing)
            if reasons:
                logger.debug("Signup rejected: %s", [r.value for r in reasons])
                return reasons

            password_hash = await self._hasher.hash(candidate.password)
            created = await self._store.create({
                "email": email,
                "password_hash": password_hash,
                "full_name": candidate.full_name.strip(),
                "birthday": candidate.birthday,
                "is_email_confirmed": False,
                "is_deactivated": False,
                "email_confirmation_token": generate_confirmation_token(),
            })
        except DuplicateEmailError:
            # Lost a race with a concurrent signup for the same address.
            logger.debug("Signup rejected by store uniqueness constraint")
            return [FailureReason.DUPLICATE_EMAIL]
        except GatehouseError:
            logger.exception("Failed to create profile")
            return [FailureReason.UNKNOWN]

        logger.info("Created profile %s", created.id)
        return [FailureReason.NONE]

    async def confirm_profile_email_address(
        self,
        email: Optional[str],
        confirmation_token: Optional[str],
    ) -> FailureReason:
        """
        Confirm the e-mail address of a profile.

        A wrong token reports NON_EXISTENT_PROFILE, the same as an unknown
        e-mail: the pair identifies the profile to confirm.
        """
        try:
            profile = await self._store.find_by_email(normalize_email(email))
            if profile is None:
                return FailureReason.NON_EXISTENT_PROFILE
            if profile.is_deactivated:
                return FailureReason.INACTIVE_PROFILE
            if profile.is_email_confirmed:
                return FailureReason.DUPLICATE_EMAIL
            if not self._token_matches(profile, confirmation_token):
                return FailureReason.NON_EXISTENT_PROFILE

            updated = await self._store.update(profile.id, {
                "is_email_confirmed": True,
                "email_confirmation_token": None,
            })
        except GatehouseError:
            logger.exception("Failed to confirm e-mail address")
            return FailureReason.UNKNOWN

        if updated is None:
            return FailureReason.NON_EXISTENT_PROFILE

        logger.info("Confirmed e-mail address of profile %s", profile.id)
        return FailureReason.NONE

    async def update_profile(self, profile_id: str, changes: ProfileChanges) -> FailureReason:
        """
        Apply a partial update to an existing profile.

        Changing the e-mail starts the new address unconfirmed with a fresh
        confirmation token, and is refused when another profile holds it.
        """
        try:
            profile = await self._store.find_by_id(profile_id)
            if profile is None:
                return FailureReason.NON_EXISTENT_PROFILE
            if profile.is_deactivated:
                return FailureReason.INACTIVE_PROFILE
            if blanked_required_fields(changes):
                return FailureReason.MISSING_REQUIRED

            data = await self._build_update(profile, changes)
            if data is None:
                return FailureReason.DUPLICATE_EMAIL
            if not data:
                return FailureReason.NONE

            updated = await self._store.update(profile_id, data)
        except DuplicateEmailError:
            return FailureReason.DUPLICATE_EMAIL
        except GatehouseError:
            logger.exception("Failed to update profile %s", profile_id)
            return FailureReason.UNKNOWN

        if updated is None:
            return FailureReason.NON_EXISTENT_PROFILE

        logger.info("Updated profile %s (%s)", profile_id, ", ".join(sorted(data)))
        return FailureReason.NONE

    async def deactivate_profile(self, profile_id: str) -> FailureReason:
        """Deactivate a profile. Deactivating twice is not an error."""
        try:
            updated = await self._store.update(profile_id, {"is_deactivated": True})
        except GatehouseError:
            logger.exception("Failed to deactivate profile %s", profile_id)
            return FailureReason.UNKNOWN

        if updated is None:
            return FailureReason.NON_EXISTENT_PROFILE

        logger.info("Deactivated profile %s", profile_id)
        return FailureReason.NONE

    async def get_profile(self, profile_id: str) -> Optional[Profile]:
        return await self._store.find_by_id(profile_id)

    def clean_profile_for_client(self, profile: Profile) -> ClientProfile:
        """Project a profile for clients, dropping the password hash and confirmation token."""
        return ClientProfile(
            id=profile.id,
            email=profile.email,
            full_name=profile.full_name,
            birthday=profile.birthday,
            is_email_confirmed=profile.is_email_confirmed,
            is_deactivated=profile.is_deactivated,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _token_matches(self, profile: Profile, supplied: Optional[str]) -> bool:
        expected = profile.email_confirmation_token
        if not expected or not supplied:
            return False
        return secrets.compare_digest(expected.encode(), supplied.encode())

    async def _build_update(
        self,
        profile: Profile,
        changes: ProfileChanges,
    ) -> Optional[dict[str, Any]]:
        """
        Translate requested changes into store fields.

        Returns None when the new e-mail belongs to another profile.
        """
        requested = changes.model_dump(exclude_unset=True)
        data: dict[str, Any] = {}

        if "email" in requested:
            email = normalize_email(requested["email"])
            if email != profile.email:
                holder = await self._store.find_by_email(email)
                if holder is not None and holder.id != profile.id:
                    return None
                data["email"] = email
                data["is_email_confirmed"] = False
                data["email_confirmation_token"] = generate_confirmation_token()

        if "password" in requested:
            data["password_hash"] = await self._hasher.hash(requested["password"])

        if "full_name" in requested:
            data["full_name"] = requested["full_name"].strip()

        if "birthday" in requested:
            data["birthday"] = requested["birthday"]

        return data
