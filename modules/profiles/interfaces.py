"""
Profiles module interfaces.

Other modules should depend on these protocols, not on the concrete
implementations. The credential store and password hasher are the
collaborators the profile and session services are built on.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from .models import ClientProfile, FailureReason, NewProfile, Profile, ProfileChanges


@runtime_checkable
class ICredentialStore(Protocol):
    """
    Interface for persisting profiles.

    Implementations must enforce e-mail uniqueness themselves and fail
    distinguishably: absent records are None, conflicts raise
    DuplicateEmailError, anything else raises CredentialStoreError.
    E-mail arguments are already normalized by the caller.
    """

    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Return the profile with this e-mail, or None."""
        ...

    async def find_by_id(self, profile_id: str) -> Optional[Profile]:
        """Return the profile with this ID, or None."""
        ...

    async def create(self, profile: dict[str, Any]) -> Profile:
        """
        Persist a new profile.

        Args:
            profile: Profile fields without id or timestamps

        Returns:
            The stored Profile with its generated ID

        Raises:
            DuplicateEmailError: If the e-mail is already taken
        """
        ...

    async def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        """
        Apply changes to an existing profile.

        Returns:
            The updated Profile, or None if no profile has this ID

        Raises:
            DuplicateEmailError: If an e-mail change collides with another profile
        """
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """Interface for password hashing."""

    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext password."""
        ...

    async def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash."""
        ...


@runtime_checkable
class IProfileService(Protocol):
    """
    Interface for profile operations.

    Expected outcomes are returned as FailureReason values;
    none of these methods raise for domain failures.
    """

    async def create_new_profile(self, candidate: NewProfile) -> list[FailureReason]:
        """
        Register a new profile.

        Returns:
            Ordered failure reasons; [FailureReason.NONE] on success
        """
        ...

    async def confirm_profile_email_address(
        self, email: Optional[str], confirmation_token: Optional[str]
    ) -> FailureReason:
        """Confirm the e-mail of the profile matching e-mail and token."""
        ...

    async def update_profile(self, profile_id: str, changes: ProfileChanges) -> FailureReason:
        """Apply a partial update to a profile."""
        ...

    async def deactivate_profile(self, profile_id: str) -> FailureReason:
        """Deactivate a profile."""
        ...

    async def get_profile(self, profile_id: str) -> Optional[Profile]:
        """Get a profile by ID."""
        ...

    def clean_profile_for_client(self, profile: Profile) -> ClientProfile:
        """Project a profile for presentation to clients."""
        ...
