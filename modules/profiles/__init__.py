"""
Profiles module.

Handles signup validation, e-mail confirmation, profile updates and
deactivation, and the credential store the sessions module also reads.

Public API:
- IProfileService: Interface for profile operations
- ICredentialStore, IPasswordHasher: Collaborator interfaces
- FailureReason: Outcome codes of profile operations
- Profile, NewProfile, ProfileChanges, ClientProfile: Data models
- Store exceptions: DuplicateEmailError, CredentialStoreError, PasswordHashingError
"""

from .interfaces import ICredentialStore, IPasswordHasher, IProfileService
from .models import (
    ClientProfile,
    FailureReason,
    NewProfile,
    Profile,
    ProfileChanges,
)
from .exceptions import (
    CredentialStoreError,
    DuplicateEmailError,
    PasswordHashingError,
)

__all__ = [
    # Interfaces
    "ICredentialStore",
    "IPasswordHasher",
    "IProfileService",
    # Models
    "ClientProfile",
    "FailureReason",
    "NewProfile",
    "Profile",
    "ProfileChanges",
    # Exceptions
    "CredentialStoreError",
    "DuplicateEmailError",
    "PasswordHashingError",
]
