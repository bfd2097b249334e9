from modules.profiles.hashing import Argon2PasswordHasher
from modules.profiles.interfaces import ICredentialStore, IPasswordHasher, IProfileService
from modules.profiles.service import ProfileService
from modules.profiles.store import InMemoryCredentialStore, SupabaseCredentialStore


class TestProfileInterfaces:
    def test_store_implementations(self, credential_store):
        """Both credential stores should satisfy ICredentialStore."""
        assert isinstance(credential_store, ICredentialStore)
        for method in ["find_by_email", "find_by_id", "create", "update"]:
            assert callable(getattr(SupabaseCredentialStore, method))
        assert issubclass(InMemoryCredentialStore, ICredentialStore)

    def test_hasher_implements_interface(self, password_hasher):
        assert isinstance(password_hasher, IPasswordHasher)
        assert issubclass(Argon2PasswordHasher, IPasswordHasher)

    def test_service_implements_interface(self, profile_service):
        """ProfileService should have all IProfileService methods."""
        assert isinstance(profile_service, IProfileService)
        methods = [
            "create_new_profile",
            "confirm_profile_email_address",
            "update_profile",
            "deactivate_profile",
            "get_profile",
            "clean_profile_for_client",
        ]
        for method in methods:
            assert hasattr(IProfileService, method)
            assert callable(getattr(ProfileService, method))
