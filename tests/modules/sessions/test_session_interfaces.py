from modules.sessions.interfaces import IAuthenticationService, ITokenIssuer
from modules.sessions.service import AuthenticationService
from modules.sessions.tokens import JWTTokenIssuer


class TestSessionInterfaces:
    def test_issuer_implements_interface(self, token_issuer):
        assert isinstance(token_issuer, ITokenIssuer)
        for method in ["sign", "verify", "revoke", "is_revoked"]:
            assert callable(getattr(JWTTokenIssuer, method))

    def test_service_implements_interface(self, auth_service):
        """AuthenticationService should have all IAuthenticationService methods."""
        assert isinstance(auth_service, IAuthenticationService)
        for method in ["log_on", "authenticate", "log_out"]:
            assert hasattr(IAuthenticationService, method)
            assert callable(getattr(AuthenticationService, method))
