"""
Authentication service implementation.

Checks credentials against the credential store, issues session tokens,
maps tokens back to users and revokes them on log-out.
"""

import logging
import secrets
from typing import Optional

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser
from modules.profiles.interfaces import ICredentialStore, IPasswordHasher
from modules.profiles.models import Profile
from modules.profiles.validator import normalize_email

from .exceptions import LogOutError, RevokedTokenError, UserNotFoundError
from .interfaces import IAuthenticationService, ITokenIssuer
from .models import (
    AuthenticatedSession,
    LogOnInfo,
    LogOnResult,
    SessionClaims,
)

logger = logging.getLogger(__name__)


class AuthenticationService(IAuthenticationService):
    """
    Implementation of the authentication service.

    Every log-on failure returns None. When no eligible profile exists a
    password check still runs against a throwaway hash, so the response
    time does not reveal whether the e-mail is registered.
    """

    def __init__(
        self,
        store: ICredentialStore,
        hasher: IPasswordHasher,
        issuer: ITokenIssuer,
        settings: Optional[Settings] = None,
    ):
        self._store = store
        self._hasher = hasher
        self._issuer = issuer
        self._settings = settings or get_settings()
        self._dummy_hash: Optional[str] = None

    async def log_on(self, info: LogOnInfo) -> Optional[LogOnResult]:
        email = normalize_email(info.email)
        password = info.password or ""
        profile = await self._store.find_by_email(email) if email and password else None
        if profile is None or not self._may_log_on(profile):
            await self._hasher.verify(password, await self._get_dummy_hash())
            logger.debug("Log-on refused")
            return None

        if not await self._hasher.verify(password, profile.password_hash):
            logger.debug("Log-on refused")
            return None

        token = await self._issuer.sign(
            {"sub": profile.id, "email": profile.email},
            self._settings.session_ttl_seconds,
        )
        logger.info("Profile %s logged on", profile.id)
        return LogOnResult(token=token, profile_id=profile.id)

    async def authenticate(self, token: Optional[str]) -> AuthenticatedSession:
        claims = await self._issuer.verify(token)
        if await self._issuer.is_revoked(claims.jti):
            raise RevokedTokenError()

        profile = await self._store.find_by_id(claims.sub)
        if profile is None or profile.is_deactivated:
            raise UserNotFoundError(claims.sub)

        return AuthenticatedSession(
            user=AuthenticatedUser(
                id=profile.id,
                email=profile.email,
                full_name=profile.full_name,
                email_verified=profile.is_email_confirmed,
            ),
            claims=claims,
        )

    async def log_out(self, user: AuthenticatedUser, auth_info: SessionClaims) -> bool:
        if auth_info.sub != user.id:
            logger.warning("Refused to log out session %s for another user", auth_info.jti)
            return False

        try:
            await self._issuer.revoke(auth_info)
        except Exception as e:
            logger.exception("Failed to revoke session %s", auth_info.jti)
            raise LogOutError(f"Failed to revoke session: {e}") from e

        logger.info("Profile %s logged out", user.id)
        return True

    def _may_log_on(self, profile: Profile) -> bool:
        if profile.is_deactivated:
            return False
        if self._settings.require_confirmed_email and not profile.is_email_confirmed:
            return False
        return True

    async def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = await self._hasher.hash(secrets.token_urlsafe(16))
        return self._dummy_hash
