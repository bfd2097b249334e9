"""
Session token issuing with PyJWT.

Tokens are HS256 JWTs carrying a unique "jti" per session. Log-out adds
the jti to a revocation list until the token would have expired anyway.
"""

import asyncio
import time
import uuid
from typing import Any, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenSigningError,
)
from .models import SessionClaims


class RevocationList:
    """
    Revoked session IDs with their expiry timestamps.

    Shared by every request in the process; writes are serialized with a
    lock and expired entries are dropped as new ones arrive.
    """

    def __init__(self) -> None:
        self._entries: dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def add(self, jti: str, expires_at: int) -> None:
        async with self._lock:
            now = int(time.time())
            for key in [k for k, exp in self._entries.items() if exp < now]:
                del self._entries[key]
            self._entries[jti] = expires_at

    async def contains(self, jti: str) -> bool:
        return jti in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class JWTTokenIssuer:
    """
    Implementation of ITokenIssuer using PyJWT.

    An empty secret leaves the issuer unconfigured: signing and
    verification both raise TokenSigningError.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        audience: str = "gatehouse",
        issuer: str = "gatehouse-api",
        revocations: Optional[RevocationList] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience
        self._issuer = issuer
        self._revocations = revocations if revocations is not None else RevocationList()

    async def sign(self, claims: dict[str, Any], ttl_seconds: int) -> str:
        if not self._secret:
            raise TokenSigningError()

        now = int(time.time())
        payload = {
            **claims,
            "jti": uuid.uuid4().hex,
            "iat": now,
            "exp": now + ttl_seconds,
            "aud": self._audience,
            "iss": self._issuer,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except jwt.PyJWTError as e:
            raise TokenSigningError(f"Failed to sign session token: {e}") from e

    async def verify(self, token: Optional[str]) -> SessionClaims:
        if not token:
            raise MissingTokenError()
        if not self._secret:
            raise TokenSigningError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": ["exp", "iat", "sub", "jti"]},
            )
            return SessionClaims(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))
        except PydanticValidationError:
            raise InvalidTokenError("Malformed token claims")

    async def revoke(self, claims: SessionClaims) -> None:
        await self._revocations.add(claims.jti, claims.exp)

    async def is_revoked(self, jti: str) -> bool:
        return await self._revocations.contains(jti)
