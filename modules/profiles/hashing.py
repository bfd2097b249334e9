"""Password hashing backed by Argon2."""

import asyncio

from argon2 import PasswordHasher, exceptions as argon_exc

from .exceptions import PasswordHashingError


class Argon2PasswordHasher:
    """
    Argon2id hashing.

    The Argon2 work runs in a worker thread so a slow hash does not stall
    other requests on the event loop.
    """

    def __init__(self, hasher: PasswordHasher | None = None):
        self._ph = hasher or PasswordHasher()

    async def hash(self, plaintext: str) -> str:
        try:
            return await asyncio.to_thread(self._ph.hash, plaintext)
        except argon_exc.HashingError as e:
            raise PasswordHashingError(str(e)) from e

    async def verify(self, plaintext: str, hashed: str) -> bool:
        if not hashed:
            return False
        try:
            return await asyncio.to_thread(self._ph.verify, hashed, plaintext)
        except (argon_exc.VerifyMismatchError, argon_exc.InvalidHashError):
            return False
        except argon_exc.VerificationError as e:
            raise PasswordHashingError(str(e)) from e
