"""
Credential store implementations.

Provides both in-memory (for testing and development) and Supabase-backed
(for production) implementations of ICredentialStore.
"""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from shared.repository import BaseRepository

from .exceptions import CredentialStoreError, DuplicateEmailError
from .models import Profile

# PostgreSQL unique_violation
UNIQUE_VIOLATION = "23505"


class InMemoryCredentialStore:
    """
    Credential store held in process memory.

    E-mail uniqueness is enforced under a lock, so concurrent creates for
    the same address have exactly one winner. Profiles are copied on the
    way in and out; callers never share state with the store.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}
        self._ids_by_email: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def find_by_email(self, email: str) -> Optional[Profile]:
        profile_id = self._ids_by_email.get(email)
        if profile_id is None:
            return None
        return self._profiles[profile_id].model_copy()

    async def find_by_id(self, profile_id: str) -> Optional[Profile]:
        profile = self._profiles.get(profile_id)
        return profile.model_copy() if profile else None

    async def create(self, profile: dict[str, Any]) -> Profile:
        async with self._lock:
            email = profile["email"]
            if email in self._ids_by_email:
                raise DuplicateEmailError(email)

            now = datetime.now(timezone.utc)
            stored = Profile(
                **profile,
                id=str(uuid.uuid4()),
                created_at=now,
                updated_at=now,
            )
            self._profiles[stored.id] = stored
            self._ids_by_email[email] = stored.id
            return stored.model_copy()

    async def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        async with self._lock:
            current = self._profiles.get(profile_id)
            if current is None:
                return None

            new_email = changes.get("email", current.email)
            if new_email != current.email:
                owner = self._ids_by_email.get(new_email)
                if owner is not None and owner != profile_id:
                    raise DuplicateEmailError(new_email)

            updated = current.model_copy(
                update={**changes, "updated_at": datetime.now(timezone.utc)}
            )
            if new_email != current.email:
                del self._ids_by_email[current.email]
                self._ids_by_email[new_email] = profile_id
            self._profiles[profile_id] = updated
            return updated.model_copy()

    async def clear(self) -> None:
        """Remove every profile."""
        async with self._lock:
            self._profiles.clear()
            self._ids_by_email.clear()


class SupabaseCredentialStore(BaseRepository[Profile]):
    """
    Credential store backed by a Supabase table.

    Uniqueness is enforced by the unique index on the e-mail column;
    a unique violation on write surfaces as DuplicateEmailError. Queries
    run in a worker thread because the supabase client blocks, and any
    PostgREST or transport failure surfaces as CredentialStoreError.
    """

    def __init__(self, db: Client, table: str = "profiles") -> None:
        super().__init__(db, table)

    async def find_by_email(self, email: str) -> Optional[Profile]:
        query = self._rows().select("*").eq("email", email)
        return self._first(await self._execute(query, "Failed to look up profile by e-mail"))

    async def find_by_id(self, profile_id: str) -> Optional[Profile]:
        query = self._rows().select("*").eq("id", profile_id)
        return self._first(await self._execute(query, "Failed to look up profile by id"))

    async def create(self, profile: dict[str, Any]) -> Profile:
        query = self._rows().insert(self._to_row(profile))
        result = await self._execute(query, "Failed to create profile", email=profile["email"])

        created = self._first(result)
        if created is None:
            raise CredentialStoreError("Profile insert returned no row")
        return created

    async def update(self, profile_id: str, changes: dict[str, Any]) -> Optional[Profile]:
        data = self._to_row(changes)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()
        query = self._rows().update(data).eq("id", profile_id)
        result = await self._execute(query, "Failed to update profile", email=changes.get("email", ""))

        return self._first(result)

    async def _execute(self, query: Any, failure: str, email: Optional[str] = None) -> Any:
        """
        Run a query off the event loop.

        A unique violation becomes DuplicateEmailError when the query
        writes an e-mail; every other failure becomes CredentialStoreError.
        """
        try:
            return await asyncio.to_thread(query.execute)
        except APIError as e:
            if email is not None and e.code == UNIQUE_VIOLATION:
                raise DuplicateEmailError(email) from e
            raise CredentialStoreError(failure, e.message) from e
        except httpx.HTTPError as e:
            raise CredentialStoreError(failure, str(e)) from e

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _to_row(self, fields: dict[str, Any]) -> dict[str, Any]:
        row = dict(fields)
        if row.get("birthday") is not None:
            row["birthday"] = row["birthday"].isoformat()
        return row

    def _map_row(self, data: dict[str, Any]) -> Profile:
        return Profile(
            id=str(data["id"]),
            email=data["email"],
            password_hash=data["password_hash"],
            full_name=data["full_name"],
            birthday=data["birthday"],
            is_email_confirmed=data.get("is_email_confirmed", False),
            is_deactivated=data.get("is_deactivated", False),
            email_confirmation_token=data.get("email_confirmation_token"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
