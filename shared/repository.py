"""
Base repository class for Supabase tables.

Repositories own one table each and translate rows into pydantic models.
"""

from typing import Any, Generic, Optional, TypeVar

from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for table-backed repositories.

    Subclasses supply _map_row to turn a row into their model and build
    their domain-specific queries on top of _rows and _first.

    Example:
        class ProfileRepository(BaseRepository[Profile]):
            def _map_row(self, data: dict[str, Any]) -> Profile:
                return Profile(**data)

            def get_by_email(self, email: str) -> Optional[Profile]:
                return self._first(self._rows().select("*").eq("email", email).execute())
    """

    def __init__(self, db: Client, table: str) -> None:
        self._db = db
        self._table = table

    def _rows(self):
        """Query builder for this repository's table."""
        return self._db.table(self._table)

    def _first(self, result: Any) -> Optional[T]:
        """Map the first row of a query result, or None when it has none."""
        if not result.data:
            return None
        return self._map_row(result.data[0])

    def _map_row(self, data: dict[str, Any]) -> T:
        raise NotImplementedError
