"""
Shared infrastructure for the Gatehouse backend.

Settings, the exception hierarchy, the Supabase client factory and the
AuthenticatedUser model. Profile and session logic lives in modules/.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    AuthenticationError,
    ConflictError,
    ExternalServiceError,
    GatehouseError,
    NotFoundError,
    ValidationError,
)
from .models import AuthenticatedUser
from .repository import BaseRepository

__all__ = [
    "AuthenticatedUser",
    "AuthenticationError",
    "BaseRepository",
    "ConflictError",
    "ExternalServiceError",
    "GatehouseError",
    "NotFoundError",
    "Settings",
    "ValidationError",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
]
