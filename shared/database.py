"""
Supabase client factory.

The production credential store is the only consumer. It reads and writes
password hashes, so it connects with the service-role key and bypasses
row level security.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings
from .exceptions import ExternalServiceError

_service_client: Optional[Client] = None


def get_supabase_client(settings: Optional[Settings] = None) -> Client:
    """
    Return the shared service-role client, creating it on first use.

    Raises:
        ExternalServiceError: SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = settings or get_settings()
        missing = [
            name
            for name, value in (
                ("SUPABASE_URL", settings.supabase_url),
                ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
            )
            if not value
        ]
        if missing:
            raise ExternalServiceError(
                "Supabase configuration missing",
                service="supabase",
                details={"missing": missing},
            )
        _service_client = create_client(settings.supabase_url, settings.supabase_service_role_key)

    return _service_client


def reset_client_cache() -> None:
    """Drop the cached client so the next call reconnects with current settings."""
    global _service_client
    _service_client = None
