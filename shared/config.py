"""
Centralized configuration for the Gatehouse backend.

All settings are loaded from environment variables with sensible defaults.
Collaborator-specific settings are namespaced (e.g., SUPABASE_*, JWT_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Gatehouse API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Credential store
    credential_store: Literal["memory", "supabase"] = "memory"
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    profiles_table: str = "profiles"

    # Sessions
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_audience: str = "gatehouse"
    jwt_issuer: str = "gatehouse-api"
    session_ttl_seconds: int = 3600

    # Policy
    require_confirmed_email: bool = True


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
