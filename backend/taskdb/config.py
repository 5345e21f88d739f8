"""
Provisioner configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Provisioner settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017/myapp"
    mongo_db: str = "myapp"  # Used when the URI names no database
    mongo_timeout_ms: int = 5000

    # Application database user (provisioned only when both are set)
    app_db_user: Optional[str] = None
    app_db_password: Optional[str] = None
    app_db_roles: list[str] = ["readWrite"]
    app_db_auth_source: str = "admin"  # Database the app user authenticates against

    # Reconciliation
    seed_demo_data: bool = True
    replace_conflicting_indexes: bool = False

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
