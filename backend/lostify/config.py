"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.

Security-critical values (JWT_SECRET, PASSWORD_PEPPER) are read directly
from the environment by the auth module at call time.
"""

from typing import Optional
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults for development.

    Environment Variables:
        DATABASE_URL: SQLAlchemy connection string
        ALLOWED_EMAIL_DOMAIN: Institutional domain required at signup
        ADMIN_USERNAME: Username of the seeded admin account
        ADMIN_EMAIL: Email of the seeded admin account
        ADMIN_PASSWORD: Password of the seeded admin account
        MATCH_THRESHOLD: Minimum score for a pairing to be reported
        CORS_ORIGINS: Comma-separated list of allowed origins
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite:///./lostify.db"

    # Accounts
    ALLOWED_EMAIL_DOMAIN: str = "sst.scaler.com"
    ADMIN_USERNAME: Optional[str] = None
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    # Matching
    MATCH_THRESHOLD: float = 0.3

    # Application
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def admin_configured(self) -> bool:
        return bool(self.ADMIN_USERNAME and self.ADMIN_EMAIL and self.ADMIN_PASSWORD)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
