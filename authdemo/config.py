"""Configuration management for the application."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (SQLite locally, a PostgreSQL URL in production)
    database_url: str = Field(default="sqlite:///./authdemo.db")

    # JWT
    jwt_secret: str = Field(default="change-me-in-production")
    jwt_algorithm: str = Field(default="HS256")
    session_ttl_minutes: int = Field(default=1440, gt=0)  # 24 hours

    # Session cookie
    session_cookie_name: str = Field(default="auth-token")
    cookie_secure: bool | None = Field(default=None)
    cookie_samesite: Literal["lax", "strict", "none"] = Field(default="lax")

    # Password hashing work factor
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Report "email not found" and "wrong password" as one error
    unify_login_errors: bool = Field(default=False)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == "change-me-in-production":  # noqa: S105
                raise ValueError("JWT_SECRET must be changed in production")
            if self.database_url.startswith("sqlite"):
                raise ValueError("DATABASE_URL should not use SQLite in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def secure_cookies(self) -> bool:
        """Whether the session cookie is restricted to HTTPS."""
        if self.cookie_secure is not None:
            return self.cookie_secure
        return self.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
