"""
Covid Portal Backend - Application Configuration
==================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a default `settings` object.
Who:   Passed into create_app(); the app keeps its own copy on app.state so
       handlers never reach for module-level configuration.
When:  Loaded once at module import time; validated before app starts.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Production deployments MUST
    override JWT_SECRET.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///<path to db file>
    # The schema (user, state, district) is provisioned outside this service.
    database_url: str = Field(
        default="sqlite+aiosqlite:///./covid19IndiaPortal.db",
        description="Async SQLAlchemy URL of the portal database",
    )

    # ── Token Signing ─────────────────────────────────────────────────────
    # What: Shared secret used to sign and verify bearer tokens
    # Tokens carry no expiry, so rotating this value is the only way to
    # invalidate previously issued tokens.
    jwt_secret: str = Field(default="MY_SECRET_TOKEN", min_length=1)
    jwt_algorithm: str = Field(default="HS256")

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        """Only HMAC algorithms make sense with a shared secret."""
        upper = v.upper()
        if upper not in {"HS256", "HS384", "HS512"}:
            raise ValueError(f"Invalid jwt_algorithm '{v}'. Must be an HMAC algorithm (HS256/HS384/HS512)")
        return upper

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # JWT_SECRET and jwt_secret both work
    }

    def validate_required_for_production(self) -> List[str]:
        """
        What:  Returns warnings for settings that are unsafe outside development.
        When:  Called during app startup (lifespan); the app still starts.
        """
        warnings = []
        if self.jwt_secret == "MY_SECRET_TOKEN":
            warnings.append("JWT_SECRET is the development default; set a private value in production")
        return warnings


# Default instance used when create_app() is not given explicit settings
settings = Settings()
