"""
Blog API Backend: Application Configuration
============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; checked again during app startup.

The Supabase credentials accept both the server-side names
(SUPABASE_URL / SUPABASE_ANON_KEY) and the names the Vite front end uses
(VITE_SUPABASE_URL / VITE_SUPABASE_ANON_KEY), so one .env file can serve
both halves of the project.
"""

from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a development default. Missing Supabase credentials
    are tolerated at startup: the server still answers health checks and
    preflight requests, and data routes answer with a configuration error.
    """

    # ── Supabase ──────────────────────────────────────────────────────────
    # What: Project URL, e.g. https://<project-ref>.supabase.co
    supabase_url: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_URL", "VITE_SUPABASE_URL"),
        description="Base URL of the Supabase project",
    )

    # What: Public anon key sent as both `apikey` and bearer token
    supabase_anon_key: str = Field(
        default="",
        validation_alias=AliasChoices("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY"),
        description="Supabase anon (public) API key",
    )

    # What: Seconds before an outbound PostgREST call is abandoned
    supabase_timeout: float = Field(default=10.0, gt=0, le=120)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Single origin (or "*") echoed in Access-Control-Allow-Origin.
    # Access-Control-Allow-Credentials: true is always sent, and browsers
    # drop credentialed responses whose allowed origin is "*". Set the
    # front end's exact origin when requests carry cookies or auth headers.
    cors_origin: str = Field(default="*")

    # Comma-separated list, parsed by `cors_allow_headers_list`
    cors_allow_headers: str = Field(default="Authorization, Content-Type")

    @property
    def cors_allow_headers_list(self) -> List[str]:
        """Splits the comma-separated allowed headers into a list."""
        return [h.strip() for h in self.cors_allow_headers.split(",") if h.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # What: Deployment environment; "production" disables the dev routes
    app_env: str = Field(default="development")

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

    @field_validator("supabase_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalizes the project URL so `/rest/v1` joins cleanly."""
        return v.strip().rstrip("/")

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def supabase_configured(self) -> bool:
        """True when both Supabase credentials are present."""
        return bool(self.supabase_url and self.supabase_anon_key)

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

    def validate_backend_credentials(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Collects every missing setting and raises one ValueError.
        """
        errors = []
        if not self.supabase_url:
            errors.append("SUPABASE_URL (or VITE_SUPABASE_URL) is not set.")
        if not self.supabase_anon_key:
            errors.append("SUPABASE_ANON_KEY (or VITE_SUPABASE_ANON_KEY) is not set.")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
