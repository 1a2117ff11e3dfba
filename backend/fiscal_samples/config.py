"""
FiscalAPI Samples — Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; validated before app starts.

The FiscalAPI credentials (API key and tenant) are issued per account from the
FiscalAPI dashboard. Without them every client call comes back as a failed
envelope (401 from the backend), which the demo routes surface as HTTP 400.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development except the
    FiscalAPI credentials, which must be provided to get successful calls.
    """

    # ── FiscalAPI ─────────────────────────────────────────────────────────
    # Test environment by default; production is https://live.fiscalapi.com
    fiscalapi_url: str = Field(
        default="https://test.fiscalapi.com",
        description="Base URL of the FiscalAPI REST service",
    )
    fiscalapi_api_key: str = Field(default="", description="X-API-KEY header value")
    fiscalapi_tenant: str = Field(default="", description="X-TENANT-KEY header value")
    fiscalapi_time_zone: str = Field(
        default="America/Mexico_City",
        description="IANA time zone sent as X-TIME-ZONE; dates are interpreted in it",
    )
    # Seconds for connect + read. Package downloads can be a few MB of base64.
    fiscalapi_timeout: float = Field(default=60.0, gt=0, le=600)

    # ── Downloaded Files ──────────────────────────────────────────────────
    # What: Directory where package / raw SAT request / raw SAT response
    # files are written after base64 decoding.
    downloads_root: str = Field(default="./facturas")

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

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

    @field_validator("fiscalapi_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # ── Retry Configuration ───────────────────────────────────────────────
    # What: Tenacity retry settings for transport failures (connect errors,
    # timeouts) against FiscalAPI. HTTP error statuses are never retried;
    # they come back as failed envelopes.
    retry_max_attempts: int = Field(default=3, ge=1, le=10)
    retry_min_wait: int = Field(default=1, ge=0, le=30)
    retry_max_wait: int = Field(default=10, ge=1, le=120)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # FISCALAPI_URL and fiscalapi_url both work
        "extra": "ignore",
    }

    @property
    def has_credentials(self) -> bool:
        return bool(self.fiscalapi_api_key and self.fiscalapi_tenant)

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Checks each required field and raises ValueError with guidance.
        """
        errors = []
        if not self.fiscalapi_api_key:
            errors.append(
                "FISCALAPI_API_KEY is not set. "
                "Create one in the FiscalAPI dashboard (https://fiscalapi.com)"
            )
        if not self.fiscalapi_tenant:
            errors.append("FISCALAPI_TENANT is not set.")
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance, imported throughout the application
settings = Settings()
