"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (e.g. DATABASE_URL, SECRET_KEY) are
validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (database_url for postgres, secret_key).
    """

    # App
    app_name: str = "document-types-api"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: "postgres" (SQLAlchemy + Alembic) or "memory" (in-process catalog, dev/tests)
    database_backend: str = "postgres"
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None
    # Accent-insensitive search via the Postgres unaccent extension
    db_unaccent: bool = True
    # JSON file with {"projects": [...], "document_types": [...]} for the memory backend
    memory_seed_path: str | None = None

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours
    jwt_audience: str | None = None
    jwt_issuer: str | None = None
    # Permission the caller's "permissions" claim must carry; empty disables the check.
    required_permission: str = "proj:document:read"

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and unsafe combinations.

        - Postgres: DATABASE_URL required.
        - SECRET_KEY always required (bearer token verification).
        - ALLOWED_ORIGINS must not be '*' (credentials are allowed).
        - DEBUG must be off in production.
        """
        if self.database_backend == "postgres":
            if not self.database_url:
                raise ValueError(
                    "DATABASE_URL is required when database_backend is 'postgres'. "
                    "Set in environment or .env file."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'postgres' or 'memory', got: {self.database_backend!r}"
            )
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        if "*" in origins:
            raise ValueError(
                "allowed_origins must list explicit origins; '*' is not allowed with credentials"
            )
        if self.debug and self.telemetry_environment == "production":
            raise ValueError("debug must be False when telemetry_environment is 'production'")
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Return allowed_origins as a list (comma-separated in env)."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
