"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Reference year the mapping engine was calibrated against.
DEFAULT_TAX_YEAR = 2023


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Error Tracking
    sentry_dsn: str | None = None
    """Sentry DSN for error tracking. Optional."""

    # Environment
    environment: str = "development"
    """Current environment (development, staging, production)."""

    debug: bool = False
    """Enable debug mode."""

    log_format: str | None = None
    """Logging format override (json or console). Defaults by environment."""

    # Tax computation
    default_tax_year: int = DEFAULT_TAX_YEAR
    """Tax year whose tables apply when a return has no configured year."""

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, value: str | None) -> str | None:
        """Accept json or console, case-insensitively."""
        if value is None or not value.strip():
            return None
        normalized = value.strip().lower()
        if normalized not in ("json", "console"):
            raise ValueError("LOG_FORMAT must be 'json' or 'console'.")
        return normalized


try:
    settings = Settings()
except Exception as exc:
    env_file = Path(".env")
    root_error = str(exc)
    suggestions = [
        "LOG_FORMAT must be json or console when set.",
    ]

    raise RuntimeError(
        "Failed to initialize application settings. "
        f"Check environment variables in {env_file.resolve() if env_file.exists() else '.env'}.\n"
        + f"Error: {root_error}\n"
        + "\n".join(suggestions)
    ) from exc
