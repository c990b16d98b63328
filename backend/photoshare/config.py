"""
PhotoShare Backend: Application Configuration
==============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the entry point and the dataset loader.
When:  Loaded once at module import time; tests build their own instances.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for a local MongoDB on the
    standard port and a server exporting the current directory.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: mongodb://[user:password@]host[:port][/?options]
    mongodb_url: str = Field(
        default="mongodb://127.0.0.1:27017",
        description="MongoDB connection URL",
    )
    mongodb_database: str = Field(
        default="project6",
        description="Database holding the users, photos and schemainfos collections",
    )

    # ── Static Files ──────────────────────────────────────────────────────
    # Every file below this directory is readable by any caller.
    static_root: str = Field(
        default=".",
        description="Directory exported by the static file fallback",
    )

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

    # ── Error Reporting ───────────────────────────────────────────────────
    # When True, 500 responses caused by the database carry the raw driver
    # error. This discloses internals to any caller.
    expose_error_details: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGODB_URL and mongodb_url both work
    }


# Singleton instance used by the entry point
settings = Settings()
