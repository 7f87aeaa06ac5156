"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables for the HTTP layer are centralized here with
proper typing, validation, and sensible defaults. Risk model constants are
not settings: they live in sociogram.config and use CONFIG_* variables.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for local development.
    Production values should be set via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars not defined here
        case_sensitive=False,  # Allow AI_MODEL or ai_model
        populate_by_name=True,
    )

    # === CORS Configuration ===
    # Note: Use str type for env var parsing, convert to list via property
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    # === Report Generator ===
    ai_provider: str = Field(
        default="openai",
        description="Report provider: 'openai' or 'mock'",
    )
    ai_api_key: str = Field(
        default="",
        description="API key for the report provider (empty disables AI reports)",
    )
    ai_model: str = Field(
        default="gpt-4.1-mini",
        description="Model used to write classroom reports",
    )
    ai_base_url: str | None = Field(
        default=None,
        description="Custom API base URL for OpenAI-compatible endpoints",
    )
    ai_timeout_seconds: float = Field(
        default=60.0,
        description="Timeout for report generation requests",
    )

    # === Classroom Defaults ===
    default_grade_label: str = Field(
        default="Unnamed class",
        description="Label used when an analysis request does not name its classroom",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @field_validator("ai_provider", mode="after")
    @classmethod
    def validate_ai_provider(cls, v: str) -> str:
        """Validate and normalize ai_provider."""
        v = v.lower()
        if v not in ("openai", "mock"):
            raise ValueError(f"Invalid AI_PROVIDER: {v}. Must be 'openai' or 'mock'")
        return v

    @field_validator("ai_timeout_seconds", mode="after")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("AI_TIMEOUT_SECONDS must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    """
    return Settings()
