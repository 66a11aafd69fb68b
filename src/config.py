"""Configuration management using Pydantic Settings.

Priority order:
1. Environment variables (highest priority, for Cloud Run)
2. Google Cloud Secret Manager (for secrets like SESSION_SECRET_KEY)
3. .env file (for local development fallback)
"""

import os
from functools import lru_cache
from typing import Any

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_secret_value(key: str) -> str | None:
    """Lazy import to avoid circular dependency."""
    # Only try Secret Manager if we have a project ID
    project_id = os.environ.get("GOOGLE_PROJECT_ID")
    if not project_id:
        return None

    try:
        from src.secret_manager import get_app_secret

        return get_app_secret(key)
    except Exception:
        return None


class Settings(BaseSettings):
    """Application settings with Secret Manager integration.

    Configuration is loaded from:
    1. Environment variables (highest priority)
    2. Secret Manager (for sensitive values)
    3. .env file (local development fallback)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Google Cloud (unset project means the model is not configured)
    google_project_id: str | None = None
    google_location: str = "us-central1"
    environment: str = "dev"

    # Vertex AI
    llm_model: str = "gemini-2.0-flash"
    llm_temperature: float = 0.9

    # Name generation
    name_count: int = 5
    copy_feedback_seconds: float = 2.0

    # Web sessions
    session_secret_key: str | None = None
    session_ttl_seconds: int = 3600

    # Server (Cloud Run injects PORT)
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Outbound links rendered next to each name
    shopify_trial_url: str = "https://www.shopify.com/free-trial-offer"
    support_url: str = "https://roihacks.gumroad.com/coffee"

    @model_validator(mode="before")
    @classmethod
    def load_secrets_from_secret_manager(cls, data: dict[str, Any]) -> dict[str, Any]:
        """Load secret values from Secret Manager if not already set."""
        secret_fields = ["session_secret_key"]

        for field in secret_fields:
            # Skip if already set via env var or .env
            if data.get(field):
                continue

            value = _get_secret_value(field)
            if value:
                data[field] = value

        return data

    @property
    def is_production(self) -> bool:
        """Whether the app runs in the production environment."""
        return self.environment == "prod"

    @property
    def is_llm_configured(self) -> bool:
        """Whether enough configuration exists to reach Vertex AI."""
        return bool(self.google_project_id)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Default settings instance
settings = get_settings()
