"""Lore Explorer configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"

    # Location store (empty = unconfigured)
    database_url: str = ""

    # OpenAI
    openai_api_key: str = ""

    # Generation
    generation_model: str = "gpt-4o-mini"
    generation_timeout_seconds: float = 60.0

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def store_configured(self) -> bool:
        """Check if a location store database URL is set."""
        return bool(self.database_url.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
