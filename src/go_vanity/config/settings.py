"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the generator, loaded from GO_VANITY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GO_VANITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Input / output
    config_path: str = "vanity.yaml"
    output_dir: str = "public"

    # Logging
    log_level: str = "INFO"

    # Index page
    index_title: str | None = None  # None: use the host
    index_description: str | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
