"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Import settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input / output
    recipes_csv_path: str = "recipes_w_search_terms.csv"
    output_path: str | None = None

    # Progress reporting (accepted recipes between callbacks)
    progress_interval: int = 10000
    cli_progress_interval: int = 50000
    top_ingredients_report: int = 20

    # Row decoding defaults
    default_servings: int = 4
    max_record_chars: int = 1024 * 1024

    # Acceptance filter
    min_servings: int = 2
    max_servings: int = 8
    min_ingredients: int = 3
    min_steps: int = 2

    # Tag selection
    max_display_tags: int = 4

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str | None = None

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

