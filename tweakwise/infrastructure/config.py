"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://tweakwise:tweakwise_dev_password@db:5432/tweakwise"

    # Authentication (feed administration endpoints)
    tweakwise_api_key: str = "dev-api-key-change-in-production"

    # Platform version gates
    platform_version: str = "6.5.0.0"
    variant_listing_min_version: str = "6.5.0"
    listing_config_min_version: str = "6.4.15"

    # Navigation
    navigation_depth: int = 99

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
