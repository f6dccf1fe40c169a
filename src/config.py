"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    CATALOG_PATH: str = "src/data/items.json"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Ammo compatibility pass
    AMMO_COMPAT_ENABLED: bool = True


settings = Settings()
