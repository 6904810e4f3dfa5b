"""Application configuration loaded from environment variables and .env file."""

from typing import Optional

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

    DATABASE_URL: str = "sqlite:///./dev.db"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Content
    CONTENT_DIR: Optional[str] = None
    DEFAULT_LANGUAGE: str = "sv"

    # Audio platform settings
    AUDIO_BACKEND: str = "null"
    AUDIO_PRELOAD_BATCH_SIZE: Optional[int] = None

    # Development
    SEED_MOCK_PLAYERS: bool = False


settings = Settings()
