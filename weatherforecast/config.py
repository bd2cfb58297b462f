"""Configuration management for the Weather Forecast API."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API Settings
    API_TITLE: str = "Weather Forecast API"
    API_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"  # docs are only served in development

    # Server Settings
    HOST: str = "localhost"
    PORT: int = 5041
    WORKERS: int = 1

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def docs_enabled(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


# Global settings instance
settings = Settings()
