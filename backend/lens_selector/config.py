"""Application configuration via environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Lenses
    LENSES_FOLDER: str = "./lenses"

    # Server
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("LENSES_FOLDER")
    @classmethod
    def _lenses_folder_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("LENSES_FOLDER environment variable is not set")
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()
