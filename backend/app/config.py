from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration loaded from environment variables."""

    api_title: str = "Tank Filling Simulation Service"
    api_version: str = "0.1.0"
    log_level: str = "INFO"

    # Upper bound on duration / time_step for a single request.
    max_steps: int = 100_000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
