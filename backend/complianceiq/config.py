"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Redis (document records)
    REDIS_URL: str = "redis://localhost:6379/0"
    DOCUMENT_TTL_SECONDS: int = 7 * 86400

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation
    RULES_PATH: str = ""  # Empty = bundled compliance_rules.json
    MAX_DOCUMENT_CHARS: int = 500_000

    # Rate Limiting
    RATE_LIMIT_MAX_UPLOADS: int = 30
    RATE_LIMIT_WINDOW_SECONDS: int = 3600

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
