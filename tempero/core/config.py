from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List
import os

from tempero import __version__


class Settings(BaseSettings):
    APP_ENV: str = "local"
    APP_NAME: str = "Tempero do Dia"
    APP_VERSION: str = __version__

    # HTTP
    API_PREFIX: str = "/api"
    HOST: str = "127.0.0.1"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    LOG_LEVEL: str = "INFO"

    # Demo data loaded into the in-memory store at startup
    SEED_DEMO_DATA: bool = False
    SEED_CUSTOMERS: int = 8
    SEED_SUPPLIERS: int = 5
    SEED_SALES: int = 30
    SEED_EXPENSES: int = 20

    class Config:
        env_file = ".env" if os.getenv("APP_ENV", "local") == "local" else ".env.prod"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("API_PREFIX")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        """Keep the prefix as '/segment' without a trailing slash."""
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


settings = Settings()
