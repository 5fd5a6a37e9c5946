"""Environment-driven application settings."""

import logging

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    SITE_NAME: str = "VoipFit"
    DATABASE_URL: str = "sqlite:///./voipfit.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Startup seeding
    SEED_ON_STARTUP: bool = True
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin123"

    # Password hashing
    BCRYPT_ROUNDS: int = 10

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
