from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path.cwd() / ".env"

# Load environment variables as early as possible so Settings picks them up.
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Contact Backend"
    app_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # No default: a missing MONGO_URI is fatal at startup.
    mongo_uri: str = Field(min_length=1)
    mongo_database: str = "test"
    mongo_collection: str = "contacts"
    mongo_timeout_ms: int = 5000
    mongo_ping_timeout_ms: int = 1000


@lru_cache
def get_settings() -> Settings:
    return Settings()
