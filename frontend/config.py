from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_ROOT = Path(__file__).resolve().parent
ENV_PATH = Path.cwd() / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "Contact Frontend"
    app_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 80
    log_level: str = "INFO"

    # Upstream for the reverse proxy; required.
    backend_url: str = Field(
        min_length=1,
        validation_alias=AliasChoices("BACKEND_URL", "API_URL", "backend_url"),
    )
    proxy_prefix: str = "/api"
    proxy_timeout: Optional[float] = None
    static_dir: Path = PACKAGE_ROOT / "static"


@lru_cache
def get_settings() -> Settings:
    return Settings()
