import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, HttpUrl, ValidationError, field_validator


class Settings(BaseModel):
    supabase_url: HttpUrl = Field(alias="SUPABASE_URL")
    supabase_key: str = Field(alias="SUPABASE_KEY")
    supabase_schema: str = Field(default="public", alias="SUPABASE_SCHEMA")
    port: int = Field(default=3000, alias="PORT")
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    nav_timeout_ms: int = Field(default=60000, alias="NAV_TIMEOUT_MS")
    settle_timeout_ms: int = Field(default=3000, alias="SETTLE_TIMEOUT_MS")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {v!r}")
        return level


def _load_dotenv():
    # .env at the repo root wins; otherwise search upwards from the cwd
    root_env = Path(__file__).resolve().parents[2] / ".env"
    if root_env.exists():
        load_dotenv(root_env)
    else:
        load_dotenv()


@lru_cache()
def get_settings() -> Settings:
    _load_dotenv()
    try:
        return Settings(**os.environ)
    except ValidationError as exc:
        missing = [e["loc"][0] for e in exc.errors() if e["type"] == "missing"]
        if missing:
            raise RuntimeError(f"Missing required environment variables: {', '.join(missing)}") from exc
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
