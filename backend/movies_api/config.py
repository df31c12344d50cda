"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Every setting has a default: the service starts with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

import codecs
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Application
    app_name: str = "Movies API"
    app_version: str = "1.0.0"

    # Server (python -m movies_api)
    host: str = "0.0.0.0"
    port: int = 8080

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    title_encoding: str = "utf-8"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @field_validator("title_encoding")
    @classmethod
    def check_title_encoding(cls, v: str) -> str:
        """Unknown codecs fail at startup, not on every POST."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"title_encoding '{v}' is not a known codec")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
