from functools import lru_cache
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LANGUAGES = ("en", "fr")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Workflow Sync Service"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True  # Set to False in production

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Records API (offers, sales, service orders, dispatches, documents)
    records_api_url: str = "http://localhost:5000"
    records_api_token: str | None = None  # Used when the caller sends no Authorization header
    gateway_timeout_seconds: float = 10.0

    # Shutdown
    shutdown_grace_period: float = 15.0  # Seconds to let in-flight fan-outs finish

    # Propagation
    propagation_max_concurrency: int = 4  # Concurrent derived notifications per call
    default_language: str = "en"

    @field_validator("records_api_url")
    @classmethod
    def validate_records_api_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError(f"RECORDS_API_URL must be an http(s) URL, got '{v}'")
        return v.rstrip("/")

    @field_validator("propagation_max_concurrency")
    @classmethod
    def validate_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("PROPAGATION_MAX_CONCURRENCY must be at least 1")
        return v

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, v: str) -> str:
        v = v.lower()
        if v not in SUPPORTED_LANGUAGES:
            raise ValueError(f"DEFAULT_LANGUAGE must be one of {SUPPORTED_LANGUAGES}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
