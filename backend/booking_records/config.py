from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Client Database Server"
    app_version: str = "1.0.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./clients.db"
    cors_origins: list[str] = ["*"]
    seed_default_clients: bool = True

    # Server binding (used by `python -m booking_records.main`)
    host: str = "0.0.0.0"
    port: int = 3000

    # Form client: directory source and outcome webhook
    record_service_url: str = "http://localhost:3000"
    outcome_webhook_url: str = ""
    outcome_source: str = "Meeting Record Form"
    http_timeout: float = 30.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
