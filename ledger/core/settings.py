from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve repo root: .../ledger/core/settings.py -> parents[2] == repo root
_REPO_ROOT = Path(__file__).resolve().parents[2]
_ENV_FILE = _REPO_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./ledger.db"
    SQL_ECHO: bool = False
    # Alembic owns the schema outside of development
    AUTO_CREATE_TABLES: bool = True

    # Transfers retried this many times on a stale account version
    TRANSFER_MAX_RETRIES: int = 3

    # CORS (local frontend dev)
    CORS_ALLOW_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8080",
        "http://127.0.0.1",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8080",
    ]


settings = Settings()

if settings.TRANSFER_MAX_RETRIES < 1:
    raise ValueError("TRANSFER_MAX_RETRIES must be at least 1")
