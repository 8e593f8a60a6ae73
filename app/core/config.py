# /app/core/config.py

import os
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import List

from dotenv import load_dotenv

load_dotenv()


class DatabaseEngine(str, Enum):
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


def _get_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _get_engine() -> DatabaseEngine:
    raw = os.getenv("DATABASE_ENGINE", DatabaseEngine.SQLITE.value).strip().lower()
    try:
        return DatabaseEngine(raw)
    except ValueError:
        allowed = ", ".join(e.value for e in DatabaseEngine)
        raise ValueError(f"DATABASE_ENGINE must be one of: {allowed} (got '{raw}').")


@dataclass(frozen=True)
class Settings:
    """Deployment settings, read once from the environment (and a local .env file)."""

    database_engine: DatabaseEngine
    database_url: str
    database_echo: bool
    google_api_key: str
    gemini_model: str
    generation_temperature: float
    generation_timeout_seconds: float
    history_default_page_size: int
    cors_origins: List[str]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    cors = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        database_engine=_get_engine(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./code_copilot.db"),
        database_echo=_get_bool("DATABASE_ECHO"),
        google_api_key=os.getenv("GOOGLE_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        generation_temperature=float(os.getenv("GENERATION_TEMPERATURE", "0.2")),
        generation_timeout_seconds=float(os.getenv("GENERATION_TIMEOUT_SECONDS", "60")),
        history_default_page_size=int(os.getenv("HISTORY_DEFAULT_PAGE_SIZE", "10")),
        cors_origins=[origin.strip() for origin in cors.split(",") if origin.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
