"""
Configuration helpers for the portal data layer.

Exposes a frozen Settings object read from environment variables (storage
backend, data file path, database URL, quota, log level) so that
repositories and scripts do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    storage_quota_bytes: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("PORTAL_STORAGE_BACKEND") or "memory").strip().lower(),
        data_file=Path(os.getenv("PORTAL_DATA_FILE") or DEFAULT_DATA_FILE),
        database_url=os.getenv("DATABASE_URL", ""),
        storage_quota_bytes=max(
            0, _int(os.getenv("PORTAL_STORAGE_QUOTA", str(DEFAULT_QUOTA_BYTES)), DEFAULT_QUOTA_BYTES)
        ),
        log_level=(os.getenv("PORTAL_LOG_LEVEL") or "INFO").upper(),
    )
