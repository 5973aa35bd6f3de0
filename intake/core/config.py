"""
Configuration helpers for the intake backend.

Exposes a Settings object that reads environment variables (port, storage
paths, CORS, log level) so that routers/services do not fetch os.environ
directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

APP_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_PORT = 3000
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    data_dir: Path
    public_dir: Path
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    def _level(value: str | None, default: str) -> str:
        candidate = (value or "").strip().upper()
        return candidate if candidate in LOG_LEVELS else default

    def _path(value: str | None, default: Path) -> Path:
        if not value:
            return default
        return Path(value).expanduser().resolve()

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT"), DEFAULT_PORT),
        data_dir=_path(os.getenv("DATA_DIR"), APP_ROOT / "data" / "projects"),
        public_dir=_path(os.getenv("PUBLIC_DIR"), APP_ROOT / "public"),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
        log_level=_level(os.getenv("LOG_LEVEL"), "INFO"),
    )
