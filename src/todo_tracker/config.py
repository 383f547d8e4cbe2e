# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Variables (prefix TODO_):
- TODO_APP_NAME              display name (default: todo)
- TODO_LOG_LEVEL             console log level (default: WARNING)
- TODO_DATA_DIR              local data directory (default: .local/todo)
- TODO_TASKS_DB_PATH         SQLite file (default: <data_dir>/tasks.sqlite3)
- TODO_DATE_FORMAT           due date input pattern (default: %Y-%m-%d)
- TODO_DISPLAY_DATE_FORMAT   due date display pattern (default: %d %B)
- TODO_STRICT_INPUT          reject malformed dates/priorities (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.dates import DEFAULT_DISPLAY_FORMAT, DEFAULT_INPUT_FORMAT

ENV_PREFIX = "TODO"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Input / display ----
    date_format: str
    display_date_format: str
    strict_input: bool

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))

        return Settings(
            app_name=_env(_k("APP_NAME"), "todo"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING"),
            data_dir=data_dir,
            tasks_db_path=_env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3"),
            date_format=_env(_k("DATE_FORMAT"), DEFAULT_INPUT_FORMAT),
            display_date_format=_env(_k("DISPLAY_DATE_FORMAT"), DEFAULT_DISPLAY_FORMAT),
            strict_input=_env_bool(_k("STRICT_INPUT"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Process-wide settings; reads .env (without overriding real env vars) on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
