# src/tasks_mcp/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- No secrets required at import time; an empty token is valid.
- Settings are immutable and passed to constructors, so tests can point the
  client at a fake endpoint without touching the process environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKS_MCP"

DEFAULT_APP_NAME = "tasks management"
DEFAULT_API_BASE_URL = "http://localhost:3000/api/v1/"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _normalize_base_url(raw: str) -> str:
    # Relative request paths ("tasks", "tasks/7") are joined onto the base.
    url = raw.strip() or DEFAULT_API_BASE_URL
    return url if url.endswith("/") else url + "/"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str = DEFAULT_APP_NAME
    log_level: str = "INFO"
    log_dir: Path | None = None

    # ---- Remote task API ----
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: str = ""

    # ---- HTTP timeouts ----
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 30.0

    @property
    def auth_headers(self) -> dict[str, str]:
        """Headers attached to every request sent to the task API."""
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), DEFAULT_APP_NAME).strip() or DEFAULT_APP_NAME
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"))

        # Unprefixed names are accepted for parity with the usual TASK_API_* variables.
        api_base_url = _normalize_base_url(
            _first_env(_k("API_BASE_URL"), "TASK_API_BASE", default=DEFAULT_API_BASE_URL) or ""
        )
        api_token = _first_env(_k("API_TOKEN"), "TASK_API_TOKEN", default="") or ""

        connect_timeout_seconds = _env_float(_k("CONNECT_TIMEOUT_SECONDS"), 5.0)
        read_timeout_seconds = _env_float(_k("READ_TIMEOUT_SECONDS"), 30.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            api_base_url=api_base_url,
            api_token=api_token.strip(),  # empty is valid (unauthenticated)
            connect_timeout_seconds=max(0.1, connect_timeout_seconds),
            read_timeout_seconds=max(0.1, read_timeout_seconds),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """
    Process-wide settings, built on first use.

    Loads a local .env (if present) before reading the environment.
    """
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
