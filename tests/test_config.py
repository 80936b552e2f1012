# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasks_mcp.config import DEFAULT_API_BASE_URL, Settings

_VARS = (
    "TASKS_MCP_APP_NAME",
    "TASKS_MCP_LOG_LEVEL",
    "TASKS_MCP_LOG_DIR",
    "TASKS_MCP_API_BASE_URL",
    "TASKS_MCP_API_TOKEN",
    "TASKS_MCP_CONNECT_TIMEOUT_SECONDS",
    "TASKS_MCP_READ_TIMEOUT_SECONDS",
    "TASK_API_BASE",
    "TASK_API_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_local_task_api() -> None:
    s = Settings.from_env()
    assert s.app_name == "tasks management"
    assert s.api_base_url == DEFAULT_API_BASE_URL == "http://localhost:3000/api/v1/"
    assert s.api_token == ""
    assert s.log_dir is None
    assert s.auth_headers == {"Authorization": "Bearer ", "Content-Type": "application/json"}


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TASKS_MCP_API_BASE_URL", "https://tasks.example.com/api/v2")
    monkeypatch.setenv("TASKS_MCP_API_TOKEN", "abc123")
    monkeypatch.setenv("TASKS_MCP_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASKS_MCP_LOG_DIR", "/tmp/tasks-mcp-logs")
    monkeypatch.setenv("TASKS_MCP_READ_TIMEOUT_SECONDS", "12.5")

    s = Settings.from_env()
    # Trailing slash is enforced so relative paths join under /api/v2/.
    assert s.api_base_url == "https://tasks.example.com/api/v2/"
    assert s.auth_headers["Authorization"] == "Bearer abc123"
    assert s.log_level == "DEBUG"
    assert s.log_dir == Path("/tmp/tasks-mcp-logs")
    assert s.read_timeout_seconds == 12.5


def test_unprefixed_aliases_and_prefixed_precedence(monkeypatch) -> None:
    monkeypatch.setenv("TASK_API_BASE", "http://api.local/v1/")
    monkeypatch.setenv("TASK_API_TOKEN", "legacy")
    s = Settings.from_env()
    assert s.api_base_url == "http://api.local/v1/"
    assert s.api_token == "legacy"

    monkeypatch.setenv("TASKS_MCP_API_TOKEN", "preferred")
    assert Settings.from_env().api_token == "preferred"


def test_bad_timeout_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("TASKS_MCP_CONNECT_TIMEOUT_SECONDS", "soon")
    assert Settings.from_env().connect_timeout_seconds == 5.0


def test_settings_are_immutable() -> None:
    s = Settings()
    with pytest.raises(AttributeError):
        s.api_token = "changed"  # type: ignore[misc]
