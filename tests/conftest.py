# tests/conftest.py

from __future__ import annotations

import logging

import pytest

from tasks_mcp.config import Settings

API_BASE = "http://tasks.test/api/v1/"


@pytest.fixture()
def settings() -> Settings:
    """
    Settings pointing at a fake endpoint.

    Built directly instead of from the environment, to keep unit tests
    isolated and deterministic.
    """
    return Settings(
        app_name="tasks management",
        log_level="DEBUG",
        api_base_url=API_BASE,
        api_token="secret-token",
    )


@pytest.fixture()
def restore_root_logging():
    """setup_logging() replaces root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
