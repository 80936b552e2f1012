# src/tasks_mcp/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected, or loaded once),
- wires the HTTP client into the task tools,
- builds the MCP server whose lifespan closes the HTTP client.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from mcp.server.fastmcp import FastMCP

from ..api.client import TaskApiClient
from ..config import Settings, get_settings
from ..core.ports import TaskApi
from ..tools.task_tools import register_task_tools

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Task management tools backed by a remote task API. "
    "Structured results are embedded as JSON between <json> and </json>."
)


def create_server(
    *,
    settings: Settings | None = None,
    api: TaskApi | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastMCP:
    """
    Build the MCP server from the provided settings.

    Keeping settings/api injectable makes the server easy to test.
    If settings is None, falls back to get_settings().
    If api is None, a TaskApiClient is built (optionally over `transport`).
    """
    if settings is None:
        settings = get_settings()

    client: TaskApiClient | None = None
    if api is None:
        client = TaskApiClient(settings, transport=transport)
        api = client

    @asynccontextmanager
    async def lifespan(_server: FastMCP) -> AsyncIterator[None]:
        try:
            yield None
        finally:
            if client is not None:
                await client.aclose()

    server = FastMCP(settings.app_name, instructions=SERVER_INSTRUCTIONS, lifespan=lifespan)
    register_task_tools(server, api)

    logger.info("MCP server %r configured for task API %s", settings.app_name, settings.api_base_url)
    return server
