# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real tokens. Use a local, gitignored .env.

This file exists to make the repo self-documenting.
"""

ENV_VARS = {
    # App / logging
    "TASKS_MCP_APP_NAME": "MCP server name (default: tasks management).",
    "TASKS_MCP_LOG_LEVEL": "stderr logging level (default: INFO).",
    "TASKS_MCP_LOG_DIR": "Optional directory for a full DEBUG log file (default: disabled).",
    # Remote task API
    "TASKS_MCP_API_BASE_URL": "Task API base URL (default: http://localhost:3000/api/v1/).",
    "TASKS_MCP_API_TOKEN": "Static bearer token sent on every request (default: empty).",
    "TASK_API_BASE": "Unprefixed alias of TASKS_MCP_API_BASE_URL.",
    "TASK_API_TOKEN": "Unprefixed alias of TASKS_MCP_API_TOKEN.",
    # HTTP timeouts
    "TASKS_MCP_CONNECT_TIMEOUT_SECONDS": "Connect timeout in seconds (default: 5).",
    "TASKS_MCP_READ_TIMEOUT_SECONDS": "Read timeout in seconds (default: 30).",
}
