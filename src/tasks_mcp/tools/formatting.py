# src/tasks_mcp/tools/formatting.py

from __future__ import annotations

import json
from typing import Any

JSON_OPEN = "<json>"
JSON_CLOSE = "</json>"

TASKS_FETCH_FAILED = "Failed to retrieve tasks."
TASKS_EMPTY = "No tasks found."
TASK_CREATE_FAILED = "Failed to create task."
TASK_DELETE_FAILED = "Failed to delete task."
TASK_DELETED = "The task was deleted successfully!"
TASK_STATUS_FAILED = "Failed to change task status."


def dump_json(payload: Any) -> str:
    """Compact JSON, so a compact API body comes back byte-for-byte."""
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def embed_json(message: str, payload: Any) -> str:
    return f"{message}{JSON_OPEN}{dump_json(payload)}{JSON_CLOSE}"


def tasks_listed(tasks: Any) -> str:
    return embed_json("The following tasks were retrieved successfully: ", tasks)


def task_created(task: Any) -> str:
    return embed_json("The following task was created successfully: ", task)


def task_status_changed(status: str, task: Any) -> str:
    return embed_json(f"The task status was changed successfully the new status is: {status}. ", task)
