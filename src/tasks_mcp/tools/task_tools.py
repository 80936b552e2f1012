# src/tasks_mcp/tools/task_tools.py

"""
Task tools exposed to MCP clients.

Each tool makes exactly one call on the TaskApi port and turns the outcome
into a text envelope. Argument validation is left to the MCP framework, which
enforces the Annotated types from schemas.py before a tool body runs.

Annotations here are evaluated eagerly (no `from __future__ import annotations`)
because the framework builds input schemas from them.
"""

import logging

from mcp.server.fastmcp import FastMCP

from ..core.ports import TaskApi
from ..tasks.task_models import NewTask
from . import formatting as fmt
from .schemas import (
    DeleteTaskId,
    Description,
    NewStatus,
    SearchTerm,
    StatusFilter,
    Title,
    UpdateTaskId,
)

logger = logging.getLogger(__name__)

GET_TASKS_DESCRIPTION = """Get All Tasks or Filter by Status/ Search

  e.g. GET /tasks?status=OPEN&search=bug
  e.g. GET /tasks?status=DONE
  e.g. GET /tasks
  e.g. GET /tasks?search=bug
"""

CREATE_TASKS_DESCRIPTION = """Create a new task with the status OPEN

  e.g. POST /tasks body: { "title": "New Task", "description": "Task description" }
"""

DELETE_TASK_DESCRIPTION = """Delete a task by its ID

  e.g. DELETE /tasks/{id}
"""

CHANGE_STATUS_DESCRIPTION = """Change the status of a task

  e.g. PATCH /tasks/{id}/status body: { "status": "DONE" }
  e.g. PATCH /tasks/{id}/status body: { "status": "IN_PROGRESS" }
  e.g. PATCH /tasks/{id}/status body: { "status": "OPEN" }
"""


class TaskTools:
    """Tool handlers bound to one TaskApi."""

    def __init__(self, api: TaskApi) -> None:
        self._api = api

    async def get_tasks(self, status: StatusFilter = None, search: SearchTerm = "") -> str:
        tasks = await self._api.list_tasks(status, search)

        if tasks is None:
            return fmt.TASKS_FETCH_FAILED

        if isinstance(tasks, list) and not tasks:
            return fmt.TASKS_EMPTY

        return fmt.tasks_listed(tasks)

    async def create_tasks(self, title: Title, description: Description) -> str:
        created = await self._api.create_task(NewTask(title=title, description=description))

        if created is None:
            return fmt.TASK_CREATE_FAILED

        return fmt.task_created(created)

    async def delete_task_by_id(self, id: DeleteTaskId) -> str:
        deleted = await self._api.delete_task(id)

        if not deleted:
            return fmt.TASK_DELETE_FAILED

        return fmt.TASK_DELETED

    async def change_task_status(self, id: UpdateTaskId, status: NewStatus) -> str:
        updated = await self._api.change_task_status(id, status)

        if updated is None:
            return fmt.TASK_STATUS_FAILED

        return fmt.task_status_changed(str(status), updated)


def register_task_tools(server: FastMCP, api: TaskApi) -> TaskTools:
    """Register the four task tools on `server` (fixed table, no discovery)."""
    tools = TaskTools(api)

    table = (
        ("get_tasks", tools.get_tasks, GET_TASKS_DESCRIPTION),
        ("create_tasks", tools.create_tasks, CREATE_TASKS_DESCRIPTION),
        ("delete_task_by_id", tools.delete_task_by_id, DELETE_TASK_DESCRIPTION),
        ("change_task_status", tools.change_task_status, CHANGE_STATUS_DESCRIPTION),
    )
    for name, fn, description in table:
        server.add_tool(fn, name=name, description=description)
        logger.debug("Registered tool %s", name)

    return tools
