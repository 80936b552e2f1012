# src/tasks_mcp/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the tool layer.

The tools depend on a Protocol instead of the concrete HTTP client.
This keeps the transport swappable and makes testing easier.
"""

from typing import Any, Protocol

from ..tasks.task_models import NewTask, TaskStatus

TaskPayload = dict[str, Any]
# Task as returned by the remote API, passed through untouched.


class TaskApi(Protocol):
    """
    Remote task API.

    Every operation returns None on failure (network error, non-2xx status,
    unreadable body). Callers must not try to tell failure causes apart.
    """

    async def list_tasks(
            self,
            status: TaskStatus | None = None,
            search: str | None = None,
    ) -> list[TaskPayload] | None: ...

    async def create_task(self, task: NewTask) -> TaskPayload | None: ...

    # True on success; there is no False outcome.
    async def delete_task(self, task_id: int) -> bool | None: ...

    async def change_task_status(self, task_id: int, status: TaskStatus) -> TaskPayload | None: ...
