# src/tasks_mcp/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status as understood by the remote task API.

    Notes:
    - No transition rules are enforced here; the remote API decides whether a
      status change is legal.
    """

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


@dataclass(slots=True, frozen=True)
class NewTask:
    """Body of a create request. The API assigns id and the default OPEN status."""

    title: str
    description: str

    def to_payload(self) -> dict[str, str]:
        return {"title": self.title, "description": self.description}


@dataclass(slots=True)
class Task:
    id: Any
    title: str
    description: str
    status: TaskStatus | str

    @classmethod
    def from_payload(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from an API payload.

        Unknown status strings are kept as-is instead of being rejected.
        """
        status_raw = str(raw.get("status") or "")
        try:
            status: TaskStatus | str = TaskStatus(status_raw)
        except ValueError:
            status = status_raw
        return cls(
            id=raw.get("id"),
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            status=status,
        )
