# src/tasks_mcp/tools/schemas.py

"""
Argument shapes for the task tools.

These Annotated types are the single source of truth for validation: the MCP
framework turns them into each tool's input schema and rejects bad arguments
before the tool body (and therefore the HTTP client) runs.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from ..tasks.task_models import TaskStatus

TEXT_MIN = 2
TEXT_MAX = 100

Title = Annotated[
    str,
    Field(min_length=TEXT_MIN, max_length=TEXT_MAX, description="The title of the task"),
]

Description = Annotated[
    str,
    Field(min_length=TEXT_MIN, max_length=TEXT_MAX, description="The description of the task"),
]

DeleteTaskId = Annotated[int, Field(ge=1, description="The ID of the task to delete")]

UpdateTaskId = Annotated[int, Field(ge=1, description="The ID of the task to update")]

StatusFilter = Annotated[
    TaskStatus | None,
    Field(description='Filter tasks by status (e.g., "OPEN", "IN_PROGRESS", "DONE")'),
]

# Plain str (not Optional): any text is a search term, including "null" or "[1]".
# Empty means no filter.
SearchTerm = Annotated[
    str,
    Field(description="Search term to filter tasks by title or description"),
]

NewStatus = Annotated[
    TaskStatus,
    Field(description='The new status of the task (e.g., "DONE", "IN_PROGRESS", "OPEN")'),
]
