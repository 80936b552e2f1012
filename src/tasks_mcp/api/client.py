# src/tasks_mcp/api/client.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

import httpx

from ..config import Settings
from ..core.ports import TaskPayload
from ..tasks.task_models import NewTask, Task, TaskStatus

logger = logging.getLogger(__name__)

FailureKind = Literal["http_status", "network", "decode"]


@dataclass(slots=True, frozen=True)
class ApiResult:
    """
    Outcome of one HTTP exchange with the task API.

    Either `payload` is set (ok) or `failure` names what went wrong.
    Public client methods collapse a failure into None.
    """

    payload: Any = None
    failure: FailureKind | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, payload: Any) -> ApiResult:
        return cls(payload=payload)

    @classmethod
    def failed(cls, failure: FailureKind, detail: str) -> ApiResult:
        return cls(failure=failure, detail=detail)


def _make_timeout_obj(settings: Settings) -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.connect_timeout_seconds,
        read=settings.read_timeout_seconds,
        write=10.0,
        pool=settings.connect_timeout_seconds,
    )


def _reason(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".strip()


def _log_task(action: str, payload: Any) -> None:
    if not isinstance(payload, dict):
        logger.info("%s (non-object body)", action)
        return
    task = Task.from_payload(payload)
    logger.info("%s: task id=%s status=%s", action, task.id, task.status)


class TaskApiClient:
    """
    Thin async client for the remote task API.

    IMPORTANT:
    - One shared httpx.AsyncClient, created lazily on first request.
    - Every request carries the bearer token and a JSON content type.
    - No retries: each call is exactly one request, failures become None.

    `transport` is only for tests (e.g. httpx.MockTransport).
    """

    def __init__(self, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is not None:
            return self._client

        self._client = httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            headers=self._settings.auth_headers,
            timeout=_make_timeout_obj(self._settings),
            transport=self._transport,
        )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _send(
            self,
            op: str,
            method: str,
            path: str,
            *,
            params: dict[str, str] | None = None,
            body: dict[str, Any] | None = None,
            expect_body: bool = True,
    ) -> ApiResult:
        """
        Perform one request and classify the outcome.

        Never raises for transport/HTTP problems; they are logged and returned
        as a tagged failure.
        """
        client = self._get_client()
        try:
            response = await client.request(method, path, params=params, json=body)
        except httpx.HTTPError as e:
            logger.error("Error %s: %s (%s)", op, e.__class__.__name__, e)
            return ApiResult.failed("network", str(e) or e.__class__.__name__)

        if not response.is_success:
            logger.error("Error %s: %s", op, _reason(response))
            return ApiResult.failed("http_status", _reason(response))

        if not expect_body:
            return ApiResult.success(True)

        try:
            payload = response.json()
        except ValueError as e:
            logger.error("Error %s: response body is not JSON (%s)", op, e)
            return ApiResult.failed("decode", str(e))

        logger.debug("%s %s -> %s", method, response.request.url, response.status_code)
        return ApiResult.success(payload)

    async def list_tasks(
            self,
            status: TaskStatus | None = None,
            search: str | None = None,
    ) -> list[TaskPayload] | None:
        params: dict[str, str] = {}
        if status:
            params["status"] = str(status)
        if search:
            params["search"] = search

        result = await self._send("fetching tasks", "GET", "tasks", params=params or None)
        if not result.ok:
            return None
        if isinstance(result.payload, list):
            logger.info("Fetched %d task(s) (status=%s search=%r)", len(result.payload), status, search)
        return result.payload

    async def create_task(self, task: NewTask) -> TaskPayload | None:
        result = await self._send("creating task", "POST", "tasks", body=task.to_payload())
        if not result.ok:
            return None
        _log_task("Created task", result.payload)
        return result.payload

    async def delete_task(self, task_id: int) -> bool | None:
        result = await self._send("deleting task", "DELETE", f"tasks/{task_id}", expect_body=False)
        if not result.ok:
            return None
        logger.info("Deleted task id=%s", task_id)
        return True

    async def change_task_status(self, task_id: int, status: TaskStatus) -> TaskPayload | None:
        result = await self._send(
            "changing task status",
            "PATCH",
            f"tasks/{task_id}/status",
            body={"status": str(status)},
        )
        if not result.ok:
            return None
        _log_task("Changed task status", result.payload)
        return result.payload
