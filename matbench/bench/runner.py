"""Replay a tasks file against a running service and time each request."""

import time
from dataclasses import dataclass

import httpx
from structlog import get_logger

from .tasks_file import BenchTask

logger = get_logger()

DEFAULT_URL = "http://localhost:3000"


@dataclass(frozen=True)
class RunResult:
    """Timing of one replayed task."""

    task_name: str
    elapsed_ms: int
    status: str

    def __str__(self) -> str:
        return f"Task: {self.task_name}, Time: {self.elapsed_ms} ms, Status: {self.status}"


def run_tasks(
    tasks: list[BenchTask],
    url: str = DEFAULT_URL,
    client: httpx.Client | None = None,
    timeout: float | None = None,
) -> list[RunResult]:
    """POST every task to the service in order.

    Requests that fail at the transport level are logged and left out of
    the results.

    Args:
        tasks: Tasks to send.
        url: Service endpoint.
        client: Optional preconfigured client; one is created otherwise.
        timeout: Per-request timeout in seconds for a created client.

    Returns:
        One RunResult per task that got a response.
    """
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout)

    results: list[RunResult] = []
    try:
        for task in tasks:
            payload = task.model_dump(mode="json", by_alias=True)
            start = time.perf_counter()
            try:
                response = client.post(url, json=payload)
            except httpx.HTTPError as e:
                logger.error("task_request_failed", task_name=task.task_name, url=url, error=str(e))
                continue
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            status = f"{response.status_code} {response.reason_phrase}".strip()
            results.append(RunResult(task.task_name, elapsed_ms, status))
    finally:
        if owns_client:
            client.close()
    return results
