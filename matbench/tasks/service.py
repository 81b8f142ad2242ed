"""Service layer: the parse → compute → persist pipeline for one request."""

import json
from typing import Any

from anyio.to_thread import run_sync
from structlog import get_logger

from matbench.exceptions import ComputationError, MalformedRequestError
from matbench.results import ResultLog, TaskResult

from .engine import Matrix, get_task
from .schemas import TaskRequest

logger = get_logger()


def parse_task_request(body: bytes) -> TaskRequest:
    """Decode a raw request body into a TaskRequest.

    Args:
        body: The fully buffered request body.

    Returns:
        The decoded request. Missing keys become ``None``.

    Raises:
        MalformedRequestError: If the body is not JSON, or is JSON ``null``.
    """
    try:
        payload: Any = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise MalformedRequestError(str(e)) from e

    if payload is None:
        raise MalformedRequestError("Cannot read task fields from null")
    # Arrays, strings, numbers and booleans carry no task fields.
    if not isinstance(payload, dict):
        return TaskRequest()
    return TaskRequest.model_validate(payload)


def compute(request: TaskRequest) -> Matrix:
    """Run the task named in ``request`` synchronously.

    Raises:
        UnknownTaskError: If the task name is not registered.
        ComputationError: If the task faults on its inputs.
    """
    task = get_task(request.task_name)
    try:
        return task(request.matrix_a, request.matrix_b)
    except (IndexError, TypeError, KeyError) as e:
        raise ComputationError(request.task_name, str(e)) from e


def compute_and_store(request: TaskRequest, result_log: ResultLog) -> TaskResult:
    """Compute a request and append the outcome to the result log.

    Nothing is written unless the computation succeeds.
    """
    result = compute(request)
    record = TaskResult(
        task_name=request.task_name,
        matrix_a=request.matrix_a,
        matrix_b=request.matrix_b,
        result=result,
    )
    result_log.append(record)
    return record


async def run_task(body: bytes, result_log: ResultLog) -> TaskResult:
    """Handle one buffered task request end to end.

    Compute and file I/O run in a worker thread so the event loop stays
    responsive.

    Args:
        body: The fully buffered request body.
        result_log: Where successful results are persisted.

    Returns:
        The persisted TaskResult.
    """
    request = parse_task_request(body)
    record = await run_sync(compute_and_store, request, result_log)
    logger.info(
        "task_completed",
        task_name=record.task_name,
        rows=len(record.result),
        timestamp=record.timestamp,
    )
    return record
