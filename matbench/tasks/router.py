"""FastAPI router for the single task endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from matbench.dependencies import get_result_log
from matbench.results import ResultLog

from .schemas import NotFoundResponse, TaskResponse
from .service import run_task

router = APIRouter(tags=["tasks"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=ALL_METHODS, response_model=None)
async def task_endpoint(
    request: Request,
    result_log: Annotated[ResultLog, Depends(get_result_log)],
    path: str,
) -> TaskResponse | JSONResponse:
    """Run a task for POST requests on any path.

    Every other method is answered with a not-found payload.

    Args:
        request: The incoming request; its body is buffered in full.
        result_log: Destination for successful results.
        path: Ignored; all paths are the same endpoint.

    Returns:
        TaskResponse with the computed matrix, or a 404 payload.
    """
    if request.method != "POST":
        return JSONResponse(status_code=404, content=NotFoundResponse().model_dump())

    body = await request.body()
    record = await run_task(body, result_log)
    return TaskResponse(result=record.result)
