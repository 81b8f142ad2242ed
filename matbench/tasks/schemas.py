"""Pydantic schemas for task requests and HTTP responses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TaskRequest(BaseModel):
    """A decoded task request.

    Fields are kept as ``Any``: the compute engine is the only place that
    inspects matrix shape and contents.

    Attributes:
        task_name: Name of the task to run.
        matrix_a: Left operand.
        matrix_b: Right operand.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    task_name: Any = Field(None, alias="taskName", description="Task to run")
    matrix_a: Any = Field(None, alias="matrixA", description="Left operand")
    matrix_b: Any = Field(None, alias="matrixB", description="Right operand")


class TaskResponse(BaseModel):
    """Successful task response."""
    status: Literal["ok"] = "ok"
    result: list[list[Any]]


class ErrorResponse(BaseModel):
    """Error response for failed or rejected tasks."""
    status: Literal["error"] = "error"
    message: str


class NotFoundResponse(BaseModel):
    """Response for any non-POST request."""
    status: Literal["not_found"] = "not_found"
