"""Task dispatch: request parsing, compute engine and HTTP routing."""

from .engine import TASKS, MATRIX_MULTIPLICATION, multiply_matrices, get_task
from .schemas import TaskRequest, TaskResponse, ErrorResponse, NotFoundResponse


__all__ = [
    "TASKS",
    "MATRIX_MULTIPLICATION",
    "multiply_matrices",
    "get_task",
    "TaskRequest",
    "TaskResponse",
    "ErrorResponse",
    "NotFoundResponse",
]
