"""Tasks file loader and random task generation."""

import json
import random
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from matbench.exceptions import UnknownTaskError
from matbench.tasks.engine import MATRIX_MULTIPLICATION


class BenchTask(BaseModel):
    """One request body to replay against the service."""

    model_config = ConfigDict(populate_by_name=True)

    task_name: str = Field(..., alias="taskName")
    matrix_a: list[list[int | float]] = Field(..., alias="matrixA")
    matrix_b: list[list[int | float]] = Field(..., alias="matrixB")


class TasksFile(BaseModel):
    """Container for the tasks replayed by ``run-tests``."""

    tasks: list[BenchTask] = Field(default_factory=list)


def load_tasks_file(path: str | Path) -> TasksFile:
    """Load a tasks file.

    Args:
        path: Location of the JSON tasks file.

    Returns:
        Parsed TasksFile, or an empty one if the file is missing or empty.
    """
    path = Path(path)
    if not path.exists():
        return TasksFile()

    content = path.read_text(encoding="utf-8")
    if not content.strip():
        return TasksFile()

    return TasksFile.model_validate(json.loads(content))


def save_tasks_file(path: str | Path, tasks_file: TasksFile) -> None:
    data = tasks_file.model_dump(mode="json", by_alias=True)
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")


def parse_size(size: str) -> tuple[int, int]:
    """Parse a ``RxC`` size such as ``100x100``.

    Raises:
        ValueError: If the size is not two positive integers joined by ``x``.
    """
    parts = size.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Incorrect size format '{size}'. Use e.g. 100x100.")
    try:
        rows, cols = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise ValueError(f"Incorrect size format '{size}': {e}") from e
    if rows < 1 or cols < 1:
        raise ValueError(f"Matrix dimensions must be positive, got '{size}'")
    return rows, cols


def generate_random_matrix(rows: int, cols: int, rng: random.Random | None = None) -> list[list[int]]:
    """Build a rows x cols matrix of integers in 0..9."""
    rng = rng or random.Random()
    return [[rng.randint(0, 9) for _ in range(cols)] for _ in range(rows)]


def build_task(task_name: str, rows: int, cols: int, rng: random.Random | None = None) -> BenchTask:
    """Generate a random task.

    For matrix multiplication A is rows x cols and B is cols x rows, so the
    product is square.

    Raises:
        UnknownTaskError: If ``task_name`` has no generator.
    """
    if task_name != MATRIX_MULTIPLICATION:
        raise UnknownTaskError(task_name)
    return BenchTask(
        task_name=task_name,
        matrix_a=generate_random_matrix(rows, cols, rng),
        matrix_b=generate_random_matrix(cols, rows, rng),
    )
