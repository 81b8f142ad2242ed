"""Benchmark tooling: task generation, load runs and result verification."""

from .tasks_file import (
    BenchTask,
    TasksFile,
    build_task,
    generate_random_matrix,
    load_tasks_file,
    parse_size,
    save_tasks_file,
)
from .runner import RunResult, run_tasks
from .verify import EntryStatus, verify_entry, verify_results


__all__ = [
    "BenchTask",
    "TasksFile",
    "build_task",
    "generate_random_matrix",
    "load_tasks_file",
    "parse_size",
    "save_tasks_file",
    "RunResult",
    "run_tasks",
    "EntryStatus",
    "verify_entry",
    "verify_results",
]
