"""Result log: durable record of every completed task."""

from .repository import ResultLog
from .schemas import TaskResult, utc_timestamp


__all__ = [
    "ResultLog",
    "TaskResult",
    "utc_timestamp",
]
