"""Pydantic schema for persisted task results."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TaskResult(BaseModel):
    """One completed task as stored in the results file.

    Attributes:
        timestamp: ISO-8601 UTC time the result was produced.
        task_name: Name of the task that ran.
        matrix_a: Left operand as received.
        matrix_b: Right operand as received.
        result: Computed product.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    timestamp: str = Field(default_factory=utc_timestamp)
    task_name: str = Field(..., alias="taskName")
    matrix_a: Any = Field(..., alias="matrixA")
    matrix_b: Any = Field(..., alias="matrixB")
    result: list[list[Any]]

    def to_record(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used on disk."""
        return self.model_dump(mode="json", by_alias=True)
