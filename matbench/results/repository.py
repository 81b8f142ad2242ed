"""File-backed result log.

Every append is a full read-modify-write of one JSON array. Nothing guards
the file against concurrent writers: two overlapping appends each read the
same array and the later write drops the earlier record.
"""

import json
from pathlib import Path
from typing import Any

from structlog import get_logger

from matbench.exceptions import ResultLogError

from .schemas import TaskResult

logger = get_logger()


class ResultLog:
    """Append-only (by contract) store of task results in a single file.

    Attributes:
        path: Location of the JSON array on disk.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read_all(self) -> list[dict[str, Any]]:
        """Load every stored record.

        A missing file, or one holding only whitespace, is an empty log.

        Returns:
            Stored records in append order.

        Raises:
            ResultLogError: If the file cannot be read or does not hold a JSON array.
        """
        if not self.path.exists():
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ResultLogError(str(self.path), f"Cannot read results file: {e}") from e

        if not content.strip():
            return []

        try:
            records = json.loads(content)
        except (ValueError, RecursionError) as e:
            raise ResultLogError(str(self.path), f"Corrupt results file: {e}") from e

        if not isinstance(records, list):
            raise ResultLogError(
                str(self.path),
                f"Corrupt results file: expected a JSON array, got {type(records).__name__}",
            )
        return records

    def append(self, record: TaskResult) -> int:
        """Add one record to the end of the log and rewrite the file.

        Args:
            record: The completed task to persist.

        Returns:
            Number of records in the log after the append.

        Raises:
            ResultLogError: If the existing file is unreadable or corrupt, or
                the new contents cannot be written.
        """
        records = self.read_all()
        try:
            records.append(record.to_record())
            content = json.dumps(records, indent=2)
        except (ValueError, RecursionError) as e:
            raise ResultLogError(str(self.path), f"Cannot serialize result: {e}") from e

        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ResultLogError(str(self.path), f"Cannot write results file: {e}") from e

        logger.debug("result_appended", path=str(self.path), count=len(records))
        return len(records)
