"""Check stored results against a fresh recomputation."""

import math
from enum import StrEnum
from pathlib import Path
from typing import Any

from matbench.results import ResultLog
from matbench.tasks.engine import MATRIX_MULTIPLICATION, multiply_matrices


class EntryStatus(StrEnum):
    """Outcome of verifying one stored result."""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNKNOWN_TASK = "unknown task"


def _same_matrix(expected: list[list[Any]], actual: Any) -> bool:
    if not isinstance(actual, list) or len(actual) != len(expected):
        return False
    for expected_row, actual_row in zip(expected, actual):
        if not isinstance(actual_row, list) or len(actual_row) != len(expected_row):
            return False
        for want, got in zip(expected_row, actual_row):
            if not isinstance(got, (int, float)) or not math.isclose(want, got, rel_tol=1e-9, abs_tol=1e-9):
                return False
    return True


def verify_entry(entry: dict[str, Any]) -> EntryStatus:
    """Recompute one stored entry and compare it with its ``result``.

    Entries whose operands cannot be multiplied count as incorrect.
    """
    if not isinstance(entry, dict):
        return EntryStatus.INCORRECT
    if entry.get("taskName") != MATRIX_MULTIPLICATION:
        return EntryStatus.UNKNOWN_TASK
    try:
        expected = multiply_matrices(entry.get("matrixA"), entry.get("matrixB"))
    except (IndexError, TypeError):
        return EntryStatus.INCORRECT
    if _same_matrix(expected, entry.get("result")):
        return EntryStatus.CORRECT
    return EntryStatus.INCORRECT


def verify_results(path: str | Path) -> list[EntryStatus]:
    """Verify every entry of a results file, in stored order.

    Raises:
        ResultLogError: If the file is unreadable or not a JSON array.
    """
    return [verify_entry(entry) for entry in ResultLog(path).read_all()]
