"""Compute engine: the pure functions behind each task name."""

from typing import Any, Callable

from matbench.exceptions import UnknownTaskError

Matrix = list[list[Any]]
TaskFunction = Callable[[Matrix, Matrix], Matrix]

MATRIX_MULTIPLICATION = "matrix_multiplication"


def multiply_matrices(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    """Multiply two dense matrices with the textbook triple loop.

    Dimensions are read from ``len(matrix_a)``, ``len(matrix_a[0])`` and
    ``len(matrix_b[0])`` only. Mismatched shapes are not checked up front:
    if ``matrix_b`` has fewer rows than ``matrix_a`` has columns the inner
    loop runs off the end of ``matrix_b`` and raises ``IndexError``.

    Args:
        matrix_a: R x C matrix.
        matrix_b: C x S matrix.

    Returns:
        The R x S product.
    """
    rows_a = len(matrix_a)
    cols_a = len(matrix_a[0])
    cols_b = len(matrix_b[0])
    result = [[0] * cols_b for _ in range(rows_a)]

    for i in range(rows_a):
        for j in range(cols_b):
            for k in range(cols_a):
                result[i][j] += matrix_a[i][k] * matrix_b[k][j]
    return result


TASKS: dict[str, TaskFunction] = {
    MATRIX_MULTIPLICATION: multiply_matrices,
}


def get_task(task_name: object) -> TaskFunction:
    """Look up a task implementation by name.

    Raises:
        UnknownTaskError: If no task is registered under ``task_name``.
    """
    if not isinstance(task_name, str) or task_name not in TASKS:
        raise UnknownTaskError(task_name)
    return TASKS[task_name]
