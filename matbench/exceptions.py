"""Custom exceptions for the matbench service."""


class MatbenchError(Exception):
    """Base exception for all matbench errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class MalformedRequestError(MatbenchError):
    """Raised when the request body is not a JSON object."""

    def __init__(self, message: str):
        super().__init__(message=message, code="MALFORMED_REQUEST")


class UnknownTaskError(MatbenchError):
    """Raised when the requested task is not registered.

    Attributes:
        task_name: Name of the task that was requested.
    """

    def __init__(self, task_name: object):
        super().__init__(message="Unknown task", code="UNKNOWN_TASK")
        self.task_name = task_name


class ComputationError(MatbenchError):
    """Raised when a task faults while computing its result.

    Attributes:
        task_name: Name of the task that failed.
    """

    def __init__(self, task_name: str, message: str):
        super().__init__(message=message, code="COMPUTATION_FAILED")
        self.task_name = task_name


class ResultLogError(MatbenchError):
    """Raised when the results file cannot be read, parsed or written.

    Attributes:
        path: Location of the results file.
    """

    def __init__(self, path: str, message: str):
        super().__init__(message=message, code="RESULT_LOG_ERROR")
        self.path = path


class PayloadTooLargeError(MatbenchError):
    """Raised when request payload exceeds the size limit.

    Attributes:
        size_bytes: Bytes received before the limit was hit.
        max_bytes: Maximum allowed size.
    """

    def __init__(self, size_bytes: int, max_bytes: int):
        super().__init__(
            message=f"Payload size {size_bytes} bytes exceeds limit of {max_bytes} bytes",
            code="PAYLOAD_TOO_LARGE"
        )
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
