"""ASGI middleware capping the size of buffered request bodies."""

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send
from structlog import get_logger

from matbench.exceptions import PayloadTooLargeError
from matbench.tasks.schemas import ErrorResponse

logger = get_logger()


class BodyTooLargeError(Exception):
    """Raised from the receive wrapper once the streamed body passes the cap."""

    def __init__(self, size_bytes: int):
        self.size_bytes = size_bytes
        super().__init__(size_bytes)


class MaxBodySizeMiddleware:
    """Reject requests whose body exceeds ``max_body_size`` bytes.

    A non-positive ``max_body_size`` disables the check.
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        """Initialize the middleware with an app and size cap.

        Args:
            app: The downstream ASGI application.
            max_body_size: Maximum allowed request body size in bytes.
        """
        self.app = app
        self.max_body_size = max_body_size

    async def _reject(self, size: int, scope: Scope, receive: Receive, send: Send) -> None:
        error = PayloadTooLargeError(size, self.max_body_size)
        logger.warning("task_failed", code=error.code, error=error.message)
        response = JSONResponse(
            status_code=413,
            content=ErrorResponse(message=error.message).model_dump(),
        )
        await response(scope, receive, send)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Enforce size limits before passing control to the app.

        Args:
            scope: ASGI connection scope.
            receive: ASGI receive callable.
            send: ASGI send callable.
        """
        if scope["type"] != "http" or self.max_body_size <= 0:
            await self.app(scope, receive, send)
            return

        for header, value in scope.get("headers", []):
            if header == b"content-length":
                try:
                    size = int(value)
                except ValueError:
                    size = self.max_body_size + 1
                if size > self.max_body_size:
                    await self._reject(size, scope, receive, send)
                    return

        received = 0

        async def receive_wrapper():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    raise BodyTooLargeError(received)
            return message

        try:
            await self.app(scope, receive_wrapper, send)
        except BodyTooLargeError as e:
            await self._reject(e.size_bytes, scope, receive, send)
