from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from structlog import get_logger

from .config import Settings, get_settings
from .exceptions import MatbenchError, PayloadTooLargeError, UnknownTaskError
from .logging import configure_logging
from .middleware import MaxBodySizeMiddleware
from .tasks.schemas import ErrorResponse
from .tasks.router import router as tasks_router

logger = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings.LOG_LEVEL)
    logger.info(
        "server_ready",
        app=settings.APP_NAME,
        host=settings.HOST,
        port=settings.PORT,
        results_file=settings.RESULTS_FILE,
    )
    yield
    logger.info("server_stopped", app=settings.APP_NAME)


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    logger.error("task_failed", code=code, error=message, status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump()
    )


async def unknown_task_handler(request: Request, exc: UnknownTaskError):
    return error_response(400, exc.code, exc.message)


async def payload_too_large_handler(request: Request, exc: PayloadTooLargeError):
    return error_response(413, exc.code, exc.message)


async def matbench_error_handler(request: Request, exc: MatbenchError):
    return error_response(500, exc.code, exc.message)


# Anything that escapes the domain errors still gets the JSON error body
async def unhandled_exception_handler(request: Request, exc: Exception):
    return error_response(500, exc.__class__.__name__, str(exc))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the service application.

    The OpenAPI and docs routes are turned off: every path belongs to the
    task endpoint, and any non-POST request must come back as not found.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        lifespan=lifespan,
        debug=settings.DEBUG,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.add_middleware(MaxBodySizeMiddleware, max_body_size=settings.MAX_BODY_BYTES)

    # Global exception handlers
    app.add_exception_handler(UnknownTaskError, unknown_task_handler)
    app.add_exception_handler(PayloadTooLargeError, payload_too_large_handler)
    app.add_exception_handler(MatbenchError, matbench_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(tasks_router)
    return app


app = create_app()
