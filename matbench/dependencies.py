"""Global dependencies for the application."""

from fastapi import Request

from matbench.results import ResultLog


async def get_result_log(request: Request) -> ResultLog:
    """Dependency to get the result log for the app's configured results file.

    The log holds no state beyond its path, so a fresh instance per request
    always sees the current file.

    Args:
        request: The FastAPI request object.

    Returns:
        A ResultLog bound to ``Settings.RESULTS_FILE``.
    """
    return ResultLog(request.app.state.settings.RESULTS_FILE)
