"""Command line entry point: run the service and drive benchmarks against it.

Usage:
    matbench serve [--host 0.0.0.0] [--port 3000]
    matbench add-task matrix_multiplication 100x100 [--tasks-file tasks.json]
    matbench run-tests [--tasks-file tasks.json] [--url http://localhost:3000]
    matbench verify results.json
"""

import argparse
import sys

import uvicorn
from pydantic import ValidationError
from structlog import get_logger

from matbench.bench import (
    EntryStatus,
    build_task,
    load_tasks_file,
    parse_size,
    run_tasks,
    save_tasks_file,
    verify_results,
)
from matbench.bench.runner import DEFAULT_URL
from matbench.config import get_settings
from matbench.exceptions import MatbenchError, UnknownTaskError
from matbench.logging import configure_logging

logger = get_logger()

DEFAULT_TASKS_FILE = "tasks.json"


def cmd_serve(args: argparse.Namespace) -> int:
    settings = get_settings()
    host = args.host or settings.HOST
    port = args.port or settings.PORT
    logger.info("server_starting", host=host, port=port)
    uvicorn.run("matbench.main:app", host=host, port=port, log_level=settings.LOG_LEVEL.lower())
    return 0


def cmd_add_task(args: argparse.Namespace) -> int:
    try:
        rows, cols = parse_size(args.size)
        task = build_task(args.task_name, rows, cols)
    except ValueError as e:
        print(e)
        return 1
    except UnknownTaskError:
        print(f"Unknown task: {args.task_name}")
        return 1

    try:
        tasks_file = load_tasks_file(args.tasks_file)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Unable to load {args.tasks_file}: {e}")
        return 1

    tasks_file.tasks.append(task)
    save_tasks_file(args.tasks_file, tasks_file)
    print(
        f"Added task '{task.task_name}' with matrices of dimensions "
        f"[{rows}x{cols}] and [{cols}x{rows}]"
    )
    return 0


def cmd_run_tests(args: argparse.Namespace) -> int:
    try:
        tasks_file = load_tasks_file(args.tasks_file)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Unable to load {args.tasks_file}: {e}")
        return 1

    for result in run_tasks(tasks_file.tasks, url=args.url, timeout=args.timeout):
        print(result)
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    try:
        statuses = verify_results(args.results_file)
    except MatbenchError as e:
        print(f"Error reading results file: {e.message}")
        return 1

    for i, status in enumerate(statuses):
        if status is EntryStatus.CORRECT:
            print(f"Entry #{i}: The result of matrix multiplication is correct.")
        elif status is EntryStatus.INCORRECT:
            print(f"Entry #{i}: ERROR - the result of multiplication is incorrect.")
        else:
            print(f"Entry #{i}: Unknown task type")
    return 1 if EntryStatus.INCORRECT in statuses else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="matbench", description="Matrix multiplication benchmark service")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP service")
    serve.add_argument("--host", type=str, default=None, help="Interface to bind (default: settings HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port to listen on (default: settings PORT)")
    serve.set_defaults(func=cmd_serve)

    add_task = subparsers.add_parser("add-task", help="Append a random task to the tasks file")
    add_task.add_argument("task_name", help="Task to generate, e.g. matrix_multiplication")
    add_task.add_argument("size", help="Size of matrix A as RxC, e.g. 100x100")
    add_task.add_argument("--tasks-file", default=DEFAULT_TASKS_FILE)
    add_task.set_defaults(func=cmd_add_task)

    run = subparsers.add_parser("run-tests", help="Send every task to the service and time it")
    run.add_argument("--tasks-file", default=DEFAULT_TASKS_FILE)
    run.add_argument("--url", default=DEFAULT_URL)
    run.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    run.set_defaults(func=cmd_run_tests)

    verify = subparsers.add_parser("verify", help="Recompute and check a results file")
    verify.add_argument("results_file")
    verify.set_defaults(func=cmd_verify)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().LOG_LEVEL)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
