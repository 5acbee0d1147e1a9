"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from todoqueue_cli.models import TodoQueueError
from todoqueue_cli.utils.logger import get_logger
from todoqueue_cli.utils.ui.formatters import format_error


class AppError(TodoQueueError):
    """Command-level error carrying its own exit code."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable) -> Callable:
    """Run a command, reporting failures as one error line and an exit code.

    ``TodoQueueError`` subclasses (a broken config file, an unwritable
    snapshot, ``AppError``) are shown with their own message. Anything else
    is logged with its traceback and reported as unexpected. Both exit 1
    unless the error names another code.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("commands")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
        except typer.Exit:
            raise
        except TodoQueueError as e:
            logger.error(
                "command failed: %s (%.3fs) - %s: %s",
                cmd,
                time.monotonic() - start,
                type(e).__name__,
                e,
            )
            format_error(str(e))
            raise typer.Exit(code=getattr(e, "exit_code", 1)) from e
        except Exception as e:
            logger.error(
                "command crashed: %s (%.3fs) - %s\n%s",
                cmd,
                time.monotonic() - start,
                e,
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {e}")
            raise typer.Exit(code=1) from e

        logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
        return result

    return wrapper
