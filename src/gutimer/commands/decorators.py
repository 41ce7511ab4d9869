"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from gutimer.utils.exit_codes import ERROR_INPUT, get_exit_code_name
from gutimer.utils.logger import get_logger
from gutimer.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_INPUT):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Log the command's lifetime and turn errors into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s",
                cmd,
                elapsed,
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit as e:
            elapsed = time.monotonic() - start
            logger.info(
                "command exited: %s (%.3fs) %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
            )
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=1) from e

    return wrapper
