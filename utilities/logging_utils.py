"""Centralized logging utilities for safe exception handling.

This module provides a unified approach to logging that:
1. Logs to the debug log when debug mode is enabled
2. Never crashes the application due to logging failures
3. Provides context about where errors occurred
"""

from __future__ import annotations

import traceback

from utilities.debug_logger import buffer as debug_buffer, get_logger


def log_exception(
    exception: BaseException,
    context: str = "",
    level: str = "DEBUG",
    with_traceback: bool = False,
) -> None:
    """Log an exception with context in a safe manner.

    This function never raises exceptions. It attempts to log the error
    to the debug buffer if available, otherwise silently ignores.

    Args:
        exception: The exception that was caught.
        context: Description of what was being attempted when error occurred.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        with_traceback: Append the formatted traceback to the entry.
    """
    if get_logger() is None:
        return

    try:
        exc_name = type(exception).__name__
        exc_msg = str(exception) or "(no message)"
        line = f"{context}: {exc_name}: {exc_msg}\n" if context else f"{exc_name}: {exc_msg}\n"
        if with_traceback:
            line += "".join(
                traceback.format_exception(type(exception), exception, exception.__traceback__)
            )
        debug_buffer(line, level=level)
    except Exception:
        # Last resort: we cannot let logging crash the app
        pass


def safe_log(message: str, level: str = "DEBUG") -> None:
    """Log a message in a safe manner.

    This function never raises exceptions. It attempts to log the message
    to the debug buffer if available, otherwise silently ignores.

    Args:
        message: The message to log.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    if get_logger() is None:
        return

    try:
        debug_buffer(message, level=level)
    except Exception:
        pass
