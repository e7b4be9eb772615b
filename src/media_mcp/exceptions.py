# SPDX-License-Identifier: MIT
"""Exception types for media tool handlers.

Handlers never let these escape to the transport: ``tool_errors`` turns any
failure into a labelled error string so the calling agent always receives
parseable text.
"""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec

from .config import logger

P = ParamSpec("P")


class MediaToolError(Exception):
    """Base class for all media tool failures."""


class InvalidInputError(MediaToolError, ValueError):
    """Raised when arguments are well-typed but unusable (wrong file type, missing alternative)."""


class InputNotFoundError(MediaToolError, FileNotFoundError):
    """Raised when an input file cannot be found."""


class MissingDependencyError(MediaToolError):
    """Raised when a required external binary is not installed."""


class ExternalProcessError(MediaToolError):
    """Raised when an external binary exits with a non-zero status.

    Attributes:
        binary: Executable that was run
        returncode: Process exit status
        stderr: Last lines of the process's stderr output
    """

    def __init__(self, binary: str, returncode: int, stderr: str = ""):
        self.binary = binary
        self.returncode = returncode
        self.stderr = stderr
        message = f"{binary} exited with code {returncode}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


def tool_errors(label: str) -> Callable[[Callable[P, Awaitable[str]]], Callable[P, Awaitable[str]]]:
    """Convert any exception raised by a tool handler into ``"<label>: <message>"``.

    Args:
        label: Operation-specific prefix, e.g. "Error resizing image"

    Returns:
        Decorator for async handlers returning a result string
    """

    def decorator(func: Callable[P, Awaitable[str]]) -> Callable[P, Awaitable[str]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> str:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.warning("%s: %s", label, e)
                return f"{label}: {e}"

        return wrapper

    return decorator
