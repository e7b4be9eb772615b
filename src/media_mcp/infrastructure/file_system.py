# SPDX-License-Identifier: MIT
"""Input/output path resolution for tool calls.

Relative paths are resolved against the server process's working directory,
which is usually not the caller's. Clients should send absolute paths.
"""

import pathlib

import anyio

from ..config import logger
from ..exceptions import InputNotFoundError


def _absolute(path: str) -> pathlib.Path:
    candidate = pathlib.Path(path).expanduser()
    if candidate.is_absolute():
        return candidate
    return pathlib.Path.cwd() / candidate


async def ensure_directory(directory: pathlib.Path) -> None:
    """Create a directory (and parents) if it does not already exist."""
    await anyio.Path(directory).mkdir(parents=True, exist_ok=True)


async def resolve_input(path: str) -> pathlib.Path:
    """Resolve a user-supplied input path to an absolute, existing path.

    Args:
        path: Absolute path, or path relative to the server's working directory

    Returns:
        Absolute path to the input file

    Raises:
        InputNotFoundError: If nothing exists at the resolved location
    """
    absolute = _absolute(path)
    if not await anyio.Path(absolute).exists():
        raise InputNotFoundError(f"Input file not found: {path}")
    return absolute


def output_target(
    output_path: str | None,
    default_filename: str,
    downloads_dir: pathlib.Path,
) -> pathlib.Path:
    """Absolute destination for a tool result, without touching the filesystem."""
    if not output_path:
        return downloads_dir / default_filename
    return _absolute(output_path)


async def resolve_output(
    output_path: str | None,
    default_filename: str,
    downloads_dir: pathlib.Path,
) -> pathlib.Path:
    """Resolve where a tool should write its result.

    Without an explicit ``output_path`` the file goes to ``downloads_dir``
    under ``default_filename``. In both cases the parent directory is created.

    Args:
        output_path: Optional explicit destination (absolute or relative)
        default_filename: Filename used when ``output_path`` is omitted
        downloads_dir: Default output directory

    Returns:
        Absolute output path whose parent directory exists

    Raises:
        OSError: If the parent directory cannot be created
    """
    target = output_target(output_path, default_filename, downloads_dir)
    await ensure_directory(target.parent)
    logger.debug("Resolved output path: %s", target)
    return target
