# SPDX-License-Identifier: MIT
"""External process execution.

Every media transformation is delegated to a command-line tool. This module
spawns it, streams its stderr for logging, and turns a non-zero exit into an
``ExternalProcessError``. There is no timeout and no retry: a call waits for
the process to finish, however long that takes.
"""

import re
import shlex
import subprocess
from collections import deque
from collections.abc import Callable, Sequence

import anyio
from anyio.streams.text import TextReceiveStream

from ..config import logger
from ..exceptions import ExternalProcessError, MissingDependencyError

STDERR_TAIL_LINES = 20

_LINE_SPLIT = re.compile(r"[\r\n]")
_FFMPEG_DURATION = re.compile(r"Duration:\s*(\d+):(\d{2}):(\d{2}(?:\.\d+)?)")
_FFMPEG_TIME = re.compile(r"time=\s*(\d+):(\d{2}):(\d{2}(?:\.\d+)?)")


def _to_seconds(hours: str, minutes: str, seconds: str) -> float:
    return int(hours) * 3600 + int(minutes) * 60 + float(seconds)


async def run_process(args: Sequence[str], on_line: Callable[[str], None] | None = None) -> None:
    """Run a command to completion.

    The child's stdin is detached so it can never consume MCP messages from
    the server's own stdin. stdout is discarded; stderr is read line by line
    (both ``\\n`` and ``\\r`` terminate a line, since FFmpeg redraws progress
    with carriage returns).

    Args:
        args: Full argv, binary first
        on_line: Optional callback invoked for each non-empty stderr line

    Raises:
        MissingDependencyError: If the binary cannot be found
        ExternalProcessError: If the process exits with a non-zero status
    """
    binary = args[0]
    tail: deque[str] = deque(maxlen=STDERR_TAIL_LINES)

    def handle(line: str) -> None:
        line = line.strip()
        if not line:
            return
        tail.append(line)
        if on_line is not None:
            on_line(line)

    try:
        process = await anyio.open_process(
            list(args),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise MissingDependencyError(f"Executable not found: {binary}") from e

    async with process:
        if process.stderr is not None:
            buffer = ""
            async for chunk in TextReceiveStream(process.stderr, errors="replace"):
                buffer += chunk
                *lines, buffer = _LINE_SPLIT.split(buffer)
                for line in lines:
                    handle(line)
            handle(buffer)
        returncode = await process.wait()

    if returncode != 0:
        raise ExternalProcessError(binary, returncode, "\n".join(tail))


class FFmpegProgress:
    """Stderr line handler that logs FFmpeg progress as a percentage.

    FFmpeg prints the input ``Duration:`` once, then periodic ``time=`` stats.
    Percentages are logged at debug level, at most once per whole percent.
    """

    def __init__(self) -> None:
        self.duration: float | None = None
        self.last_percent = -1

    def __call__(self, line: str) -> None:
        if self.duration is None:
            match = _FFMPEG_DURATION.search(line)
            if match:
                self.duration = _to_seconds(*match.groups())
                return
        match = _FFMPEG_TIME.search(line)
        if not match or not self.duration:
            return
        percent = min(100, int(_to_seconds(*match.groups()) / self.duration * 100))
        if percent > self.last_percent:
            self.last_percent = percent
            logger.debug("Processing: %d%% done", percent)


async def run_ffmpeg(args: Sequence[str]) -> None:
    """Run a compiled FFmpeg command, logging its lifecycle.

    Args:
        args: FFmpeg argv as produced by ``ffmpeg.compile``

    Raises:
        MissingDependencyError: If the FFmpeg binary cannot be found
        ExternalProcessError: If FFmpeg exits with a non-zero status
    """
    logger.info("Executing FFmpeg command: %s", shlex.join(args))
    await run_process(args, on_line=FFmpegProgress())
    logger.info("FFmpeg finished successfully")


async def run_image_tool(args: Sequence[str]) -> None:
    """Run an ImageMagick or pngquant command."""
    logger.info("Executing: %s", shlex.join(args))
    await run_process(args)
