# SPDX-License-Identifier: MIT
"""Detection of the external binaries the media tools shell out to.

FFmpeg is treated as always present (video tools fail with a spawn error
otherwise). ImageMagick and pngquant are optional and verified on every call
of a tool that needs them.
"""

import shutil

from .config import MediaSettings, logger
from .exceptions import ExternalProcessError, MissingDependencyError
from .infrastructure.process import run_process

IMAGEMAGICK = "ImageMagick"
PNGQUANT = "pngquant"

INSTALL_HINTS: dict[str, str] = {
    IMAGEMAGICK: "Install it with 'brew install imagemagick' or 'apt-get install imagemagick'",
    PNGQUANT: "Install it with 'brew install pngquant' or 'apt-get install pngquant'",
}

# ImageMagick only understands single-dash options
VERSION_FLAGS: dict[str, str] = {
    IMAGEMAGICK: "-version",
    PNGQUANT: "--version",
}


async def ensure_binary_available(binary: str, tool_name: str) -> None:
    """Verify an external binary runs by asking it for its version.

    Args:
        binary: Executable name or path
        tool_name: Human-readable tool name (``IMAGEMAGICK`` or ``PNGQUANT``)

    Raises:
        MissingDependencyError: If the binary is missing or exits non-zero
    """
    try:
        await run_process([binary, VERSION_FLAGS.get(tool_name, "--version")])
    except (MissingDependencyError, ExternalProcessError) as e:
        hint = INSTALL_HINTS.get(tool_name, "")
        raise MissingDependencyError(f"{tool_name} is not installed or not working ({binary}). {hint}".strip()) from e


def get_available_binaries(settings: MediaSettings) -> dict[str, bool]:
    """Check which external binaries are on PATH.

    Returns:
        Dict mapping tool name to availability status
    """
    available = {
        "ffmpeg": shutil.which(settings.ffmpeg_binary) is not None,
        IMAGEMAGICK: shutil.which(settings.magick_binary) is not None,
        PNGQUANT: shutil.which(settings.pngquant_binary) is not None,
    }
    for name, found in available.items():
        if found:
            logger.info("%s detected - dependent tools available", name)
        else:
            logger.info("%s not found - dependent tools will report an error", name)
    return available
