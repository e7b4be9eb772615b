# SPDX-License-Identifier: MIT
"""Configuration management for the media MCP server.

This module handles:
- Logging setup
- Environment variable parsing into a settings object
- Default output directory (the user's Downloads folder)
"""

import logging
import os
import pathlib
import sys
from dataclasses import dataclass
from functools import lru_cache

# ---------- Logging configuration ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,  # Log to stderr to avoid interfering with stdio MCP transport
)
logger = logging.getLogger("media-mcp")


# ---------- Settings (context object) ----------
@dataclass(frozen=True)
class MediaSettings:
    """Process-wide settings injected into every tool handler.

    Attributes:
        downloads_dir: Directory used when a tool call omits ``outputPath``
        ffmpeg_binary: FFmpeg executable name or path
        magick_binary: ImageMagick executable name or path
        pngquant_binary: pngquant executable name or path
    """

    downloads_dir: pathlib.Path
    ffmpeg_binary: str = "ffmpeg"
    magick_binary: str = "convert"
    pngquant_binary: str = "pngquant"


def default_downloads_dir() -> pathlib.Path:
    """Return the invoking user's Downloads directory."""
    return pathlib.Path.home() / "Downloads"


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value and value.strip():
        return value.strip()
    return default


@lru_cache(maxsize=1)
def get_settings() -> MediaSettings:
    """Build settings from environment variables.

    Recognised variables:
        MEDIA_DOWNLOADS_PATH: Default output directory (default: ~/Downloads)
        FFMPEG_PATH: FFmpeg binary (default: ffmpeg)
        MAGICK_PATH: ImageMagick binary (default: convert)
        PNGQUANT_PATH: pngquant binary (default: pngquant)

    The downloads directory is not created here; it is created lazily the
    first time a tool writes into it.

    Returns:
        Cached MediaSettings instance

    Raises:
        RuntimeError: If MEDIA_DOWNLOADS_PATH cannot be parsed as a path
    """
    downloads_str = os.getenv("MEDIA_DOWNLOADS_PATH")
    if downloads_str and downloads_str.strip():
        try:
            downloads_dir = pathlib.Path(downloads_str.strip()).expanduser().resolve()
        except (ValueError, OSError) as e:
            raise RuntimeError(f"Invalid MEDIA_DOWNLOADS_PATH '{downloads_str}': {e}") from e
    else:
        downloads_dir = default_downloads_dir()

    return MediaSettings(
        downloads_dir=downloads_dir,
        ffmpeg_binary=_env("FFMPEG_PATH", "ffmpeg"),
        magick_binary=_env("MAGICK_PATH", "convert"),
        pngquant_binary=_env("PNGQUANT_PATH", "pngquant"),
    )
