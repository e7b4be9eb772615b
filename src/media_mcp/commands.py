# SPDX-License-Identifier: MIT
"""Command builders for every media tool.

Each builder is a pure function of resolved paths and validated parameters
and returns a complete argv (binary first). FFmpeg commands are assembled
with ffmpeg-python, except the raw pass-through of execute-arbitrary;
ImageMagick and pngquant commands are plain lists.
"""

import math
import pathlib
from collections.abc import Sequence

import ffmpeg  # type: ignore[import-untyped]

from .exceptions import InvalidInputError
from .types import ImageEffect, WatermarkPosition
from .utils import format_number

# ==================== FFMPEG ====================


def _compile(stream, binary: str) -> list[str]:
    return ffmpeg.compile(stream, cmd=binary, overwrite_output=True)


def check_option_pairs(options: Sequence[str]) -> list[str]:
    """Validate a flat ``[flag, value, flag, value, ...]`` option list.

    Tokens are returned unchanged and in order: FFmpeg resolves conflicting
    options by position, so the caller's ordering must survive.

    Raises:
        InvalidInputError: If the list has an odd number of items
    """
    if len(options) % 2:
        raise InvalidInputError(f"FFmpeg options must be flag/value pairs, got {len(options)} items")
    return list(options)


def build_execute_ffmpeg(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    options: Sequence[str],
    binary: str = "ffmpeg",
) -> list[str]:
    """Pass raw flag/value pairs through to FFmpeg verbatim as output options.

    Assembled as a plain list so the caller's option order reaches FFmpeg
    untouched.
    """
    return [binary, "-i", str(input_path), *check_option_pairs(options), str(output_path), "-y"]


def build_convert_video(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    output_format: str,
    binary: str = "ffmpeg",
) -> list[str]:
    """Re-encode into another container format (``-f FORMAT``)."""
    stream = ffmpeg.input(str(input_path)).output(str(output_path), format=output_format)
    return _compile(stream, binary)


def build_compress_video(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    quality: int = 23,
    binary: str = "ffmpeg",
) -> list[str]:
    """Encode with libx264 at the given CRF (lower is better quality, larger file)."""
    stream = ffmpeg.input(str(input_path)).output(str(output_path), vcodec="libx264", crf=quality)
    return _compile(stream, binary)


def build_trim_video(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    start_time: str,
    duration: str,
    binary: str = "ffmpeg",
) -> list[str]:
    """Seek to ``start_time`` on the input and keep ``duration`` of output."""
    stream = ffmpeg.input(str(input_path), ss=start_time).output(str(output_path), t=duration)
    return _compile(stream, binary)


# ==================== PNGQUANT ====================


def pngquant_quality_range(quality: int) -> tuple[int, int]:
    """Map a single 1-100 quality to pngquant's ``min-max`` range."""
    return max(0, quality - 5), min(100, quality)


def build_compress_image(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    quality: int = 80,
    binary: str = "pngquant",
) -> list[str]:
    low, high = pngquant_quality_range(quality)
    return [binary, f"--quality={low}-{high}", "--force", "--output", str(output_path), str(input_path)]


# ==================== IMAGEMAGICK ====================


def build_convert_image(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    output_format: str,
    binary: str = "convert",
) -> list[str]:
    """Write ``output_path`` in ``output_format`` whatever its extension.

    The ``FORMAT:path`` prefix makes ImageMagick use the requested encoder
    instead of guessing one from the filename.
    """
    return [binary, str(input_path), f"{output_format}:{output_path}"]


def resize_geometry(width: int | None, height: int | None, maintain_aspect_ratio: bool = True) -> str:
    """Build an ImageMagick ``-resize`` geometry.

    - both sides, aspect kept: ``WxH`` (fit inside the box)
    - both sides, aspect ignored: ``WxH!`` (exact size)
    - one side only: ``Wx`` or ``xH`` (scale proportionally)

    Raises:
        InvalidInputError: If neither width nor height is given
    """
    if width is None and height is None:
        raise InvalidInputError("Either width or height must be specified")
    if width is not None and height is not None:
        return f"{width}x{height}" if maintain_aspect_ratio else f"{width}x{height}!"
    if width is not None:
        return f"{width}x"
    return f"x{height}"


def build_resize_image(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    width: int | None = None,
    height: int | None = None,
    maintain_aspect_ratio: bool = True,
    binary: str = "convert",
) -> list[str]:
    geometry = resize_geometry(width, height, maintain_aspect_ratio)
    return [binary, str(input_path), "-resize", geometry, str(output_path)]


def build_rotate_image(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    degrees: float,
    binary: str = "convert",
) -> list[str]:
    if not math.isfinite(degrees):
        raise InvalidInputError(f"Rotation angle must be a finite number, got {degrees}")
    return [binary, str(input_path), "-rotate", format_number(degrees), str(output_path)]


def build_add_watermark(
    input_path: pathlib.Path,
    watermark_path: pathlib.Path,
    output_path: pathlib.Path,
    position: WatermarkPosition = "southeast",
    opacity: int = 50,
    binary: str = "convert",
) -> list[str]:
    """Composite ``watermark_path`` over the base image at a gravity anchor.

    The watermark's alpha channel is multiplied by ``opacity / 100`` first.
    """
    alpha = format_number(opacity / 100)
    return [
        binary,
        str(input_path),
        "(",
        str(watermark_path),
        "-alpha",
        "set",
        "-channel",
        "A",
        "-evaluate",
        "multiply",
        alpha,
        "+channel",
        ")",
        "-gravity",
        position,
        "-composite",
        str(output_path),
    ]


def effect_arguments(effect: ImageEffect, intensity: int = 50) -> list[str]:
    """ImageMagick options for an effect at a 0-100 intensity.

    blur uses intensity/5 as sigma, sharpen/edge/emboss use intensity/10,
    sepia uses intensity as a percentage; grayscale and negate ignore it.

    Raises:
        InvalidInputError: If the effect is unknown
    """
    if effect == "blur":
        return ["-blur", f"0x{format_number(intensity / 5)}"]
    if effect == "sharpen":
        return ["-sharpen", f"0x{format_number(intensity / 10)}"]
    if effect == "edge":
        return ["-edge", format_number(intensity / 10)]
    if effect == "emboss":
        return ["-emboss", format_number(intensity / 10)]
    if effect == "grayscale":
        return ["-colorspace", "Gray"]
    if effect == "sepia":
        return ["-sepia-tone", f"{intensity}%"]
    if effect == "negate":
        return ["-negate"]
    raise InvalidInputError(f"Unknown effect: {effect!r}")


def build_apply_effect(
    input_path: pathlib.Path,
    output_path: pathlib.Path,
    effect: ImageEffect,
    intensity: int = 50,
    binary: str = "convert",
) -> list[str]:
    return [binary, str(input_path), *effect_arguments(effect, intensity), str(output_path)]
