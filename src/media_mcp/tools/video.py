# SPDX-License-Identifier: MIT
"""Video tools backed by FFmpeg.

This module contains all video-related operations:
- Running arbitrary FFmpeg option pairs
- Converting between container formats
- Compressing with libx264
- Trimming to a time range
"""

from collections.abc import Sequence

from .. import commands
from ..config import MediaSettings
from ..exceptions import tool_errors
from ..infrastructure.file_system import ensure_directory, output_target, resolve_input, resolve_output
from ..infrastructure.process import run_ffmpeg
from ..utils import default_filename


@tool_errors("Error processing video")
async def execute_ffmpeg(
    settings: MediaSettings,
    input_path: str,
    options: Sequence[str],
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Run FFmpeg with caller-supplied output options.

    Args:
        settings: Server settings
        input_path: Input video path
        options: Flat list of flag/value pairs, e.g. ["-c:v", "libx264", "-crf", "23"]
        output_path: Optional explicit output path
        output_filename: Filename in the downloads directory when output_path is omitted

    Returns:
        Success message with the output path, or an error message
    """
    source = await resolve_input(input_path)
    target = output_target(output_path, output_filename or "output.mp4", settings.downloads_dir)
    # Odd-length option lists fail here, before any directory is created
    command = commands.build_execute_ffmpeg(source, target, options, binary=settings.ffmpeg_binary)
    await ensure_directory(target.parent)

    await run_ffmpeg(command)
    return f"Video processing completed successfully. Output saved to: {target}"


@tool_errors("Error converting video")
async def convert_video(
    settings: MediaSettings,
    input_path: str,
    output_format: str,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Convert a video to another container format.

    Returns:
        Success message with the output path, or an error message
    """
    source = await resolve_input(input_path)
    filename = output_filename or default_filename(source, "converted", output_format)
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_ffmpeg(commands.build_convert_video(source, target, output_format, binary=settings.ffmpeg_binary))
    return f"Video successfully converted and saved to: {target}"


@tool_errors("Error compressing video")
async def compress_video(
    settings: MediaSettings,
    input_path: str,
    quality: int = 23,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Compress a video with libx264.

    Args:
        quality: CRF value 1-51, lower is better quality but larger file

    Returns:
        Success message with the output path, or an error message
    """
    source = await resolve_input(input_path)
    filename = output_filename or default_filename(source, "compressed", "mp4")
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_ffmpeg(commands.build_compress_video(source, target, quality, binary=settings.ffmpeg_binary))
    return f"Video successfully compressed and saved to: {target}"


@tool_errors("Error trimming video")
async def trim_video(
    settings: MediaSettings,
    input_path: str,
    start_time: str,
    duration: str,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Cut ``duration`` of video starting at ``start_time`` (both HH:MM:SS).

    Returns:
        Success message with the output path, or an error message
    """
    source = await resolve_input(input_path)
    filename = output_filename or default_filename(source, "trimmed", "mp4")
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_ffmpeg(
        commands.build_trim_video(source, target, start_time, duration, binary=settings.ffmpeg_binary)
    )
    return f"Video successfully trimmed and saved to: {target}"
