# SPDX-License-Identifier: MIT
"""Image tools backed by ImageMagick and pngquant.

Every tool checks that its binary runs before creating any output
directory, so a missing dependency leaves the filesystem untouched.
"""

from .. import commands
from ..config import MediaSettings, logger
from ..exceptions import InvalidInputError, tool_errors
from ..features import IMAGEMAGICK, PNGQUANT, ensure_binary_available
from ..infrastructure.file_system import resolve_input, resolve_output
from ..infrastructure.process import run_image_tool
from ..types import ImageEffect, WatermarkPosition
from ..utils import default_filename, file_extension


@tool_errors("Error compressing image")
async def compress_image(
    settings: MediaSettings,
    input_path: str,
    quality: int = 80,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Lossy-compress a PNG with pngquant.

    Args:
        settings: Server settings
        input_path: Input PNG path (other formats are rejected)
        quality: Target quality 1-100, mapped to pngquant's min-max range
        output_path: Optional explicit output path
        output_filename: Filename in the downloads directory when output_path is omitted

    Returns:
        Success message with the output path, or an error message
    """
    if not input_path.lower().endswith(".png"):
        raise InvalidInputError("Only PNG files are supported for compression")

    source = await resolve_input(input_path)
    await ensure_binary_available(settings.pngquant_binary, PNGQUANT)
    filename = output_filename or default_filename(source, "compressed", "png")
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_image_tool(commands.build_compress_image(source, target, quality, binary=settings.pngquant_binary))
    return f"Image successfully compressed and saved to: {target}"


@tool_errors("Error converting image")
async def convert_image(
    settings: MediaSettings,
    input_path: str,
    output_format: str,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Convert an image to another format (png, jpg, webp, ...)."""
    source = await resolve_input(input_path)
    await ensure_binary_available(settings.magick_binary, IMAGEMAGICK)
    filename = output_filename or default_filename(source, "converted", output_format)
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_image_tool(
        commands.build_convert_image(source, target, output_format, binary=settings.magick_binary)
    )
    return f"Image successfully converted and saved to: {target}"


@tool_errors("Error resizing image")
async def resize_image(
    settings: MediaSettings,
    input_path: str,
    width: int | None = None,
    height: int | None = None,
    maintain_aspect_ratio: bool = True,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Resize an image.

    With both sides given, ``maintain_aspect_ratio`` chooses between fitting
    inside the box and forcing the exact size. With one side, the other
    scales proportionally.

    Returns:
        Success message with the output path, or an error message
    """
    geometry = commands.resize_geometry(width, height, maintain_aspect_ratio)
    source = await resolve_input(input_path)
    await ensure_binary_available(settings.magick_binary, IMAGEMAGICK)
    filename = output_filename or default_filename(source, "resized", file_extension(source))
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    logger.debug("Resize geometry for %s: %s", source.name, geometry)
    await run_image_tool(
        commands.build_resize_image(
            source, target, width, height, maintain_aspect_ratio, binary=settings.magick_binary
        )
    )
    return f"Image successfully resized and saved to: {target}"


@tool_errors("Error rotating image")
async def rotate_image(
    settings: MediaSettings,
    input_path: str,
    degrees: float,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    source = await resolve_input(input_path)
    await ensure_binary_available(settings.magick_binary, IMAGEMAGICK)
    filename = output_filename or default_filename(source, "rotated", file_extension(source))
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_image_tool(commands.build_rotate_image(source, target, degrees, binary=settings.magick_binary))
    return f"Image successfully rotated and saved to: {target}"


@tool_errors("Error adding watermark")
async def add_watermark(
    settings: MediaSettings,
    input_path: str,
    watermark_path: str,
    position: WatermarkPosition = "southeast",
    opacity: int = 50,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Overlay a watermark image onto a base image.

    Args:
        settings: Server settings
        input_path: Base image path
        watermark_path: Watermark image path
        position: Gravity anchor (compass direction or center)
        opacity: Watermark opacity 0-100
        output_path: Optional explicit output path
        output_filename: Filename in the downloads directory when output_path is omitted

    Returns:
        Success message with the output path, or an error message
    """
    source = await resolve_input(input_path)
    watermark = await resolve_input(watermark_path)
    await ensure_binary_available(settings.magick_binary, IMAGEMAGICK)
    filename = output_filename or default_filename(source, "watermarked", file_extension(source))
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_image_tool(
        commands.build_add_watermark(source, watermark, target, position, opacity, binary=settings.magick_binary)
    )
    return f"Watermark successfully added and saved to: {target}"


@tool_errors("Error applying effect")
async def apply_effect(
    settings: MediaSettings,
    input_path: str,
    effect: ImageEffect,
    intensity: int = 50,
    output_path: str | None = None,
    output_filename: str | None = None,
) -> str:
    """Apply a named effect; ``intensity`` is ignored by grayscale and negate."""
    source = await resolve_input(input_path)
    await ensure_binary_available(settings.magick_binary, IMAGEMAGICK)
    filename = output_filename or default_filename(source, effect, file_extension(source))
    target = await resolve_output(output_path, filename, settings.downloads_dir)

    await run_image_tool(
        commands.build_apply_effect(source, target, effect, intensity, binary=settings.magick_binary)
    )
    return f"Effect '{effect}' successfully applied and saved to: {target}"
