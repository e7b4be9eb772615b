# SPDX-License-Identifier: MIT
"""Media MCP Server - FastMCP server exposing FFmpeg, ImageMagick and pngquant tools.

This module builds the FastMCP server and registers all tools.
Business logic is organized into submodules under tools/.

Tool parameters use the camelCase names clients send on the wire; each
wrapper forwards them to the snake_case handler together with the settings
object the server was built with.
"""

import sys
from typing import Annotated

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from pydantic import Field, PositiveInt

from .config import MediaSettings, get_settings, logger
from .descriptions import (
    ADD_WATERMARK,
    APPLY_EFFECT,
    COMPRESS_IMAGE,
    COMPRESS_VIDEO,
    CONVERT_IMAGE,
    CONVERT_VIDEO,
    EXECUTE_FFMPEG,
    RESIZE_IMAGE,
    ROTATE_IMAGE,
    TRIM_VIDEO,
)
from .features import get_available_binaries
from .tools import image, video
from .types import ImageEffect, WatermarkPosition

SERVER_NAME = "media-mcp"

TIME_PATTERN = r"^\d{1,2}:\d{2}:\d{2}(\.\d+)?$"

InputPath = Annotated[str, Field(description="Path to input file (absolute path recommended)")]
OutputPath = Annotated[
    str | None,
    Field(description="Optional output path. If not provided, file will be saved in Downloads folder"),
]
OutputFilename = Annotated[
    str | None,
    Field(description="Output filename (only used if outputPath is not provided)"),
]


def create_server(settings: MediaSettings) -> FastMCP:
    """Build a FastMCP server with every media tool registered.

    Args:
        settings: Settings injected into every tool handler

    Returns:
        Configured FastMCP instance (not yet running)
    """
    mcp = FastMCP(SERVER_NAME)

    # ==================== VIDEO TOOLS ====================
    async def execute_ffmpeg(
        inputPath: InputPath,
        options: Annotated[list[str], Field(description="FFmpeg options as flag/value pairs")],
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await video.execute_ffmpeg(settings, inputPath, options, outputPath, outputFilename)

    mcp.add_tool(execute_ffmpeg, name="execute-arbitrary", description=EXECUTE_FFMPEG)
    mcp.add_tool(execute_ffmpeg, name="execute-ffmpeg", description=EXECUTE_FFMPEG)

    @mcp.tool(name="convert-video", description=CONVERT_VIDEO)
    async def convert_video(
        inputPath: InputPath,
        outputFormat: Annotated[str, Field(min_length=1, description="Desired output format (e.g., mp4, mkv, avi)")],
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await video.convert_video(settings, inputPath, outputFormat, outputPath, outputFilename)

    @mcp.tool(name="compress-video", description=COMPRESS_VIDEO)
    async def compress_video(
        inputPath: InputPath,
        quality: Annotated[int, Field(ge=1, le=51, description="Compression quality (1-51, lower is better)")] = 23,
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await video.compress_video(settings, inputPath, quality, outputPath, outputFilename)

    @mcp.tool(name="trim-video", description=TRIM_VIDEO)
    async def trim_video(
        inputPath: InputPath,
        startTime: Annotated[str, Field(pattern=TIME_PATTERN, description="Start time in format HH:MM:SS")],
        duration: Annotated[str, Field(pattern=TIME_PATTERN, description="Duration in format HH:MM:SS")],
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await video.trim_video(settings, inputPath, startTime, duration, outputPath, outputFilename)

    # ==================== IMAGE TOOLS ====================
    @mcp.tool(name="compress-image", description=COMPRESS_IMAGE)
    async def compress_image(
        inputPath: Annotated[str, Field(description="Path to input PNG file")],
        quality: Annotated[int, Field(ge=1, le=100, description="Compression quality (1-100)")] = 80,
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await image.compress_image(settings, inputPath, quality, outputPath, outputFilename)

    @mcp.tool(name="convert-image", description=CONVERT_IMAGE)
    async def convert_image(
        inputPath: InputPath,
        outputFormat: Annotated[str, Field(min_length=1, description="Desired output format (e.g., png, jpg, webp)")],
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await image.convert_image(settings, inputPath, outputFormat, outputPath, outputFilename)

    @mcp.tool(name="resize-image", description=RESIZE_IMAGE)
    async def resize_image(
        inputPath: InputPath,
        width: Annotated[PositiveInt | None, Field(description="Target width in pixels")] = None,
        height: Annotated[PositiveInt | None, Field(description="Target height in pixels")] = None,
        maintainAspectRatio: Annotated[bool, Field(description="Keep aspect ratio when both sides are given")] = True,
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await image.resize_image(
            settings, inputPath, width, height, maintainAspectRatio, outputPath, outputFilename
        )

    @mcp.tool(name="rotate-image", description=ROTATE_IMAGE)
    async def rotate_image(
        inputPath: InputPath,
        degrees: Annotated[float, Field(allow_inf_nan=False, description="Rotation angle in degrees (clockwise)")],
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await image.rotate_image(settings, inputPath, degrees, outputPath, outputFilename)

    @mcp.tool(name="add-watermark", description=ADD_WATERMARK)
    async def add_watermark(
        inputPath: InputPath,
        watermarkPath: Annotated[str, Field(description="Path to watermark image")],
        position: Annotated[WatermarkPosition, Field(description="Watermark anchor")] = "southeast",
        opacity: Annotated[int, Field(ge=0, le=100, description="Watermark opacity (0-100)")] = 50,
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await image.add_watermark(
            settings, inputPath, watermarkPath, position, opacity, outputPath, outputFilename
        )

    @mcp.tool(name="apply-effect", description=APPLY_EFFECT)
    async def apply_effect(
        inputPath: InputPath,
        effect: Annotated[ImageEffect, Field(description="Effect to apply")],
        intensity: Annotated[int, Field(ge=0, le=100, description="Effect intensity (0-100)")] = 50,
        outputPath: OutputPath = None,
        outputFilename: OutputFilename = None,
    ) -> str:
        return await image.apply_effect(settings, inputPath, effect, intensity, outputPath, outputFilename)

    return mcp


# ==================== SERVER ENTRYPOINT ====================
def main():
    """Run the MCP server over stdio until the client closes the channel."""
    load_dotenv()
    try:
        settings = get_settings()
        get_available_binaries(settings)
        mcp = create_server(settings)
        logger.info("Default output directory: %s", settings.downloads_dir)
        logger.info("Starting media MCP server over stdio")
        mcp.run()
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
