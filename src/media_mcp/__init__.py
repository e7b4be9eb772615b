# SPDX-License-Identifier: MIT
"""media-mcp: MCP server exposing FFmpeg, ImageMagick and pngquant media tools."""

__version__ = "1.0.0"
