# SPDX-License-Identifier: MIT
"""Media tool handlers.

This package contains the handler implementations organized by category:
- video: FFmpeg-backed tools (execute, convert, compress, trim)
- image: ImageMagick- and pngquant-backed tools (compress, convert, resize, rotate, watermark, effects)

Handlers take the server settings as their first argument and always return
a result string; failures come back as "Error ...: <message>" text.
"""
