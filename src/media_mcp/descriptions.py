# SPDX-License-Identifier: MIT
"""Tool descriptions for MCP server. Optimized for token efficiency."""

_OUTPUT_NOTE = (
    "Output: outputPath (absolute path recommended) or, if omitted, Downloads folder + outputFilename/default name."
)

# ==================== VIDEO TOOL DESCRIPTIONS ====================

EXECUTE_FFMPEG = f"""Execute any FFmpeg command with custom options.

Params: inputPath, options (flag/value pairs, e.g. ["-c:v", "libx264", "-crf", "23"]), outputPath, outputFilename (default output.mp4)

{_OUTPUT_NOTE}"""

CONVERT_VIDEO = f"""Convert video to different format.

Params: inputPath, outputFormat (mp4|mkv|avi|webm|...), outputPath, outputFilename (default <name>_converted.<format>)

{_OUTPUT_NOTE}"""

COMPRESS_VIDEO = f"""Compress video file with H.264.

Params: inputPath, quality (1-51, default 23; lower is better quality but larger file), outputPath, outputFilename (default <name>_compressed.mp4)

{_OUTPUT_NOTE}"""

TRIM_VIDEO = f"""Trim video to specified duration.

Params: inputPath, startTime (HH:MM:SS), duration (HH:MM:SS), outputPath, outputFilename (default <name>_trimmed.mp4)

Example: trim-video(inputPath="/videos/a.mp4", startTime="00:01:00", duration="00:00:30")

{_OUTPUT_NOTE}"""


# ==================== IMAGE TOOL DESCRIPTIONS ====================

COMPRESS_IMAGE = f"""Compress PNG image with pngquant (lossy). PNG input only.

Params: inputPath (.png), quality (1-100, default 80), outputPath, outputFilename (default <name>_compressed.png)

{_OUTPUT_NOTE}"""

CONVERT_IMAGE = f"""Convert image to different format with ImageMagick.

Params: inputPath, outputFormat (png|jpg|webp|gif|...), outputPath, outputFilename (default <name>_converted.<format>)

{_OUTPUT_NOTE}"""

RESIZE_IMAGE = f"""Resize image. Provide width, height or both.

Params: inputPath, width, height, maintainAspectRatio (default true: fit inside width x height; false: exact size), outputPath, outputFilename (default <name>_resized.<ext>)

{_OUTPUT_NOTE}"""

ROTATE_IMAGE = f"""Rotate image by any angle (clockwise degrees).

Params: inputPath, degrees, outputPath, outputFilename (default <name>_rotated.<ext>)

{_OUTPUT_NOTE}"""

ADD_WATERMARK = f"""Overlay a watermark image onto an image.

Params: inputPath, watermarkPath, position (northwest|north|northeast|west|center|east|southwest|south|southeast, default southeast), opacity (0-100, default 50), outputPath, outputFilename (default <name>_watermarked.<ext>)

{_OUTPUT_NOTE}"""

APPLY_EFFECT = f"""Apply an effect to an image.

Params: inputPath, effect (blur|sharpen|edge|emboss|grayscale|sepia|negate), intensity (0-100, default 50; ignored by grayscale and negate), outputPath, outputFilename (default <name>_<effect>.<ext>)

{_OUTPUT_NOTE}"""
