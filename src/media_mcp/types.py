# SPDX-License-Identifier: MIT
"""Shared literal types for tool parameters."""

from typing import Literal

WatermarkPosition = Literal[
    "northwest",
    "north",
    "northeast",
    "west",
    "center",
    "east",
    "southwest",
    "south",
    "southeast",
]

ImageEffect = Literal["blur", "sharpen", "edge", "emboss", "grayscale", "sepia", "negate"]
