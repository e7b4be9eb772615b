# SPDX-License-Identifier: MIT
"""Naming and formatting helpers shared by the tool handlers."""

import pathlib


def file_stem(path: str | pathlib.Path) -> str:
    """Return the filename without its final extension, or ``"output"``."""
    return pathlib.PurePath(path).stem or "output"


def file_extension(path: str | pathlib.Path) -> str:
    """Return the file extension without the dot, or ``"png"`` if there is none."""
    return pathlib.PurePath(path).suffix.lstrip(".") or "png"


def default_filename(input_path: str | pathlib.Path, suffix: str, extension: str) -> str:
    """Build ``<stem>_<suffix>.<extension>`` for an input file.

    Args:
        input_path: Input file path
        suffix: Operation tag, e.g. "resized"
        extension: Output extension without the dot

    Returns:
        Default output filename
    """
    return f"{file_stem(input_path)}_{suffix}.{extension}"


def format_number(value: float) -> str:
    """Render a number for a command line without a trailing ``.0``.

    Examples:
        format_number(10.0) -> "10"
        format_number(2.5) -> "2.5"
    """
    if float(value).is_integer():
        return str(int(value))
    return str(round(value, 6))
