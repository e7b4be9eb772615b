# SPDX-License-Identifier: MIT
"""Unit tests for the error taxonomy and handler boundary."""

import pytest

from media_mcp.exceptions import (
    ExternalProcessError,
    InputNotFoundError,
    InvalidInputError,
    MediaToolError,
    MissingDependencyError,
    tool_errors,
)


@pytest.mark.unit
class TestToolErrors:
    async def test_success_passes_through(self):
        @tool_errors("Error doing thing")
        async def handler(value: str) -> str:
            return f"done {value}"

        assert await handler("x") == "done x"

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidInputError("bad input"),
            InputNotFoundError("Input file not found: a.mp4"),
            MissingDependencyError("ImageMagick is not installed"),
            ExternalProcessError("ffmpeg", 1, "Invalid data"),
            RuntimeError("unexpected"),
            PermissionError("denied"),
        ],
    )
    async def test_any_exception_becomes_prefixed_text(self, exc):
        @tool_errors("Error resizing image")
        async def handler() -> str:
            raise exc

        result = await handler()

        assert result == f"Error resizing image: {exc}"

    def test_preserves_name(self):
        @tool_errors("Error")
        async def rotate() -> str:
            return ""

        assert rotate.__name__ == "rotate"


@pytest.mark.unit
class TestTaxonomy:
    def test_all_share_base(self):
        for cls in (InvalidInputError, InputNotFoundError, MissingDependencyError, ExternalProcessError):
            assert issubclass(cls, MediaToolError)

    def test_builtin_compatibility(self):
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InputNotFoundError, FileNotFoundError)

    def test_external_process_message(self):
        err = ExternalProcessError("convert", 1, "no decode delegate")
        assert str(err) == "convert exited with code 1: no decode delegate"

    def test_external_process_message_without_stderr(self):
        assert str(ExternalProcessError("ffmpeg", 2)) == "ffmpeg exited with code 2"
