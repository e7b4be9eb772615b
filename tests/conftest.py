# SPDX-License-Identifier: MIT
"""Shared pytest fixtures for media MCP server tests."""

import pathlib

import pytest
from PIL import Image

from media_mcp.config import MediaSettings


@pytest.fixture
def tmp_downloads_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Default output directory for tool calls (not created up front)."""
    return tmp_path / "Downloads"


@pytest.fixture
def settings(tmp_downloads_path: pathlib.Path) -> MediaSettings:
    """Settings pointing the downloads directory into tmp_path."""
    return MediaSettings(downloads_dir=tmp_downloads_path)


@pytest.fixture
def tmp_media_path(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory for input media."""
    media_path = tmp_path / "media"
    media_path.mkdir()
    return media_path


@pytest.fixture
def sample_image(tmp_media_path: pathlib.Path) -> pathlib.Path:
    """Create a sample RGB image for testing.

    Returns path to a 200x100 RGB test image.
    """
    img_path = tmp_media_path / "photo.png"
    img = Image.new("RGB", (200, 100), color=(255, 0, 0))  # Red 200x100 image
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def sample_jpeg(tmp_media_path: pathlib.Path) -> pathlib.Path:
    """Create a sample JPEG image. Returns path to a 100x100 test image."""
    img_path = tmp_media_path / "snapshot.jpg"
    img = Image.new("RGB", (100, 100), color=(0, 255, 0))
    img.save(img_path, "JPEG")
    return img_path


@pytest.fixture
def sample_watermark(tmp_media_path: pathlib.Path) -> pathlib.Path:
    """Create a small semi-transparent RGBA watermark."""
    img_path = tmp_media_path / "logo.png"
    img = Image.new("RGBA", (20, 20), color=(0, 0, 255, 128))
    img.save(img_path, "PNG")
    return img_path


@pytest.fixture
def sample_video(tmp_media_path: pathlib.Path) -> pathlib.Path:
    """Placeholder video file; its bytes are never decoded because FFmpeg is mocked."""
    video_path = tmp_media_path / "clip.mov"
    video_path.write_bytes(b"not really a video")
    return video_path
