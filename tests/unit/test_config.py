# SPDX-License-Identifier: MIT
"""Unit tests for configuration management."""

import pathlib

import pytest

from media_mcp.config import MediaSettings, default_downloads_dir, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Clear get_settings() cache and media env vars before each test."""
    for var in ("MEDIA_DOWNLOADS_PATH", "FFMPEG_PATH", "MAGICK_PATH", "PNGQUANT_PATH"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestGetSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))

        settings = get_settings()

        assert settings.downloads_dir == tmp_path / "Downloads"
        assert settings.ffmpeg_binary == "ffmpeg"
        assert settings.magick_binary == "convert"
        assert settings.pngquant_binary == "pngquant"

    def test_downloads_dir_not_created_eagerly(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        get_settings()
        assert not (tmp_path / "Downloads").exists()

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MEDIA_DOWNLOADS_PATH", str(tmp_path / "out"))
        monkeypatch.setenv("FFMPEG_PATH", "/opt/ffmpeg")
        monkeypatch.setenv("MAGICK_PATH", "magick")
        monkeypatch.setenv("PNGQUANT_PATH", " /usr/local/bin/pngquant ")

        settings = get_settings()

        assert settings.downloads_dir == (tmp_path / "out").resolve()
        assert settings.ffmpeg_binary == "/opt/ffmpeg"
        assert settings.magick_binary == "magick"
        assert settings.pngquant_binary == "/usr/local/bin/pngquant"

    def test_blank_env_falls_back_to_default(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("MEDIA_DOWNLOADS_PATH", "   ")
        monkeypatch.setenv("FFMPEG_PATH", "")

        settings = get_settings()

        assert settings.downloads_dir == tmp_path / "Downloads"
        assert settings.ffmpeg_binary == "ffmpeg"

    def test_relative_downloads_path_made_absolute(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("MEDIA_DOWNLOADS_PATH", "exports")

        assert get_settings().downloads_dir == (tmp_path / "exports").resolve()

    def test_cached(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MEDIA_DOWNLOADS_PATH", str(tmp_path / "first"))
        first = get_settings()
        monkeypatch.setenv("MEDIA_DOWNLOADS_PATH", str(tmp_path / "second"))
        assert get_settings() is first


@pytest.mark.unit
def test_default_downloads_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_downloads_dir() == pathlib.Path(tmp_path) / "Downloads"


@pytest.mark.unit
def test_settings_are_frozen(tmp_path):
    settings = MediaSettings(downloads_dir=tmp_path)
    with pytest.raises(AttributeError):
        settings.ffmpeg_binary = "other"  # type: ignore[misc]
