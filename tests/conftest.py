"""Test configuration and fixtures for cl_upload_tools.

This module provides:
- Function-scoped fixtures (destination/staging dirs, synthetic images)
- Transport fixtures (staged temp files and per-field upload tables)
- Collaborator stubs (counting path-info splitter and MIME detector)
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

from cl_upload_tools.utils.sanitize import PathInfo, path_info

ImageFactory = Callable[..., Path]


# ============================================================================
# Directory Fixtures
# ============================================================================


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    """Empty destination directory for accepted uploads."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    return directory


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    """Directory standing in for the transport's temp area."""
    directory = tmp_path / "staging"
    directory.mkdir()
    return directory


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a synthetic image with PIL."""

    def _make(
        name: str = "sample.png",
        size: tuple[int, int] = (200, 100),
        image_format: str = "PNG",
        mode: str = "RGB",
        directory: Path | None = None,
        **save_kwargs: object,
    ) -> Path:
        output_path = (directory or tmp_path) / name

        colors = {"RGB": (73, 109, 137), "RGBA": (73, 109, 137, 128)}
        img = Image.new(mode, size, color=colors.get(mode, 0))
        draw = ImageDraw.Draw(img)
        width, height = size
        draw.rectangle([width // 4, height // 4, width // 2, height // 2], fill="white")

        img.save(output_path, image_format, **save_kwargs)
        return output_path

    return _make


@pytest.fixture
def png_200x100(make_image: ImageFactory) -> Path:
    """200x100 PNG (ratio 2.0)."""
    return make_image("wide.png", (200, 100), "PNG")


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    _ = path.write_text("definitely not an image\n", encoding="utf-8")
    return path


# ============================================================================
# Transport Fixtures
# ============================================================================


@pytest.fixture
def stage_upload(staging_dir: Path, make_image: ImageFactory) -> Callable[..., dict[str, dict[str, object]]]:
    """
    Factory staging a PNG temp file and returning the transport's upload
    table for field ``file``.
    """
    counter = {"n": 0}

    def _stage(
        original_name: str = "photo.png",
        error: int = 0,
        field_name: str = "file",
        declared_type: str = "image/png",
    ) -> dict[str, dict[str, object]]:
        counter["n"] += 1
        tmp = make_image(f"php{counter['n']}.tmp", (40, 30), "PNG", directory=staging_dir)
        return {
            field_name: {
                "name": original_name,
                "type": declared_type,
                "tmp_name": str(tmp),
                "size": tmp.stat().st_size,
                "error": error,
            }
        }

    return _stage


# ============================================================================
# Collaborator Stubs
# ============================================================================


class CountingCollaborators:
    """Counts calls to the path-info splitter and MIME detector."""

    def __init__(self, mime_type: str | None = "image/png"):
        self.mime_type: str | None = mime_type
        self.path_info_calls: int = 0
        self.mime_calls: int = 0

    def name_splitter(self, name: str) -> PathInfo:
        self.path_info_calls += 1
        return path_info(name)

    def mime_detector(self, _path: Path) -> str | None:
        self.mime_calls += 1
        return self.mime_type

    def as_kwargs(self) -> dict[str, Callable[..., object]]:
        return {"name_splitter": self.name_splitter, "mime_detector": self.mime_detector}


@pytest.fixture
def collaborators() -> CountingCollaborators:
    return CountingCollaborators()
