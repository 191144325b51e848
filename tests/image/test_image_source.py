"""Tests for ImageSource validation and property caching."""

from pathlib import Path

import pytest
from PIL import Image

from cl_upload_tools.common.errors import InvalidImageError
from cl_upload_tools.image.image_source import ImageSource


def test_png_properties(png_200x100: Path):
    source = ImageSource.open(png_200x100)

    assert source.width == 200
    assert source.height == 100
    assert source.image_format == "PNG"
    assert source.ratio == 2.0


@pytest.mark.parametrize(
    ("name", "image_format"),
    [("a.gif", "GIF"), ("a.jpg", "JPEG"), ("a.png", "PNG")],
)
def test_supported_formats(make_image, name: str, image_format: str):
    source = ImageSource.open(make_image(name, (30, 60), image_format))

    assert source.image_format == image_format
    assert source.ratio == 0.5


def test_multi_picture_jpeg_is_jpeg(make_image):
    second = Image.new("RGB", (200, 100), color=(10, 20, 30))
    path = make_image("camera.jpg", (200, 100), "MPO", save_all=True, append_images=[second])

    source = ImageSource.open(path)

    assert source.image_format == "JPEG"
    assert (source.width, source.height) == (200, 100)


def test_properties_read_once(png_200x100: Path, monkeypatch: pytest.MonkeyPatch):
    source = ImageSource(png_200x100)
    reads: list[int] = []
    original = source._read  # pyright: ignore[reportPrivateUsage]

    def counting_read():
        reads.append(1)
        return original()

    monkeypatch.setattr(source, "_read", counting_read)

    _ = (source.width, source.height, source.image_format, source.ratio)

    assert len(reads) == 1


def test_cached_properties_survive_file_removal(png_200x100: Path):
    source = ImageSource.open(png_200x100)
    png_200x100.unlink()

    assert source.width == 200


def test_bmp_is_unsupported(make_image):
    path = make_image("a.bmp", (20, 20), "BMP")

    with pytest.raises(InvalidImageError) as exc_info:
        _ = ImageSource.open(path)

    assert exc_info.value.reason == InvalidImageError.UNSUPPORTED_TYPE


def test_text_file_is_not_an_image(text_file: Path):
    with pytest.raises(InvalidImageError) as exc_info:
        _ = ImageSource.open(text_file)

    assert exc_info.value.reason == InvalidImageError.NOT_AN_IMAGE


def test_missing_file_is_not_an_image(tmp_path: Path):
    with pytest.raises(InvalidImageError):
        _ = ImageSource.open(tmp_path / "missing.png")


def test_invalid_source_stays_invalid(make_image):
    source = ImageSource(make_image("a.bmp", (20, 20), "BMP"))

    with pytest.raises(InvalidImageError):
        _ = source.width
    with pytest.raises(InvalidImageError):
        _ = source.image_format
    with pytest.raises(InvalidImageError):
        _ = source.ratio


def test_invalid_source_stays_invalid_after_file_is_fixed(text_file: Path, png_200x100: Path):
    source = ImageSource(text_file)
    with pytest.raises(InvalidImageError):
        _ = source.width

    _ = text_file.write_bytes(png_200x100.read_bytes())

    with pytest.raises(InvalidImageError):
        _ = source.width


def test_decompression_bomb_is_not_an_image(make_image, monkeypatch: pytest.MonkeyPatch):
    path = make_image("large.png", (100, 100), "PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
    source = ImageSource(path)

    with pytest.raises(InvalidImageError) as exc_info:
        _ = source.width
    assert exc_info.value.reason == InvalidImageError.NOT_AN_IMAGE

    monkeypatch.undo()

    with pytest.raises(InvalidImageError):
        _ = source.height
