"""Pure image resize computation logic (single image)."""

import math
from pathlib import Path

from PIL import Image, ImageOps

# info keys that describe pixels rather than metadata
_PIXEL_INFO_KEYS = ("transparency",)


def scaled_height(width: int, ratio: float) -> int:
    """Height matching ``width`` at ``ratio``, rounded half away from zero."""
    return max(1, math.floor(width / ratio + 0.5))


def scale_image(img: Image.Image, width: int, height: int) -> Image.Image:
    """Scale to exactly ``width`` x ``height``."""
    return img.resize((width, height), Image.Resampling.LANCZOS)


def crop_thumbnail(img: Image.Image, width: int, height: int) -> Image.Image:
    """
    Scale the image until it covers ``width`` x ``height``, then crop the
    centre to exactly that size.
    """
    return ImageOps.fit(
        img,
        (width, height),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )


def strip_metadata(img: Image.Image) -> Image.Image:
    """Drop EXIF, ICC profiles, comments and text chunks from ``img`` in place."""
    img.info = {key: img.info[key] for key in _PIXEL_INFO_KEYS if key in img.info}
    return img


def save_image(img: Image.Image, output_path: str | Path) -> str:
    """
    Write ``img`` in the format implied by the output extension.

    Raises:
        ValueError: If the extension maps to no known format
        OSError: If Pillow fails to write the image
    """
    output_path = Path(output_path)
    fmt = Image.registered_extensions().get(output_path.suffix.lower())
    if fmt is None:
        raise ValueError(f"Unknown output image format: {output_path.suffix!r}")

    # JPEG does not support alpha channel or palettes
    if fmt == "JPEG" and img.mode not in ("RGB", "L", "CMYK"):
        img = img.convert("RGB")

    img.save(output_path, format=fmt)
    return str(output_path)
