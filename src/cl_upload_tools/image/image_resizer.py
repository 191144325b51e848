"""Resize policy and resize/thumbnail operations."""

from __future__ import annotations

from os import PathLike

from loguru import logger
from PIL import Image

from ..common.schemas import ResizeSpec
from .algo.image_resize import (
    crop_thumbnail,
    save_image,
    scale_image,
    scaled_height,
    strip_metadata,
)
from .image_source import ImageSource


def resize_permitted(
    source_width: int,
    width: int,
    height: int | None = None,
    max_width: int | None = None,
    max_height: int | None = None,
) -> bool:
    """
    Decide whether a resize to ``width`` (and optionally ``height``) is allowed.

    The width must fit either the source width or ``max_width``. Once it
    does, the height is only checked when both ``height`` and ``max_height``
    are given. The source height is never consulted.
    """
    if not (source_width >= width or (max_width is not None and max_width >= width)):
        return False

    if height is None or max_height is None:
        return True

    return max_height >= height


class ImageResizer:
    """
    Produces resized or cropped derivatives of an ImageSource.

    ``max_width`` and ``max_height`` bound how far an image may be enlarged.
    The source file is never modified.
    """

    def __init__(
        self,
        source: ImageSource,
        max_width: int | None = None,
        max_height: int | None = None,
    ):
        self.source: ImageSource = source
        self.max_width: int | None = max_width
        self.max_height: int | None = max_height

    @classmethod
    def open(
        cls,
        path: str | PathLike[str],
        max_width: int | None = None,
        max_height: int | None = None,
    ) -> ImageResizer:
        """
        Raises:
            InvalidImageError: the file is not a GIF, JPEG or PNG image
        """
        return cls(ImageSource.open(path), max_width, max_height)

    def can_resize(self, width: int, height: int | None = None) -> bool:
        return resize_permitted(self.source.width, width, height, self.max_width, self.max_height)

    def resize(
        self,
        destination: str | PathLike[str],
        width: int,
        height: int | None = None,
        crop: bool = False,
    ) -> bool:
        """
        Write a resized copy of the source to ``destination``.

        With ``crop`` and a ``height`` the output is exactly width x height,
        centre-cropped. Otherwise the height follows from the source aspect
        ratio. Metadata is stripped from the output.

        Returns:
            False, writing nothing, if the resize is not permitted
        """
        spec = ResizeSpec(width=width, height=height, crop=crop)
        if not self.can_resize(spec.width, spec.height):
            logger.warning(
                f"Resize of {self.source.path} to {spec.width}x{spec.height} not permitted"
            )
            return False

        with Image.open(self.source.path) as img:
            crop_height = spec.crop_height
            if crop_height is not None:
                resized = crop_thumbnail(img, spec.width, crop_height)
            else:
                resized = scale_image(img, spec.width, scaled_height(spec.width, self.source.ratio))

            _ = save_image(strip_metadata(resized), destination)

        logger.info(f"Resized {self.source.path} to {resized.width}x{resized.height}: {destination}")
        return True

    def thumbnail(self, destination: str | PathLike[str], width: int, height: int) -> bool:
        return self.resize(destination, width, height, crop=True)
