"""Format-validated source image with cached properties."""

from __future__ import annotations

from enum import Enum, auto
from os import PathLike
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ..common.errors import InvalidImageError
from ..common.schemas import ImageProperties


# Pillow names JPEGs carrying a multi-picture segment (common on phone
# cameras) after the container rather than the codec.
_FORMAT_ALIASES: dict[str, str] = {"MPO": "JPEG"}


class _Unread(Enum):
    UNREAD = auto()


class ImageSource:
    """
    An image file whose width, height and format are read once on demand.

    Only GIF, JPEG and PNG are accepted. A file that fails validation stays
    invalid: every later property access raises InvalidImageError again.
    """

    def __init__(self, path: str | PathLike[str]):
        self.path: Path = Path(path)
        self._state: ImageProperties | InvalidImageError | _Unread = _Unread.UNREAD

    @classmethod
    def open(cls, path: str | PathLike[str]) -> ImageSource:
        """Create a source and validate it immediately."""
        source = cls(path)
        _ = source.properties()
        return source

    def _read(self) -> ImageProperties | InvalidImageError:
        try:
            with Image.open(self.path) as img:
                width, height = img.size
                image_format = img.format or ""
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            logger.debug(f"Could not decode {self.path}: {exc}")
            return InvalidImageError(self.path, InvalidImageError.NOT_AN_IMAGE)

        image_format = _FORMAT_ALIASES.get(image_format, image_format)
        properties = ImageProperties(width=width, height=height, image_format=image_format)
        if not properties.supported:
            return InvalidImageError(self.path, InvalidImageError.UNSUPPORTED_TYPE)
        return properties

    def properties(self) -> ImageProperties:
        if isinstance(self._state, _Unread):
            self._state = self._read()

        if isinstance(self._state, InvalidImageError):
            raise InvalidImageError(self._state.path, self._state.reason)
        return self._state

    @property
    def width(self) -> int:
        return self.properties().width

    @property
    def height(self) -> int:
        return self.properties().height

    @property
    def image_format(self) -> str:
        return self.properties().image_format

    @property
    def ratio(self) -> float:
        """Width / height of the decoded image."""
        return self.properties().ratio
