"""Image source validation and resizing."""

from .image_resizer import ImageResizer, resize_permitted
from .image_source import ImageSource

__all__ = ["ImageResizer", "ImageSource", "resize_permitted"]
