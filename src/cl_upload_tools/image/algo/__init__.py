from .image_resize import crop_thumbnail, save_image, scale_image, scaled_height, strip_metadata

__all__ = ["crop_thumbnail", "save_image", "scale_image", "scaled_height", "strip_metadata"]
