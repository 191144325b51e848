"""cl_upload_tools - Upload validation, safe naming and image resizing."""

from .common.errors import (
    CannotMoveFileError,
    ImageError,
    InvalidImageError,
    InvalidUploadDirectoryError,
    NoFilesUploadedError,
    TransportError,
    UploadError,
    UploadErrorCode,
    WrongExtensionError,
    WrongMimeTypeError,
)
from .common.media_repository import MediaRepository
from .common.schemas import (
    ImageProperties,
    MediaRecord,
    ResizeSpec,
    ResolvedUpload,
    UploadPolicy,
    UploadRequest,
)
from .common.upload_storage import UploadStorage
from .common.upload_storage_impl import LocalUploadStorage
from .image import ImageResizer, ImageSource, resize_permitted
from .uploader import FileUploader, upload_file

__version__ = "0.1.0"

__all__ = [
    "CannotMoveFileError",
    "FileUploader",
    "ImageError",
    "ImageProperties",
    "ImageResizer",
    "ImageSource",
    "InvalidImageError",
    "InvalidUploadDirectoryError",
    "LocalUploadStorage",
    "MediaRecord",
    "MediaRepository",
    "NoFilesUploadedError",
    "ResizeSpec",
    "ResolvedUpload",
    "TransportError",
    "UploadError",
    "UploadErrorCode",
    "UploadPolicy",
    "UploadRequest",
    "UploadStorage",
    "WrongExtensionError",
    "WrongMimeTypeError",
    "__version__",
    "resize_permitted",
    "upload_file",
]
