"""Common module - protocols, schemas, errors and storage."""

from .errors import (
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
    code_to_message,
)
from .media_repository import MediaRepository
from .schemas import (
    ImageProperties,
    MediaRecord,
    ResizeSpec,
    ResolvedUpload,
    UploadPolicy,
    UploadRequest,
)
from .upload_storage import FileMoveError, UploadStorage, UploadStorageError
from .upload_storage_impl import LocalUploadStorage

__all__ = [
    "CannotMoveFileError",
    "FileMoveError",
    "ImageError",
    "ImageProperties",
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
    "UploadStorageError",
    "WrongExtensionError",
    "WrongMimeTypeError",
    "code_to_message",
]
