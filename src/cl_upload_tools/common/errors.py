"""Upload and image error taxonomy.

Transport error codes (1-8) are passed through unchanged from the transport
layer, local codes (11-15) are raised by the upload pipeline itself. Every
code maps to exactly one message in ``ERROR_MESSAGES``.
"""

from __future__ import annotations

from enum import IntEnum
from os import PathLike
from typing import Final


class UploadErrorCode(IntEnum):
    OK = 0

    # Transport-level codes
    INI_SIZE = 1
    FORM_SIZE = 2
    PARTIAL = 3
    NO_FILE = 4
    NO_TMP_DIR = 6
    CANT_WRITE = 7
    EXTENSION = 8

    # Pipeline codes
    FILE_WRONG_MIME = 11
    FILE_WRONG_EXTENSION = 12
    NO_FILES_UPLOADED = 13
    INVALID_UPLOAD_DIR = 14
    CAN_NOT_MOVE_FILE = 15


ERROR_MESSAGES: Final[dict[int, str]] = {
    UploadErrorCode.INI_SIZE: "The uploaded file exceeds the upload_max_filesize directive in php.ini",
    UploadErrorCode.FORM_SIZE: (
        "The uploaded file exceeds the MAX_FILE_SIZE directive that was specified in the HTML form"
    ),
    UploadErrorCode.PARTIAL: "The uploaded file was only partially uploaded",
    UploadErrorCode.NO_FILE: "No file was uploaded",
    UploadErrorCode.NO_TMP_DIR: "Missing a temporary folder",
    UploadErrorCode.CANT_WRITE: "Failed to write file to disk",
    UploadErrorCode.EXTENSION: "File upload stopped by extension",
    UploadErrorCode.FILE_WRONG_MIME: "File is of the wrong MIME type",
    UploadErrorCode.FILE_WRONG_EXTENSION: "File is of the wrong extension",
    UploadErrorCode.NO_FILES_UPLOADED: "No files were uploaded",
    UploadErrorCode.INVALID_UPLOAD_DIR: "User set upload directory does not exist",
    UploadErrorCode.CAN_NOT_MOVE_FILE: "Can not move the uploaded file",
}

UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown upload error"


def code_to_message(code: int) -> str:
    """Return the fixed message for an upload error code."""
    return ERROR_MESSAGES.get(code, UNKNOWN_ERROR_MESSAGE)


# ---------------------------------------------------------------------------
# Upload errors
# ---------------------------------------------------------------------------


class UploadError(Exception):
    """Base class for upload errors. The message is derived from the code."""

    def __init__(self, code: int):
        self.code: int = int(code)
        self.message: str = code_to_message(self.code)
        super().__init__(self.message)

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class NoFilesUploadedError(UploadError):
    def __init__(self, field_name: str | None = None):
        self.field_name: str | None = field_name
        super().__init__(UploadErrorCode.NO_FILES_UPLOADED)


class InvalidUploadDirectoryError(UploadError):
    def __init__(self, directory: str | PathLike[str]):
        self.directory: str = str(directory)
        super().__init__(UploadErrorCode.INVALID_UPLOAD_DIR)


class WrongMimeTypeError(UploadError):
    def __init__(self, mime_type: str | None):
        self.mime_type: str | None = mime_type
        super().__init__(UploadErrorCode.FILE_WRONG_MIME)


class WrongExtensionError(UploadError):
    def __init__(self, extension: str | None):
        self.extension: str | None = extension
        super().__init__(UploadErrorCode.FILE_WRONG_EXTENSION)


class TransportError(UploadError):
    """Failure reported by the transport layer (size exceeded, partial, ...)."""


class CannotMoveFileError(UploadError):
    def __init__(self, destination: str | PathLike[str]):
        self.destination: str = str(destination)
        super().__init__(UploadErrorCode.CAN_NOT_MOVE_FILE)


# ---------------------------------------------------------------------------
# Image errors
# ---------------------------------------------------------------------------


class ImageError(Exception):
    """Base class for image-related errors."""


class InvalidImageError(ImageError):
    NOT_AN_IMAGE: Final[str] = "File is not a valid image"
    UNSUPPORTED_TYPE: Final[str] = "Image type is not supported"

    def __init__(self, path: str | PathLike[str], reason: str = NOT_AN_IMAGE):
        self.path: str = str(path)
        self.reason: str = reason
        super().__init__(f"{reason}: {self.path}")
