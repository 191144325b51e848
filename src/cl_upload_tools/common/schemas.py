"""Data structures for uploads and image resizing."""

from __future__ import annotations

import tempfile
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from ..utils.media_types import detect_mime_type
from ..utils.sanitize import PathInfo, path_info
from .errors import InvalidUploadDirectoryError, NoFilesUploadedError

IMAGE_MIME_TYPES: frozenset[str] = frozenset({"image/jpeg", "image/png", "image/gif"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset({"jpg", "jpeg", "png", "gif"})


# ─────────────────────────────────────────────────────────────
# Upload request
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class UploadRequest:
    """One uploaded file as staged by the transport layer.

    ``detected_mime_type`` and ``extension`` are computed on first access
    and cached; a cached ``None`` means "computed, nothing found".
    """

    original_name: str
    temp_path: Path
    declared_size: int = 0
    transport_error_code: int = 0
    name_splitter: Callable[[str], PathInfo] = field(default=path_info, repr=False, compare=False)
    mime_detector: Callable[[Path], str | None] = field(
        default=detect_mime_type, repr=False, compare=False
    )

    @classmethod
    def from_files(
        cls,
        files: Mapping[str, Mapping[str, object]],
        field_name: str,
        **collaborators: Callable[..., object],
    ) -> UploadRequest:
        """Build a request from the transport's per-field upload table.

        Each record carries ``name``, ``tmp_name``, ``size`` and ``error``.
        A transport-declared ``type`` is ignored in favour of content
        detection. List values (multi-valued fields) contribute their first
        element only.
        """
        if len(files) == 0 or field_name not in files:
            raise NoFilesUploadedError(field_name)

        record: dict[str, object] = {}
        for key, value in files[field_name].items():
            if key == "type":
                continue
            if isinstance(value, (list, tuple)):
                value = value[0] if value else None
            record[key] = value

        return cls(
            original_name=str(record.get("name") or ""),
            temp_path=Path(str(record.get("tmp_name") or "")),
            declared_size=int(record.get("size") or 0),  # pyright: ignore[reportArgumentType]
            transport_error_code=int(record.get("error") or 0),  # pyright: ignore[reportArgumentType]
            **collaborators,  # pyright: ignore[reportArgumentType]
        )

    @cached_property
    def _path_info(self) -> PathInfo:
        return self.name_splitter(self.original_name)

    @cached_property
    def detected_mime_type(self) -> str | None:
        mime_type = self.mime_detector(self.temp_path)
        logger.debug(f"Detected MIME type {mime_type!r} for {self.original_name!r}")
        return mime_type

    @property
    def extension(self) -> str | None:
        return self._path_info.extension

    @property
    def upload_file_name(self) -> str:
        """Original base name without directory and extension."""
        return self._path_info.filename


# ─────────────────────────────────────────────────────────────
# Upload policy (configuration)
# ─────────────────────────────────────────────────────────────


class UploadPolicy(BaseModel):
    """Caller-supplied upload configuration.

    ``None`` for an allow-list means unrestricted. The destination directory
    must exist when the policy is built.
    """

    allowed_mime_types: frozenset[str] | None = Field(
        default=None,
        description="Allowed MIME types (None = all)",
    )
    allowed_extensions: frozenset[str] | None = Field(
        default=None,
        description="Allowed file extensions without the dot (None = all)",
    )
    destination_directory: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Existing directory the accepted file is moved into",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @field_validator("destination_directory")
    @classmethod
    def validate_destination_directory(cls, v: Path) -> Path:
        if not v.is_dir():
            raise InvalidUploadDirectoryError(v)
        return v

    @classmethod
    def images(cls, destination_directory: str | Path | None = None) -> UploadPolicy:
        """Policy accepting GIF, JPEG and PNG images only."""
        kwargs: dict[str, object] = {}
        if destination_directory is not None:
            kwargs["destination_directory"] = Path(destination_directory)
        return cls(
            allowed_mime_types=IMAGE_MIME_TYPES,
            allowed_extensions=IMAGE_EXTENSIONS,
            **kwargs,  # pyright: ignore[reportArgumentType]
        )

    def mime_type_allowed(self, mime_type: str | None) -> bool:
        if self.allowed_mime_types is None:
            return True
        return mime_type is not None and mime_type in self.allowed_mime_types

    def extension_allowed(self, extension: str | None) -> bool:
        if self.allowed_extensions is None:
            return True
        return extension is not None and extension in self.allowed_extensions


# ─────────────────────────────────────────────────────────────
# Resolved upload
# ─────────────────────────────────────────────────────────────


class MediaRecord(BaseModel):
    """Payload handed to the media-persistence collaborator."""

    name: str
    url: str
    ext: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ResolvedUpload(BaseModel):
    """A validated, renamed upload that has not been moved yet.

    Consumed exactly once by ``FileUploader.commit``.
    """

    safe_name: str = Field(..., min_length=1)
    destination_directory: Path
    temp_path: Path
    upload_file_name: str
    extension: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    _committed: bool = PrivateAttr(default=False)

    @property
    def destination_path(self) -> Path:
        return self.destination_directory / self.safe_name

    @property
    def committed(self) -> bool:
        return self._committed

    def mark_committed(self) -> None:
        self._committed = True

    def media_record(self) -> MediaRecord:
        return MediaRecord(name=self.upload_file_name, url=self.safe_name, ext=self.extension)


# ─────────────────────────────────────────────────────────────
# Images
# ─────────────────────────────────────────────────────────────


class ImageProperties(BaseModel):
    """Decoded image dimensions and format."""

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset({"GIF", "JPEG", "PNG"})

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    image_format: str

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def ratio(self) -> float:
        return self.width / self.height

    @property
    def supported(self) -> bool:
        return self.image_format in self.SUPPORTED_FORMATS


class ResizeSpec(BaseModel):
    """Requested output size. ``crop`` only applies when a height is given."""

    width: int = Field(..., gt=0, description="Target width in pixels")
    height: int | None = Field(default=None, gt=0, description="Target height in pixels")
    crop: bool = False

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")

    @property
    def crop_height(self) -> int | None:
        """Height of the exact crop, or None when the output is only scaled."""
        return self.height if self.crop else None

