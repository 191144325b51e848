"""MediaRepository Protocol - interface for media metadata persistence."""

from typing import Protocol, runtime_checkable

from .schemas import MediaRecord


@runtime_checkable
class MediaRepository(Protocol):
    """Protocol for storing metadata of accepted uploads.

    Applications implement this to record ``{name, url, ext}`` for each
    committed upload.
    """

    def save_media_file(self, record: MediaRecord) -> None:
        """Persist the record of a committed upload."""
        ...
