"""
UploadStorage Protocol - the move-temp-file-to-destination primitive.

Design goals:
- Claim a destination name atomically before anything is written there
- Move the staged temp file in a single step
- Leave nothing behind in the destination directory on failure
"""

from __future__ import annotations

from os import PathLike
from typing import Protocol, runtime_checkable


class UploadStorageError(Exception):
    """Base class for storage-related errors."""


class FileMoveError(UploadStorageError):
    def __init__(self, source: str | PathLike[str], destination: str | PathLike[str]):
        self.source: str = str(source)
        self.destination: str = str(destination)
        super().__init__(f"Failed to move '{self.source}' to '{self.destination}'")


@runtime_checkable
class UploadStorage(Protocol):
    """
    Protocol for persisting an uploaded temp file.

    Callers claim a destination first, then move into it. A claimed path
    that is not moved into must be released.
    """

    def exists(self, path: str | PathLike[str]) -> bool:
        """Whether something already occupies ``path``."""
        ...

    def claim(self, path: str | PathLike[str]) -> bool:
        """
        Atomically reserve ``path``.

        Returns:
            True if the path was free and is now reserved, False if it was
            already taken.
        """
        ...

    def release(self, path: str | PathLike[str]) -> None:
        """Drop a reservation made by ``claim``."""
        ...

    def move(self, source: str | PathLike[str], destination: str | PathLike[str]) -> None:
        """
        Move ``source`` onto the claimed ``destination``.

        Raises:
            FileMoveError: if the file could not be moved.
        """
        ...
