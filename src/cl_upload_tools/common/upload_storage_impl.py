from __future__ import annotations

import errno
import os
import shutil
from os import PathLike
from pathlib import Path
from typing import override

from loguru import logger

from .upload_storage import FileMoveError, UploadStorage


class LocalUploadStorage(UploadStorage):
    """
    Local filesystem implementation of UploadStorage.

    Claims are zero-byte placeholders created with O_CREAT | O_EXCL, so two
    writers can never both own the same name. Moves use ``os.replace`` and
    fall back to a copy when source and destination live on different
    devices.
    """

    @override
    def exists(self, path: str | PathLike[str]) -> bool:
        return os.path.lexists(path)

    @override
    def claim(self, path: str | PathLike[str]) -> bool:
        try:
            fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
        except FileExistsError:
            return False
        os.close(fd)
        return True

    @override
    def release(self, path: str | PathLike[str]) -> None:
        try:
            os.unlink(path)
        except FileNotFoundError:
            pass

    @override
    def move(self, source: str | PathLike[str], destination: str | PathLike[str]) -> None:
        src = Path(source)
        if not src.is_file():
            raise FileMoveError(source, destination)

        try:
            os.replace(src, destination)
        except OSError as exc:
            if exc.errno != errno.EXDEV:
                raise FileMoveError(source, destination) from exc
            logger.debug(f"Cross-device move, copying {src} to {destination}")
            try:
                _ = shutil.copyfile(src, destination)
                src.unlink()
            except OSError as copy_exc:
                raise FileMoveError(source, destination) from copy_exc
