from os import PathLike

import magic
from loguru import logger

DEFAULT_MIME_TYPE = "application/octet-stream"


def detect_mime_type(path: str | PathLike[str]) -> str | None:
    """
    Detect the MIME type of a file from its content using libmagic.

    The client-declared type is never consulted. Returns None when the file
    cannot be read.
    """
    mime = magic.Magic(mime=True)
    try:
        file_type = mime.from_file(str(path))
    except (OSError, magic.MagicException) as exc:
        logger.debug(f"MIME detection failed for {path}: {exc}")
        return None
    return file_type or DEFAULT_MIME_TYPE
