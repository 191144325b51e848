"""Filename helpers: path-info splitting and the default sanitizer."""

import re
import unicodedata
from typing import NamedTuple

_UNSAFE_RUN = re.compile(r"[^a-z0-9_-]+")

DEFAULT_BASENAME = "file"


class PathInfo(NamedTuple):
    filename: str
    extension: str | None


def path_info(name: str) -> PathInfo:
    """
    Split an untrusted client filename into base name and extension.

    Both ``/`` and ``\\`` count as directory separators. The extension is the
    text after the last dot of the base name; a name without a dot has no
    extension (``None``), a trailing dot gives an empty one.

    >>> path_info("photos/holiday.tar.gz")
    PathInfo(filename='holiday.tar', extension='gz')
    """
    basename = re.split(r"[\\/]", name)[-1]
    if "." not in basename:
        return PathInfo(basename, None)
    filename, _, extension = basename.rpartition(".")
    return PathInfo(filename, extension)


def sanitize_filename(name: str) -> str:
    """
    Turn an untrusted base name into a filesystem-safe slug.

    Accents are folded to ASCII, everything is lowercased and each run of
    characters outside ``[a-z0-9_-]`` becomes a single ``-``.
    """
    normalized = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii").lower()
    )
    normalized = _UNSAFE_RUN.sub("-", normalized).strip("-")
    return normalized or DEFAULT_BASENAME
